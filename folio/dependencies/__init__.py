from .common import get_settings, get_redis, get_notifier, get_upload_storage
from .auth_dependencies import (
    get_user_repository,
    get_auth_service,
    get_bearer_token,
    get_current_principal,
)
from .portfolio_dependencies import (
    get_profile_service,
    get_project_service,
    get_skill_service,
    get_experience_service,
    get_testimonial_service,
    get_blog_post_service,
    get_analytics_service,
)
from .ownership_dependencies import (
    owned_user_id,
    existing_user_id,
    existing_project_id,
    owned_project_id,
    owned_skill_id,
    owned_experience_id,
    owned_testimonial_id,
    owned_post_id,
)

__all__ = [
    "get_settings",
    "get_redis",
    "get_notifier",
    "get_upload_storage",
    "get_user_repository",
    "get_auth_service",
    "get_bearer_token",
    "get_current_principal",
    "get_profile_service",
    "get_project_service",
    "get_skill_service",
    "get_experience_service",
    "get_testimonial_service",
    "get_blog_post_service",
    "get_analytics_service",
    "owned_user_id",
    "existing_user_id",
    "existing_project_id",
    "owned_project_id",
    "owned_skill_id",
    "owned_experience_id",
    "owned_testimonial_id",
    "owned_post_id",
]
