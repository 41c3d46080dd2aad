from fastapi import Depends

from ..auth.entities.user import Principal
from ..auth.ownership import enforce_resource_owner, ensure_owner
from ..core.exceptions import NotFound
from ..database.repositories import (
    BlogPostRepository,
    ExperienceRepository,
    ProjectRepository,
    SkillRepository,
    TestimonialRepository,
    UserRepository,
)
from .auth_dependencies import get_current_principal, get_user_repository
from .portfolio_dependencies import (
    get_blog_post_repository,
    get_experience_repository,
    get_project_repository,
    get_skill_repository,
    get_testimonial_repository,
)


async def owned_user_id(
    user_id: str,
    principal: Principal = Depends(get_current_principal),
) -> str:
    ensure_owner(principal, user_id, "account")
    return user_id


async def existing_user_id(
    user_id: str,
    user_repo: UserRepository = Depends(get_user_repository),
) -> str:
    if not await user_repo.exists(user_id):
        raise NotFound("User not found", "USER_NOT_FOUND")
    return user_id


async def existing_project_id(
    project_id: str,
    project_repo: ProjectRepository = Depends(get_project_repository),
) -> str:
    await project_repo.get_owner_id(project_id)
    return project_id


async def owned_project_id(
    project_id: str,
    principal: Principal = Depends(get_current_principal),
    project_repo: ProjectRepository = Depends(get_project_repository),
) -> str:
    return await enforce_resource_owner(principal, project_repo, project_id, "project")


async def owned_skill_id(
    skill_id: str,
    principal: Principal = Depends(get_current_principal),
    skill_repo: SkillRepository = Depends(get_skill_repository),
) -> str:
    return await enforce_resource_owner(principal, skill_repo, skill_id, "skill")


async def owned_experience_id(
    experience_id: str,
    principal: Principal = Depends(get_current_principal),
    experience_repo: ExperienceRepository = Depends(get_experience_repository),
) -> str:
    return await enforce_resource_owner(principal, experience_repo, experience_id, "experience")


async def owned_testimonial_id(
    testimonial_id: str,
    principal: Principal = Depends(get_current_principal),
    testimonial_repo: TestimonialRepository = Depends(get_testimonial_repository),
) -> str:
    return await enforce_resource_owner(principal, testimonial_repo, testimonial_id, "testimonial")


async def owned_post_id(
    post_id: str,
    principal: Principal = Depends(get_current_principal),
    post_repo: BlogPostRepository = Depends(get_blog_post_repository),
) -> str:
    return await enforce_resource_owner(principal, post_repo, post_id, "blog post")
