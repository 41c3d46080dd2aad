from .base import OwnedRepository
from .user_repository import UserRepository, ProfileRepository
from .settings_repository import SettingsRepository
from .project_repository import ProjectRepository
from .entry_repositories import SkillRepository, ExperienceRepository, TestimonialRepository, BlogPostRepository
from .message_repository import MessageRepository
from .analytics_repository import AnalyticsRepository

__all__ = [
    "OwnedRepository",
    "UserRepository",
    "ProfileRepository",
    "SettingsRepository",
    "ProjectRepository",
    "SkillRepository",
    "ExperienceRepository",
    "TestimonialRepository",
    "BlogPostRepository",
    "MessageRepository",
    "AnalyticsRepository",
]
