from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..database.repositories import (
    AnalyticsRepository,
    BlogPostRepository,
    ExperienceRepository,
    MessageRepository,
    ProfileRepository,
    ProjectRepository,
    SettingsRepository,
    SkillRepository,
    TestimonialRepository,
    UserRepository,
)
from ..dto.portfolio import BlogPostOut, ExperienceOut, SkillOut, TestimonialOut
from ..services.analytics_service import AnalyticsService
from ..services.portfolio_service import EntryService, ExperienceService, ProjectService
from ..services.profile_service import ProfileService
from .auth_dependencies import get_user_repository


def get_profile_repository(db: AsyncSession = Depends(get_db)) -> ProfileRepository:
    return ProfileRepository(db)


def get_settings_repository(db: AsyncSession = Depends(get_db)) -> SettingsRepository:
    return SettingsRepository(db)


def get_project_repository(db: AsyncSession = Depends(get_db)) -> ProjectRepository:
    return ProjectRepository(db)


def get_skill_repository(db: AsyncSession = Depends(get_db)) -> SkillRepository:
    return SkillRepository(db)


def get_experience_repository(db: AsyncSession = Depends(get_db)) -> ExperienceRepository:
    return ExperienceRepository(db)


def get_testimonial_repository(db: AsyncSession = Depends(get_db)) -> TestimonialRepository:
    return TestimonialRepository(db)


def get_blog_post_repository(db: AsyncSession = Depends(get_db)) -> BlogPostRepository:
    return BlogPostRepository(db)


def get_message_repository(db: AsyncSession = Depends(get_db)) -> MessageRepository:
    return MessageRepository(db)


def get_analytics_repository(db: AsyncSession = Depends(get_db)) -> AnalyticsRepository:
    return AnalyticsRepository(db)


def get_profile_service(
    user_repo: UserRepository = Depends(get_user_repository),
    profile_repo: ProfileRepository = Depends(get_profile_repository),
    settings_repo: SettingsRepository = Depends(get_settings_repository),
) -> ProfileService:
    return ProfileService(user_repo=user_repo, profile_repo=profile_repo, settings_repo=settings_repo)


def get_project_service(
    project_repo: ProjectRepository = Depends(get_project_repository),
    analytics_repo: AnalyticsRepository = Depends(get_analytics_repository),
) -> ProjectService:
    return ProjectService(project_repo, analytics_repo)


def get_skill_service(repo: SkillRepository = Depends(get_skill_repository)) -> EntryService[SkillOut]:
    return EntryService(repo, SkillOut)


def get_experience_service(repo: ExperienceRepository = Depends(get_experience_repository)) -> ExperienceService:
    return ExperienceService(repo, ExperienceOut)


def get_testimonial_service(
    repo: TestimonialRepository = Depends(get_testimonial_repository),
) -> EntryService[TestimonialOut]:
    return EntryService(repo, TestimonialOut)


def get_blog_post_service(repo: BlogPostRepository = Depends(get_blog_post_repository)) -> EntryService[BlogPostOut]:
    return EntryService(repo, BlogPostOut)


def get_analytics_service(
    analytics_repo: AnalyticsRepository = Depends(get_analytics_repository),
    message_repo: MessageRepository = Depends(get_message_repository),
    user_repo: UserRepository = Depends(get_user_repository),
    project_repo: ProjectRepository = Depends(get_project_repository),
) -> AnalyticsService:
    return AnalyticsService(
        analytics_repo=analytics_repo,
        message_repo=message_repo,
        user_repo=user_repo,
        project_repo=project_repo,
    )
