from .auth_service import AuthService
from .notification_service import LoggingPasswordResetNotifier
from .profile_service import ProfileService
from .portfolio_service import EntryService, ExperienceService, ProjectService
from .analytics_service import AnalyticsService
from .upload_service import UploadStorage

__all__ = [
    "AuthService",
    "LoggingPasswordResetNotifier",
    "ProfileService",
    "EntryService",
    "ExperienceService",
    "ProjectService",
    "AnalyticsService",
    "UploadStorage",
]
