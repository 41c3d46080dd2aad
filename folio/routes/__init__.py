from .auth import router as auth_router
from .users import router as users_router
from .projects import router as projects_router
from .entries import router as entries_router
from .analytics import router as analytics_router
from .upload import router as upload_router
from .health import router as health_router

__all__ = [
    "auth_router",
    "users_router",
    "projects_router",
    "entries_router",
    "analytics_router",
    "upload_router",
    "health_router",
]
