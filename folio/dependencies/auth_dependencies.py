from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from redis.asyncio import Redis
from sqlalchemy.ext.asyncio import AsyncSession

from ..auth.entities.user import Principal
from ..config import Settings
from ..contracts.notifications import IPasswordResetNotifier
from ..core.exceptions import CredentialMissing
from ..database import get_db
from ..database.repositories.user_repository import UserRepository
from ..services.auth_service import AuthService
from .common import get_notifier, get_redis, get_settings

bearer_scheme = HTTPBearer(auto_error=False)


def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


def get_auth_service(
    user_repo: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_settings),
    redis: Optional[Redis] = Depends(get_redis),
    notifier: IPasswordResetNotifier = Depends(get_notifier),
) -> AuthService:
    return AuthService(user_repo=user_repo, settings=settings, redis=redis, notifier=notifier)


async def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> str:
    if credentials is None or not credentials.credentials:
        raise CredentialMissing()
    return credentials.credentials


async def get_current_principal(
    token: str = Depends(get_bearer_token),
    auth_service: AuthService = Depends(get_auth_service),
) -> Principal:
    return await auth_service.authenticate(token)
