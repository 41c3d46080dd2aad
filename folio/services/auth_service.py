from datetime import datetime, timezone
from typing import Optional

from redis.asyncio import Redis

from ..auth.entities.user import Principal
from ..auth.security import get_password_hash, verify_against_dummy, verify_password
from ..auth.tokens import create_access_token, create_password_reset_token, decode_token
from ..auth.validators import normalize_email
from ..config import Settings
from ..contracts.notifications import IPasswordResetNotifier
from ..core import (
    clear_rate_limit,
    get_login_rate_key,
    get_registration_rate_key,
    increment_rate_limit,
    is_rate_limited,
)
from ..core.exceptions import Conflict, CredentialInvalid, InvalidCredentials, RateLimited
from ..core.logger import logger
from ..database.repositories.user_repository import UserRepository
from ..dto.auth import AuthResponse, LoginRequest, PasswordResetRequest, RegisterRequest, UserOut
from ..dto.common import MessageResponse

PASSWORD_RESET_MESSAGE = "If an account with that email exists, a password reset link has been sent."


def revoked_token_key(jti: str) -> str:
    return f"revoked_token:{jti}"


class AuthService:
    def __init__(
        self,
        user_repo: UserRepository,
        settings: Settings,
        redis: Optional[Redis] = None,
        notifier: Optional[IPasswordResetNotifier] = None,
    ):
        self.user_repo = user_repo
        self.settings = settings
        self.redis = redis
        self.notifier = notifier

    async def register(self, payload: RegisterRequest, client_ip: str) -> AuthResponse:
        rate_key = get_registration_rate_key(client_ip)
        if await is_rate_limited(self.redis, rate_key):
            logger.warning(f"Registration rate limit exceeded for IP: {client_ip}")
            raise RateLimited("Too many registration attempts. Try again later")

        email = normalize_email(payload.email)
        if await self.user_repo.get_by_email(email) is not None:
            await increment_rate_limit(self.redis, rate_key)
            raise Conflict("User with this email already exists", "USER_ALREADY_EXISTS")

        try:
            user = await self.user_repo.create_with_profile(
                email=email,
                password_hash=get_password_hash(payload.password_hash),
                name=payload.name,
            )
        except Conflict:
            await increment_rate_limit(self.redis, rate_key)
            raise

        logger.info(f"User registered successfully: {email}")
        return self._auth_response(user)

    async def login(self, payload: LoginRequest) -> AuthResponse:
        email = normalize_email(payload.email)
        rate_key = get_login_rate_key(email)
        if await is_rate_limited(self.redis, rate_key):
            logger.warning(f"Login rate limit exceeded for: {email}")
            raise RateLimited("Too many login attempts")

        user = await self.user_repo.get_by_email(email)
        if user is None:
            is_valid = verify_against_dummy(payload.password)
        else:
            is_valid = verify_password(payload.password, user.password_hash)

        if not is_valid:
            await increment_rate_limit(self.redis, rate_key)
            logger.warning(f"Failed login attempt for: {email}")
            raise InvalidCredentials()

        await clear_rate_limit(self.redis, rate_key)
        logger.info(f"User logged in successfully: {email}")
        return self._auth_response(user)

    async def request_password_reset(self, payload: PasswordResetRequest) -> MessageResponse:
        email = normalize_email(payload.email)
        user = await self.user_repo.get_by_email(email)
        if user is not None and self.notifier is not None:
            reset_token = create_password_reset_token(self.settings, user.user_id)
            await self.notifier.send_password_reset(user.email, reset_token)
        return MessageResponse(message=PASSWORD_RESET_MESSAGE)

    async def authenticate(self, token: str) -> Principal:
        payload = decode_token(self.settings, token)
        if await self._is_revoked(payload.get("jti")):
            logger.warning(f"Revoked token presented for user {payload['sub']}")
            raise CredentialInvalid()

        user = await self.user_repo.get_by_id(payload["sub"])
        if user is None:
            logger.warning(f"Token subject {payload['sub']} no longer exists")
            raise CredentialInvalid("Invalid token")

        return Principal(id=user.user_id, email=user.email, name=user.name, created_at=user.created_at)

    async def logout(self, token: str) -> None:
        payload = decode_token(self.settings, token)
        if self.redis is None or not payload.get("jti"):
            return

        expires_at = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
        ttl = int((expires_at - datetime.now(timezone.utc)).total_seconds())
        try:
            await self.redis.set(revoked_token_key(payload["jti"]), "1", ex=max(ttl, 1))
            logger.info(f"Token revoked for user {payload['sub']}")
        except Exception as e:
            logger.error(f"Redis error during logout: {e}")

    async def _is_revoked(self, jti: Optional[str]) -> bool:
        if self.redis is None or not jti:
            return False
        try:
            return bool(await self.redis.exists(revoked_token_key(jti)))
        except Exception as e:
            logger.error(f"Redis error checking token revocation: {e}")
            return False

    def _auth_response(self, user) -> AuthResponse:
        token = create_access_token(self.settings, user.user_id, user.email)
        return AuthResponse(user=UserOut.model_validate(user), token=token)
