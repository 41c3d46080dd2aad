import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt

from ..config import Settings
from ..core.exceptions import CredentialInvalid
from ..core.logger import logger

ISSUER = "folio-auth"
AUDIENCE = "folio-app"

ACCESS_TOKEN = "access"
PASSWORD_RESET_TOKEN = "password_reset"


def _encode(settings: Settings, claims: Dict[str, Any], expires_delta: timedelta) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        **claims,
        "iat": now,
        "exp": now + expires_delta,
        "jti": secrets.token_urlsafe(16),
        "iss": ISSUER,
        "aud": AUDIENCE,
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def create_access_token(
    settings: Settings,
    user_id: str,
    email: str,
    expires_delta: Optional[timedelta] = None,
) -> str:
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    return _encode(settings, {"sub": user_id, "email": email, "type": ACCESS_TOKEN}, expires_delta)


def create_password_reset_token(settings: Settings, user_id: str) -> str:
    expires_delta = timedelta(minutes=settings.PASSWORD_RESET_TOKEN_EXPIRE_MINUTES)
    return _encode(settings, {"sub": user_id, "type": PASSWORD_RESET_TOKEN}, expires_delta)


def decode_token(settings: Settings, token: str, token_type: str = ACCESS_TOKEN) -> Dict[str, Any]:
    """Verify signature, expiry, issuer and audience; raise CredentialInvalid otherwise."""
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
            issuer=ISSUER,
            audience=AUDIENCE,
        )
    except JWTError as e:
        logger.warning(f"JWT decoding error: {e}")
        raise CredentialInvalid()

    if payload.get("type") != token_type or not payload.get("sub"):
        logger.warning("JWT with unexpected type or missing subject")
        raise CredentialInvalid()
    return payload
