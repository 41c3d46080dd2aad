import secrets

from passlib.context import CryptContext

from ..core.logger import logger

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")

_dummy_hash = None


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        logger.warning("Stored password is not a recognised hash; rejecting login")
        return False


def generate_fake_hash() -> str:
    return pwd_context.hash(secrets.token_urlsafe(32))


def verify_against_dummy(plain_password: str) -> bool:
    """Spend the same hashing work as a real check when the account is unknown."""
    global _dummy_hash
    if _dummy_hash is None:
        _dummy_hash = generate_fake_hash()
    pwd_context.verify(plain_password, _dummy_hash)
    return False
