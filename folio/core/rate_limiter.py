import logging
from typing import Optional

from redis.asyncio import Redis

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 5
WINDOW_SECONDS = 3600


async def is_rate_limited(redis: Optional[Redis], key: str, limit: int = MAX_ATTEMPTS) -> bool:
    if redis is None:
        return False
    try:
        attempts = await redis.get(key)
        return bool(attempts) and int(attempts) >= limit
    except Exception as e:
        logger.error(f"Redis error in is_rate_limited: {e}")
        return False


async def increment_rate_limit(redis: Optional[Redis], key: str) -> None:
    if redis is None:
        return
    try:
        await redis.incr(key)
        await redis.expire(key, WINDOW_SECONDS)
    except Exception as e:
        logger.error(f"Redis error in increment_rate_limit: {e}")


async def clear_rate_limit(redis: Optional[Redis], key: str) -> None:
    if redis is None:
        return
    try:
        await redis.delete(key)
    except Exception as e:
        logger.error(f"Redis error in clear_rate_limit: {e}")


def get_login_rate_key(email: str) -> str:
    return f"login_attempts:{email}"


def get_registration_rate_key(ip: str) -> str:
    return f"reg_attempts:{ip}"
