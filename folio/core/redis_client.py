from typing import Optional

from redis.asyncio import Redis

from .logger import logger


def create_redis_client(url: Optional[str]) -> Optional[Redis]:
    if not url:
        logger.info("REDIS_URL not set, rate limiting and token revocation disabled")
        return None
    return Redis.from_url(url, decode_responses=True)
