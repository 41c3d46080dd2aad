from .logger import logger
from .rate_limiter import (
    is_rate_limited,
    increment_rate_limit,
    clear_rate_limit,
    get_login_rate_key,
    get_registration_rate_key,
)

__all__ = [
    "logger",
    "is_rate_limited",
    "increment_rate_limit",
    "clear_rate_limit",
    "get_login_rate_key",
    "get_registration_rate_key",
]
