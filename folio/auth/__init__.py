from .entities import Principal
from .ownership import ensure_owner, enforce_resource_owner
from .security import get_password_hash, verify_password, verify_against_dummy
from .tokens import create_access_token, create_password_reset_token, decode_token
from .validators import normalize_email, normalize_and_validated_email, validate_http_url

__all__ = [
    "Principal",
    "ensure_owner", "enforce_resource_owner",
    "get_password_hash", "verify_password", "verify_against_dummy",
    "create_access_token", "create_password_reset_token", "decode_token",
    "normalize_email", "normalize_and_validated_email", "validate_http_url",
]
