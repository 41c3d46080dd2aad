from typing import Optional
from urllib.parse import urlparse

from email_validator import EmailNotValidError, validate_email


def normalize_email(email: str) -> str:
    return email.strip().lower()


def normalize_and_validated_email(email: str) -> Optional[str]:
    try:
        validated = validate_email(email.strip(), check_deliverability=False)
        return normalize_email(validated.normalized)
    except EmailNotValidError:
        return None


def validate_http_url(value: str) -> str:
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError("not a valid URL")
    return value
