"""JSON-valued column types.

Values cross the persistence boundary as plain Python containers; how they
are laid out inside the JSON column is private to these decorators.
"""
from typing import Any, Dict, List, Optional

from sqlalchemy import JSON
from sqlalchemy.types import TypeDecorator


class ImageList(TypeDecorator):
    """Ordered list of image URLs, stored as ``{"images": [...]}``."""

    impl = JSON
    cache_ok = True

    def process_bind_param(self, value: Optional[List[str]], dialect) -> Optional[Dict[str, Any]]:
        if value is None:
            return None
        return {"images": list(value)}

    def process_result_value(self, value: Any, dialect) -> Optional[List[str]]:
        if value is None:
            return None
        if isinstance(value, dict):
            return list(value.get("images") or [])
        return list(value)


class StringMap(TypeDecorator):
    """String-keyed map of strings (social links, colour scheme)."""

    impl = JSON
    cache_ok = True

    def process_bind_param(self, value: Optional[Dict[str, str]], dialect) -> Optional[Dict[str, str]]:
        if value is None:
            return None
        return {str(k): str(v) for k, v in value.items()}

    def process_result_value(self, value: Any, dialect) -> Optional[Dict[str, str]]:
        if value is None:
            return None
        return dict(value)


class FreeformMap(TypeDecorator):
    """String-keyed map of arbitrary JSON values."""

    impl = JSON
    cache_ok = True

    def process_bind_param(self, value: Optional[Dict[str, Any]], dialect) -> Optional[Dict[str, Any]]:
        if value is None:
            return None
        return dict(value)

    def process_result_value(self, value: Any, dialect) -> Optional[Dict[str, Any]]:
        if value is None:
            return None
        return dict(value)
