from datetime import date, datetime
from typing import Annotated, Any, Optional

from pydantic import AfterValidator, BaseModel, BeforeValidator

from ..auth.validators import validate_http_url


def coerce_date(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and "T" in value:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    return value


def not_null(value: Any) -> Any:
    if value is None:
        raise ValueError("must not be null")
    return value


DateLike = Annotated[date, BeforeValidator(coerce_date)]
HttpUrlStr = Annotated[str, AfterValidator(validate_http_url)]


class MessageResponse(BaseModel):
    message: str


class UpdateModel(BaseModel):
    """Base for PATCH payloads: only keys the client sent are written."""

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


def empty_if_none(value: Optional[Any], empty: Any) -> Any:
    return empty if value is None else value
