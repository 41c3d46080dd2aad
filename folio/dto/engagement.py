from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from .common import empty_if_none


class VisitorMessageCreate(BaseModel):
    visitor_email: Optional[EmailStr] = None
    visitor_message: str = Field(min_length=1)


class VisitorMessageOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    message_id: str
    user_id: str
    visitor_email: Optional[str] = None
    visitor_message: str
    sent_at: datetime


class VisitRequest(BaseModel):
    project_id: Optional[str] = None


class AnalyticsOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    analytics_id: str
    user_id: str
    visit_count: int
    popular_projects: Dict[str, Any] = {}
    interaction_data: Dict[str, Any] = {}

    @field_validator("popular_projects", "interaction_data", mode="before")
    @classmethod
    def _maps_default(cls, value):
        return empty_if_none(value, {})
