from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common import DateLike, HttpUrlStr, UpdateModel, empty_if_none, not_null


class ProjectCreate(BaseModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    images: Optional[List[str]] = None
    project_url: Optional[HttpUrlStr] = None


class ProjectUpdate(UpdateModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    images: Optional[List[str]] = None
    project_url: Optional[HttpUrlStr] = None

    title_not_null = field_validator("title", mode="before")(not_null)


class ProjectOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    project_id: str
    user_id: str
    title: str
    description: Optional[str] = None
    images: List[str] = []
    project_url: Optional[str] = None

    @field_validator("images", mode="before")
    @classmethod
    def _images_default(cls, value):
        return empty_if_none(value, [])


class SkillCreate(BaseModel):
    skill_name: str = Field(min_length=1)
    proficiency_level: Optional[int] = None


class SkillUpdate(UpdateModel):
    skill_name: Optional[str] = Field(default=None, min_length=1)
    proficiency_level: Optional[int] = None

    name_not_null = field_validator("skill_name", mode="before")(not_null)


class SkillOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    skill_id: str
    user_id: str
    skill_name: str
    proficiency_level: Optional[int] = None


class ExperienceCreate(BaseModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    start_date: DateLike
    end_date: Optional[DateLike] = None


class ExperienceUpdate(UpdateModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    start_date: Optional[DateLike] = None
    end_date: Optional[DateLike] = None

    required_not_null = field_validator("title", "start_date", mode="before")(not_null)


class ExperienceOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    experience_id: str
    user_id: str
    title: str
    description: Optional[str] = None
    start_date: date
    end_date: Optional[date] = None


class TestimonialCreate(BaseModel):
    client_name: str = Field(min_length=1)
    feedback: Optional[str] = None


class TestimonialUpdate(UpdateModel):
    client_name: Optional[str] = Field(default=None, min_length=1)
    feedback: Optional[str] = None

    name_not_null = field_validator("client_name", mode="before")(not_null)


class TestimonialOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    testimonial_id: str
    user_id: str
    client_name: str
    feedback: Optional[str] = None


class BlogPostCreate(BaseModel):
    title: str = Field(min_length=1)
    content: Optional[str] = None


class BlogPostUpdate(UpdateModel):
    title: Optional[str] = Field(default=None, min_length=1)
    content: Optional[str] = None

    title_not_null = field_validator("title", mode="before")(not_null)


class BlogPostOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    post_id: str
    user_id: str
    title: str
    content: Optional[str] = None
    created_at: datetime


class CommentCreate(BaseModel):
    user_name: Optional[str] = None
    content: str = Field(min_length=1)


class CommentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    comment_id: str
    project_id: str
    user_name: Optional[str] = None
    content: str
    created_at: datetime
