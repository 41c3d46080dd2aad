from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, EmailStr

from .common import UpdateModel


class ProfileOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: str
    name: Optional[str] = None
    profile_picture_url: Optional[str] = None
    cover_image_url: Optional[str] = None
    bio: Optional[str] = None
    contact_email: Optional[str] = None
    phone_number: Optional[str] = None
    social_media_links: Optional[Dict[str, str]] = None


class ProfileUpdate(UpdateModel):
    profile_picture_url: Optional[str] = None
    cover_image_url: Optional[str] = None
    bio: Optional[str] = None
    contact_email: Optional[EmailStr] = None
    phone_number: Optional[str] = None
    social_media_links: Optional[Dict[str, str]] = None


class SettingsOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: str
    color_scheme: Optional[Dict[str, str]] = None
    chosen_template: Optional[str] = None
    font_selection: Optional[str] = None


class SettingsUpdate(UpdateModel):
    color_scheme: Optional[Dict[str, str]] = None
    chosen_template: Optional[str] = None
    font_selection: Optional[str] = None


class TemplateOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    template_id: str
    name: str
    layout: str
