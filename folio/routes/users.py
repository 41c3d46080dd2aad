from typing import List

from fastapi import APIRouter, Depends

from ..dependencies.ownership_dependencies import owned_user_id
from ..dependencies.portfolio_dependencies import get_analytics_service, get_profile_service
from ..dto.engagement import VisitorMessageOut
from ..dto.profile import ProfileOut, ProfileUpdate, SettingsOut, SettingsUpdate, TemplateOut
from ..services.analytics_service import AnalyticsService
from ..services.profile_service import ProfileService

router = APIRouter(prefix="/api", tags=["users"])


@router.get("/users/{user_id}", response_model=ProfileOut)
async def get_profile(
    user_id: str,
    profile_service: ProfileService = Depends(get_profile_service),
):
    return await profile_service.get_profile(user_id)


@router.patch("/users/{user_id}", response_model=ProfileOut)
async def update_profile(
    payload: ProfileUpdate,
    user_id: str = Depends(owned_user_id),
    profile_service: ProfileService = Depends(get_profile_service),
):
    return await profile_service.update_profile(user_id, payload)


@router.get("/users/{user_id}/settings", response_model=SettingsOut)
async def read_settings(
    user_id: str,
    profile_service: ProfileService = Depends(get_profile_service),
):
    return await profile_service.get_settings(user_id)


@router.patch("/users/{user_id}/settings", response_model=SettingsOut)
async def update_settings(
    payload: SettingsUpdate,
    user_id: str = Depends(owned_user_id),
    profile_service: ProfileService = Depends(get_profile_service),
):
    return await profile_service.update_settings(user_id, payload)


@router.get("/templates", response_model=List[TemplateOut])
async def list_templates(profile_service: ProfileService = Depends(get_profile_service)):
    return await profile_service.list_templates()


@router.get("/users/{user_id}/messages", response_model=List[VisitorMessageOut])
async def list_messages(
    user_id: str = Depends(owned_user_id),
    analytics_service: AnalyticsService = Depends(get_analytics_service),
):
    return await analytics_service.list_messages(user_id)
