from typing import Optional

from fastapi import APIRouter, Depends, Response, status

from ..dependencies.ownership_dependencies import existing_user_id, owned_user_id
from ..dependencies.portfolio_dependencies import get_analytics_service
from ..dto.common import MessageResponse
from ..dto.engagement import AnalyticsOut, VisitorMessageCreate, VisitRequest
from ..services.analytics_service import AnalyticsService

router = APIRouter(prefix="/api", tags=["analytics"])


@router.get("/analytics/{user_id}", response_model=AnalyticsOut)
async def get_analytics(
    user_id: str = Depends(owned_user_id),
    analytics_service: AnalyticsService = Depends(get_analytics_service),
):
    return await analytics_service.get_snapshot(user_id)


@router.post("/analytics/{user_id}/visits", status_code=status.HTTP_204_NO_CONTENT)
async def record_visit(
    payload: Optional[VisitRequest] = None,
    user_id: str = Depends(existing_user_id),
    analytics_service: AnalyticsService = Depends(get_analytics_service),
):
    await analytics_service.record_visit(user_id, payload.project_id if payload else None)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/contact/{user_id}", response_model=MessageResponse)
async def send_contact_message(
    payload: VisitorMessageCreate,
    user_id: str = Depends(existing_user_id),
    analytics_service: AnalyticsService = Depends(get_analytics_service),
):
    return await analytics_service.send_contact_message(user_id, payload)
