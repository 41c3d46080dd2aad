from typing import List, Optional

from ..core.exceptions import NotFound
from ..database.repositories.analytics_repository import AnalyticsRepository
from ..database.repositories.message_repository import MessageRepository
from ..database.repositories.project_repository import ProjectRepository
from ..database.repositories.user_repository import UserRepository
from ..dto.common import MessageResponse
from ..dto.engagement import AnalyticsOut, VisitorMessageCreate, VisitorMessageOut


class AnalyticsService:
    def __init__(
        self,
        analytics_repo: AnalyticsRepository,
        message_repo: MessageRepository,
        user_repo: UserRepository,
        project_repo: ProjectRepository,
    ):
        self.analytics_repo = analytics_repo
        self.message_repo = message_repo
        self.user_repo = user_repo
        self.project_repo = project_repo

    async def _require_user(self, user_id: str) -> None:
        if not await self.user_repo.exists(user_id):
            raise NotFound("User not found", "USER_NOT_FOUND")

    async def get_snapshot(self, user_id: str) -> AnalyticsOut:
        analytics = await self.analytics_repo.get_or_create(user_id)
        return AnalyticsOut.model_validate(analytics)

    async def record_visit(self, user_id: str, project_id: Optional[str] = None) -> None:
        await self._require_user(user_id)
        if project_id is not None:
            owner_id = await self.project_repo.get_owner_id(project_id)
            if owner_id != user_id:
                raise NotFound("Project not found", "PROJECT_NOT_FOUND")
        await self.analytics_repo.record_visit(user_id, project_id)

    async def send_contact_message(self, user_id: str, payload: VisitorMessageCreate) -> MessageResponse:
        await self.message_repo.create(user_id, payload.visitor_message, payload.visitor_email)
        await self.analytics_repo.increment_interaction(user_id, "contacts")
        return MessageResponse(message="Message sent successfully")

    async def list_messages(self, user_id: str) -> List[VisitorMessageOut]:
        messages = await self.message_repo.list_for_user(user_id)
        return [VisitorMessageOut.model_validate(m) for m in messages]
