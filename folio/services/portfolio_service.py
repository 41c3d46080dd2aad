from datetime import date
from typing import Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from ..core.exceptions import ValidationError
from ..core.logger import logger
from ..database.repositories.analytics_repository import AnalyticsRepository
from ..database.repositories.base import OwnedRepository
from ..database.repositories.project_repository import ProjectRepository
from ..dto.common import UpdateModel
from ..dto.portfolio import CommentCreate, CommentOut, ExperienceCreate, ExperienceOut, ExperienceUpdate, ProjectOut

OutT = TypeVar("OutT", bound=BaseModel)


class EntryService(Generic[OutT]):
    """CRUD over one kind of owned portfolio entry, returning response models."""

    def __init__(self, repository: OwnedRepository, schema: Type[OutT]):
        self.repository = repository
        self.schema = schema

    async def list_for_user(self, user_id: str) -> List[OutT]:
        items = await self.repository.list_by_owner(user_id)
        return [self.schema.model_validate(item) for item in items]

    async def get(self, item_id: str) -> OutT:
        return self.schema.model_validate(await self.repository.get_by_id(item_id))

    async def create(self, user_id: str, payload: BaseModel) -> OutT:
        item = await self.repository.create(user_id, payload.model_dump())
        return self.schema.model_validate(item)

    async def update(self, item_id: str, payload: UpdateModel) -> OutT:
        item = await self.repository.partial_update(item_id, payload.changes())
        return self.schema.model_validate(item)

    async def delete(self, item_id: str) -> None:
        await self.repository.delete(item_id)


def _check_date_range(start_date: Optional[date], end_date: Optional[date]) -> None:
    if start_date is not None and end_date is not None and end_date < start_date:
        raise ValidationError(
            "end_date: must not be before start_date",
            details=[{"field": "end_date", "message": "must not be before start_date"}],
        )


class ExperienceService(EntryService[ExperienceOut]):
    async def create(self, user_id: str, payload: ExperienceCreate) -> ExperienceOut:
        _check_date_range(payload.start_date, payload.end_date)
        return await super().create(user_id, payload)

    async def update(self, item_id: str, payload: ExperienceUpdate) -> ExperienceOut:
        changes = payload.changes()
        if "start_date" in changes or "end_date" in changes:
            current = await self.repository.get_by_id(item_id)
            _check_date_range(
                changes.get("start_date", current.start_date),
                changes.get("end_date", current.end_date),
            )
        return await super().update(item_id, payload)


class ProjectService(EntryService[ProjectOut]):
    def __init__(self, repository: ProjectRepository, analytics_repo: AnalyticsRepository):
        super().__init__(repository, ProjectOut)
        self.analytics_repo = analytics_repo

    async def list_comments(self, project_id: str) -> List[CommentOut]:
        comments = await self.repository.list_comments(project_id)
        return [CommentOut.model_validate(c) for c in comments]

    async def add_comment(self, project_id: str, payload: CommentCreate) -> CommentOut:
        owner_id = await self.repository.get_owner_id(project_id)
        comment = await self.repository.add_comment(project_id, payload.content, payload.user_name)
        # a lost analytics insert race rolls the session back and expires `comment`
        result = CommentOut.model_validate(comment)
        await self.analytics_repo.increment_interaction(owner_id, "comments")
        logger.info(f"Comment on project {project_id} counted for user {owner_id}")
        return result
