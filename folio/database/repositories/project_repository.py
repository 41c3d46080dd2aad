from typing import List, Optional

from sqlalchemy import delete, func, select

from .base import OwnedRepository
from ..models import Comment, Project
from ...core.logger import logger


class ProjectRepository(OwnedRepository[Project]):
    model = Project
    id_field = "project_id"
    writable_fields = frozenset({"title", "description", "images", "project_url"})
    order_by = (Project.title,)
    not_found_message = "Project not found"
    not_found_code = "PROJECT_NOT_FOUND"

    async def delete(self, item_id: str) -> None:
        """Remove the project together with its comments, in one transaction."""
        await self.get_owner_id(item_id)
        comments = await self.db.execute(delete(Comment).where(Comment.project_id == item_id))
        await self.db.execute(delete(Project).where(Project.project_id == item_id))
        await self.db.commit()
        logger.info(f"Project {item_id} deleted with {comments.rowcount} comments")

    async def list_comments(self, project_id: str) -> List[Comment]:
        stmt = (
            select(Comment)
            .where(Comment.project_id == project_id)
            .order_by(Comment.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def add_comment(self, project_id: str, content: str, user_name: Optional[str] = None) -> Comment:
        comment = Comment(project_id=project_id, user_name=user_name, content=content)
        self.db.add(comment)
        await self.db.commit()
        await self.db.refresh(comment)
        logger.info(f"Comment {comment.comment_id} added to project {project_id}")
        return comment

    async def count_comments(self, project_id: str) -> int:
        stmt = select(func.count()).select_from(Comment).where(Comment.project_id == project_id)
        result = await self.db.execute(stmt)
        return result.scalar_one()
