from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import VisitorMessage
from ...core.logger import logger


class MessageRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, user_id: str, visitor_message: str, visitor_email: Optional[str] = None) -> VisitorMessage:
        message = VisitorMessage(user_id=user_id, visitor_email=visitor_email, visitor_message=visitor_message)
        self.db.add(message)
        await self.db.commit()
        await self.db.refresh(message)
        logger.info(f"Visitor message {message.message_id} stored for user {user_id}")
        return message

    async def list_for_user(self, user_id: str) -> List[VisitorMessage]:
        stmt = (
            select(VisitorMessage)
            .where(VisitorMessage.user_id == user_id)
            .order_by(VisitorMessage.sent_at.desc())
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())
