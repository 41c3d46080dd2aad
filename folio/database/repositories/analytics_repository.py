from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Analytics
from ...core.logger import logger

DEFAULT_INTERACTIONS = {"views": 0, "comments": 0, "contacts": 0}


class AnalyticsRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def find(self, user_id: str, for_update: bool = False) -> Optional[Analytics]:
        stmt = (
            select(Analytics)
            .where(Analytics.user_id == user_id)
            .execution_options(populate_existing=True)
        )
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_or_create(self, user_id: str) -> Analytics:
        """Return the user's analytics row, inserting a zeroed one on first access.

        The unique constraint on ``user_id`` decides concurrent first reads: the
        losing insert rolls back and reads the winner's row. That rollback expires
        every instance held by the session, so callers must read what they need
        from earlier objects before calling this.
        """
        analytics = await self.find(user_id)
        if analytics is not None:
            return analytics

        self.db.add(Analytics(
            user_id=user_id,
            visit_count=0,
            popular_projects={},
            interaction_data=dict(DEFAULT_INTERACTIONS),
        ))
        try:
            await self.db.commit()
            logger.info(f"Analytics initialised for user {user_id}")
        except IntegrityError:
            await self.db.rollback()
            logger.info(f"Analytics for user {user_id} created concurrently, re-reading")

        analytics = await self.find(user_id)
        if analytics is None:
            raise RuntimeError(f"Analytics row for user {user_id} missing after insert")
        return analytics

    async def increment_interaction(self, user_id: str, key: str, amount: int = 1) -> Analytics:
        await self.get_or_create(user_id)

        analytics = await self.find(user_id, for_update=True)
        data = dict(analytics.interaction_data or {})
        data[key] = int(data.get(key) or 0) + amount
        analytics.interaction_data = data
        await self.db.commit()
        return analytics

    async def record_visit(self, user_id: str, project_id: Optional[str] = None) -> Analytics:
        await self.get_or_create(user_id)

        await self.db.execute(
            update(Analytics)
            .where(Analytics.user_id == user_id)
            .values(visit_count=Analytics.visit_count + 1)
            .execution_options(synchronize_session=False)
        )
        analytics = await self.find(user_id, for_update=True)
        if project_id:
            popular = dict(analytics.popular_projects or {})
            popular[project_id] = int(popular.get(project_id) or 0) + 1
            analytics.popular_projects = popular

            data = dict(analytics.interaction_data or {})
            data["views"] = int(data.get("views") or 0) + 1
            analytics.interaction_data = data
        await self.db.commit()
        return analytics
