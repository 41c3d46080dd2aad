from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Template, UserSettings
from ...core.logger import logger

SETTINGS_FIELDS = frozenset({"color_scheme", "chosen_template", "font_selection"})


class SettingsRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, user_id: str) -> Optional[UserSettings]:
        stmt = (
            select(UserSettings)
            .where(UserSettings.user_id == user_id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def upsert(self, user_id: str, fields: Mapping[str, Any]) -> UserSettings:
        """Create the settings row on first write, otherwise update only ``fields``."""
        values = self._writable(fields)

        if await self.get(user_id) is None:
            self.db.add(UserSettings(user_id=user_id, **values))
            try:
                await self.db.commit()
                logger.info(f"Settings created for user {user_id}")
                return await self.get(user_id)
            except IntegrityError:
                # a concurrent first write won; fall through to a plain update
                await self.db.rollback()

        if values:
            stmt = (
                update(UserSettings)
                .where(UserSettings.user_id == user_id)
                .values(**values)
                .execution_options(synchronize_session=False)
            )
            await self.db.execute(stmt)
            await self.db.commit()
            logger.info(f"Settings updated for user {user_id}: {sorted(values)}")
        return await self.get(user_id)

    async def template_exists(self, template_id: str) -> bool:
        result = await self.db.execute(select(Template.template_id).where(Template.template_id == template_id))
        return result.scalar_one_or_none() is not None

    async def list_templates(self) -> List[Template]:
        result = await self.db.execute(select(Template).order_by(Template.name))
        return list(result.scalars().all())

    @staticmethod
    def _writable(fields: Mapping[str, Any]) -> Dict[str, Any]:
        unknown = set(fields) - SETTINGS_FIELDS
        if unknown:
            raise ValueError(f"UserSettings does not accept fields: {sorted(unknown)}")
        return dict(fields)
