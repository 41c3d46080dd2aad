from typing import Any, ClassVar, Dict, FrozenSet, Generic, List, Mapping, Optional, Tuple, Type, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..base import Base
from ...core.exceptions import NotFound, ValidationError
from ...core.logger import logger

ModelT = TypeVar("ModelT", bound=Base)


class OwnedRepository(Generic[ModelT]):
    """Persistence for a resource owned by a user through its ``user_id`` column.

    Subclasses declare the model, the primary-key attribute and the allow-list
    of columns that callers may write. Column names never come from request
    keys: anything outside ``writable_fields`` is refused.
    """

    model: ClassVar[Type[Base]]
    id_field: ClassVar[str]
    writable_fields: ClassVar[FrozenSet[str]]
    order_by: ClassVar[Tuple[Any, ...]] = ()
    not_found_message: ClassVar[str] = "Resource not found"
    not_found_code: ClassVar[str] = "NOT_FOUND"

    def __init__(self, db: AsyncSession):
        self.db = db

    @property
    def _pk(self):
        return getattr(self.model, self.id_field)

    def _not_found(self) -> NotFound:
        return NotFound(self.not_found_message, self.not_found_code)

    def _writable(self, fields: Mapping[str, Any]) -> Dict[str, Any]:
        unknown = set(fields) - self.writable_fields
        if unknown:
            raise ValueError(f"{self.model.__name__} does not accept fields: {sorted(unknown)}")
        return dict(fields)

    async def create(self, user_id: str, fields: Mapping[str, Any]) -> ModelT:
        item = self.model(user_id=user_id, **self._writable(fields))
        self.db.add(item)
        await self.db.commit()
        await self.db.refresh(item)
        logger.info(f"{self.model.__name__} created: {getattr(item, self.id_field)} for user {user_id}")
        return item

    async def find_by_id(self, item_id: str) -> Optional[ModelT]:
        stmt = select(self.model).where(self._pk == item_id).execution_options(populate_existing=True)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_id(self, item_id: str) -> ModelT:
        item = await self.find_by_id(item_id)
        if item is None:
            raise self._not_found()
        return item

    async def get_owner_id(self, item_id: str) -> str:
        result = await self.db.execute(select(self.model.user_id).where(self._pk == item_id))
        owner_id = result.scalar_one_or_none()
        if owner_id is None:
            raise self._not_found()
        return owner_id

    async def list_by_owner(self, user_id: str) -> List[ModelT]:
        stmt = select(self.model).where(self.model.user_id == user_id).order_by(*self.order_by)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def partial_update(self, item_id: str, fields: Mapping[str, Any]) -> ModelT:
        """Write exactly the supplied fields; ``None`` values are stored as NULL."""
        values = self._writable(fields)
        if not values:
            raise ValidationError("No fields to update", "NO_UPDATE_FIELDS")

        stmt = (
            update(self.model)
            .where(self._pk == item_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(stmt)
        if result.rowcount == 0:
            await self.db.rollback()
            raise self._not_found()
        await self.db.commit()
        logger.info(f"{self.model.__name__} {item_id} updated: {sorted(values)}")
        return await self.get_by_id(item_id)

    async def delete(self, item_id: str) -> None:
        result = await self.db.execute(delete(self.model).where(self._pk == item_id))
        if result.rowcount == 0:
            await self.db.rollback()
            raise self._not_found()
        await self.db.commit()
        logger.info(f"{self.model.__name__} {item_id} deleted")
