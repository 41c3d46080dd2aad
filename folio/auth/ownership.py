from typing import Protocol

from .entities.user import Principal
from ..core.exceptions import Forbidden
from ..core.logger import logger


class OwnedResourceLookup(Protocol):
    async def get_owner_id(self, item_id: str) -> str: ...


def ensure_owner(principal: Principal, owner_id: str, resource: str = "resource") -> None:
    if principal.id != owner_id:
        logger.warning(f"User {principal.id} denied access to another user's {resource}")
        raise Forbidden(f"Cannot modify another user's {resource}")


async def enforce_resource_owner(
    principal: Principal,
    repository: OwnedResourceLookup,
    item_id: str,
    resource: str,
) -> str:
    """Resolve the owner first (NotFound), then compare it to the principal (Forbidden)."""
    owner_id = await repository.get_owner_id(item_id)
    ensure_owner(principal, owner_id, resource)
    return item_id
