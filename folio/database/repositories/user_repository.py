from typing import Optional, Tuple

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from .base import OwnedRepository
from ..models import Profile, User
from ...core.exceptions import Conflict, NotFound
from ...core.logger import logger


class UserRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, user_id: str) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.user_id == user_id))
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def exists(self, user_id: str) -> bool:
        result = await self.db.execute(select(User.user_id).where(User.user_id == user_id))
        return result.scalar_one_or_none() is not None

    async def create_with_profile(self, email: str, password_hash: str, name: Optional[str]) -> User:
        """Insert the user and its empty profile as one unit; ``email`` arrives normalized."""
        user = User(email=email, password_hash=password_hash, name=name)
        user.profile = Profile()
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.warning(f"Email already exists: {email}")
            raise Conflict("User with this email already exists", "USER_ALREADY_EXISTS")
        await self.db.refresh(user)
        logger.info(f"User created successfully: {email}")
        return user


class ProfileRepository(OwnedRepository[Profile]):
    model = Profile
    id_field = "user_id"
    writable_fields = frozenset({
        "profile_picture_url",
        "cover_image_url",
        "bio",
        "contact_email",
        "phone_number",
        "social_media_links",
    })
    not_found_message = "User not found"
    not_found_code = "USER_NOT_FOUND"

    async def get_with_user(self, user_id: str) -> Tuple[Profile, User]:
        stmt = (
            select(Profile, User)
            .join(User, Profile.user_id == User.user_id)
            .where(Profile.user_id == user_id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        row = result.first()
        if row is None:
            raise NotFound(self.not_found_message, self.not_found_code)
        return row[0], row[1]
