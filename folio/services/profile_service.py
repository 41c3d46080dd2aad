from typing import List

from ..core.exceptions import NotFound, ValidationError
from ..core.logger import logger
from ..database.repositories.settings_repository import SettingsRepository
from ..database.repositories.user_repository import ProfileRepository, UserRepository
from ..dto.profile import ProfileOut, ProfileUpdate, SettingsOut, SettingsUpdate, TemplateOut


class ProfileService:
    def __init__(
        self,
        user_repo: UserRepository,
        profile_repo: ProfileRepository,
        settings_repo: SettingsRepository,
    ):
        self.user_repo = user_repo
        self.profile_repo = profile_repo
        self.settings_repo = settings_repo

    async def get_profile(self, user_id: str) -> ProfileOut:
        profile, user = await self.profile_repo.get_with_user(user_id)
        return ProfileOut.model_validate(profile).model_copy(update={"name": user.name})

    async def update_profile(self, user_id: str, payload: ProfileUpdate) -> ProfileOut:
        await self.profile_repo.partial_update(user_id, payload.changes())
        return await self.get_profile(user_id)

    async def get_settings(self, user_id: str) -> SettingsOut:
        if not await self.user_repo.exists(user_id):
            raise NotFound("User not found", "USER_NOT_FOUND")

        settings = await self.settings_repo.get(user_id)
        if settings is None:
            return SettingsOut(user_id=user_id)
        return SettingsOut.model_validate(settings)

    async def update_settings(self, user_id: str, payload: SettingsUpdate) -> SettingsOut:
        changes = payload.changes()
        if not changes:
            raise ValidationError("No fields to update", "NO_UPDATE_FIELDS")

        template_id = changes.get("chosen_template")
        if template_id is not None and not await self.settings_repo.template_exists(template_id):
            logger.warning(f"User {user_id} chose unknown template {template_id}")
            raise ValidationError(
                "Unknown template",
                details=[{"field": "chosen_template", "message": "unknown template"}],
            )

        settings = await self.settings_repo.upsert(user_id, changes)
        return SettingsOut.model_validate(settings)

    async def list_templates(self) -> List[TemplateOut]:
        templates = await self.settings_repo.list_templates()
        return [TemplateOut.model_validate(t) for t in templates]
