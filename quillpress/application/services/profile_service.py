"""Application service for user profiles."""

import logging

from quillpress.application.interfaces import UserProfileRepository
from quillpress.application.schemas import ProfileUpdate
from quillpress.domain.entities import Identity, UserProfile

logger = logging.getLogger(__name__)


class ProfileService:
    """Keeps exactly one local profile per external identity."""

    def __init__(self, repository: UserProfileRepository):
        self._repository = repository

    async def get_or_create(self, identity: Identity) -> UserProfile:
        profile = await self._repository.get_by_external_id(identity.id)
        if profile is not None:
            return profile

        profile = await self._repository.create_if_absent(UserProfile.for_identity(identity))
        if profile.is_admin:
            logger.info("Bootstrapped first profile %s as administrator", identity.id)
        else:
            logger.info("Created profile for %s", identity.id)
        return profile

    async def update_profile(self, identity: Identity, data: ProfileUpdate) -> UserProfile:
        profile = await self.get_or_create(identity)
        profile.update(
            username=data.username,
            bio=data.bio,
            avatar_url=(data.avatar_url or None) if data.avatar_url is not None else ...,
        )
        return await self._repository.update(profile)
