"""Port for local user profiles."""

from abc import ABC, abstractmethod

from quillpress.domain.entities import UserProfile


class UserProfileRepository(ABC):
    """Persistence for profiles keyed by their external identity."""

    @abstractmethod
    async def get_by_external_id(self, external_id: str) -> UserProfile | None:
        ...

    @abstractmethod
    async def get_many(self, external_ids: list[str]) -> dict[str, UserProfile]:
        """Map external IDs to profiles. Unknown IDs are absent from the result."""
        ...

    @abstractmethod
    async def create_if_absent(self, profile: UserProfile) -> UserProfile:
        """Insert the profile unless one exists for its external ID.

        The very first profile in the system is flagged as administrator;
        the check and the insert happen as one atomic step.
        """
        ...

    @abstractmethod
    async def update(self, profile: UserProfile) -> UserProfile:
        ...

    @abstractmethod
    async def is_admin(self, external_id: str) -> bool:
        ...
