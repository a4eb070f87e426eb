"""Abstract identity provider — resolves a session into a user identity."""

from abc import ABC, abstractmethod

from quillpress.domain.entities import Identity


class IdentityProvider(ABC):
    """Port for the external identity service."""

    @abstractmethod
    async def get_current_user(self, session_token: str) -> Identity | None:
        """Resolve a session token.

        Returns None when the service rejects the token. Raises
        IdentityProviderError when the service cannot be reached or fails.
        """
        ...
