"""Domain entities for users — the local profile and the external identity it mirrors."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(frozen=True)
class Identity:
    """A user as resolved by the external identity service.

    Opaque to this application beyond these four fields.
    """

    id: str
    email: str
    display_name: str | None = None
    avatar_url: str | None = None

    @property
    def default_username(self) -> str:
        if self.display_name:
            return self.display_name
        return self.email.split("@")[0]


@dataclass
class UserProfile:
    """Local record mirroring one external identity."""

    external_id: str
    id: int | None = None
    username: str | None = None
    bio: str | None = None
    avatar_url: str | None = None
    is_admin: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def for_identity(cls, identity: Identity) -> "UserProfile":
        """Build the profile created on a user's first authenticated visit."""
        return cls(
            external_id=identity.id,
            username=identity.default_username,
            avatar_url=identity.avatar_url,
        )

    def update(
        self,
        username: str | None = None,
        bio: str | None = None,
        avatar_url: str | None = ...,  # type: ignore[assignment]
    ) -> None:
        """Update supplied fields and refresh the updated_at timestamp."""
        if username is not None:
            self.username = username
        if bio is not None:
            self.bio = bio
        if avatar_url is not ...:
            self.avatar_url = avatar_url
        self.updated_at = datetime.now(timezone.utc)
