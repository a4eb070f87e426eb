"""Concrete repository implementation for UserProfile backed by SQLAlchemy."""

from sqlalchemy import DateTime, String, Text, case, false, insert, literal, select, text, true
from sqlalchemy.ext.asyncio import AsyncSession

from quillpress.application.interfaces import UserProfileRepository
from quillpress.domain.entities import UserProfile
from quillpress.infrastructure.database.models import UserProfileModel


class SQLAlchemyUserProfileRepository(UserProfileRepository):
    """Implements the UserProfileRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: UserProfileModel) -> UserProfile:
        """Map ORM model → domain entity."""
        return UserProfile(
            id=model.id,
            external_id=model.external_id,
            username=model.username,
            bio=model.bio,
            avatar_url=model.avatar_url,
            is_admin=model.is_admin,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    async def _get_model(self, external_id: str) -> UserProfileModel | None:
        result = await self._session.execute(
            select(UserProfileModel).where(UserProfileModel.external_id == external_id)
        )
        return result.scalar_one_or_none()

    async def get_by_external_id(self, external_id: str) -> UserProfile | None:
        model = await self._get_model(external_id)
        return self._to_entity(model) if model else None

    async def get_many(self, external_ids: list[str]) -> dict[str, UserProfile]:
        if not external_ids:
            return {}
        result = await self._session.execute(
            select(UserProfileModel).where(UserProfileModel.external_id.in_(external_ids))
        )
        return {row.external_id: self._to_entity(row) for row in result.scalars().all()}

    async def create_if_absent(self, profile: UserProfile) -> UserProfile:
        existing = await self.get_by_external_id(profile.external_id)
        if existing is not None:
            return existing

        if self._session.get_bind().dialect.name == "postgresql":
            # Serialize concurrent registrations so only one can see an empty table.
            await self._session.execute(text("LOCK TABLE user_profiles IN SHARE ROW EXCLUSIVE MODE"))

        table = UserProfileModel.__table__
        no_profiles_yet = ~select(table.c.id).exists()
        not_registered = ~select(table.c.id).where(table.c.external_id == profile.external_id).exists()
        row = select(
            literal(profile.external_id, String),
            literal(profile.username, String),
            literal(profile.bio, Text),
            literal(profile.avatar_url, Text),
            case((no_profiles_yet, true()), else_=false()),
            literal(profile.created_at, DateTime(timezone=True)),
            literal(profile.updated_at, DateTime(timezone=True)),
        ).where(not_registered)
        await self._session.execute(
            insert(table).from_select(
                ["external_id", "username", "bio", "avatar_url", "is_admin", "created_at", "updated_at"],
                row,
            )
        )

        created = await self.get_by_external_id(profile.external_id)
        if created is None:
            raise ValueError(f"UserProfile {profile.external_id} was not stored")
        return created

    async def update(self, profile: UserProfile) -> UserProfile:
        model = await self._get_model(profile.external_id)
        if model is None:
            raise ValueError(f"UserProfile {profile.external_id} not found in database")
        model.username = profile.username
        model.bio = profile.bio
        model.avatar_url = profile.avatar_url
        model.updated_at = profile.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def is_admin(self, external_id: str) -> bool:
        result = await self._session.execute(
            select(UserProfileModel.id).where(
                UserProfileModel.external_id == external_id,
                UserProfileModel.is_admin.is_(True),
            )
        )
        return result.first() is not None
