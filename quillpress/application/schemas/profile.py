"""Pydantic DTOs for user profiles."""

from datetime import datetime

from pydantic import Field

from .common import CamelModel, UrlOrEmpty


class ProfileUpdate(CamelModel):
    username: str | None = Field(None, min_length=3, max_length=30)
    bio: str | None = Field(None, max_length=500)
    avatar_url: UrlOrEmpty | None = None


class UserProfileResponse(CamelModel):
    id: int
    external_id: str
    username: str | None = None
    bio: str | None = None
    avatar_url: str | None = None
    is_admin: bool
    created_at: datetime
    updated_at: datetime


class CurrentUserResponse(CamelModel):
    """The resolved identity together with its local profile."""

    id: str
    email: str
    name: str | None = None
    avatar_url: str | None = None
    profile: UserProfileResponse
