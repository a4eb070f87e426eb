"""Current-user and profile endpoints."""

from fastapi import APIRouter, Depends

from quillpress.application.schemas import CurrentUserResponse, ProfileUpdate, SuccessResponse
from quillpress.application.services import ProfileService
from quillpress.domain.entities import Identity
from quillpress.infrastructure.dependencies import get_current_identity, get_profile_service
from quillpress.presentation.api.mappers import to_profile_response

router = APIRouter(tags=["Users"])


@router.get("/users/me", response_model=CurrentUserResponse)
async def get_current_user(
    identity: Identity = Depends(get_current_identity),
    service: ProfileService = Depends(get_profile_service),
) -> CurrentUserResponse:
    """Return the caller's identity and profile, creating the profile on first visit."""
    profile = await service.get_or_create(identity)
    return CurrentUserResponse(
        id=identity.id,
        email=identity.email,
        name=identity.display_name,
        avatar_url=identity.avatar_url,
        profile=to_profile_response(profile),
    )


@router.put("/profile", response_model=SuccessResponse)
async def update_profile(
    data: ProfileUpdate,
    identity: Identity = Depends(get_current_identity),
    service: ProfileService = Depends(get_profile_service),
) -> SuccessResponse:
    """Update the caller's username, bio or avatar."""
    await service.update_profile(identity, data)
    return SuccessResponse()
