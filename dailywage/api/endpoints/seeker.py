from fastapi import APIRouter, Depends

from dailywage.core.deps import get_current_user, get_profile_repository
from dailywage.crud.profile import ProfileRepository
from dailywage.schemas.profile import SeekerProfileRequest, SeekerProfileSaveResponse, SeekerProfileView
from dailywage.schemas.user import TokenClaims

router = APIRouter(prefix="/seeker", tags=["Seeker"])


@router.post("/profile", response_model=SeekerProfileSaveResponse)
def save_profile(
    request: SeekerProfileRequest,
    current_user: TokenClaims = Depends(get_current_user),
    profiles: ProfileRepository = Depends(get_profile_repository)
):
    """
    Save or update the caller's seeker profile.

    workTypes and availableDays replace whatever was stored before.
    """
    profile = profiles.save_seeker_profile(current_user.id, request)
    return SeekerProfileSaveResponse(message="Profile saved successfully", profile=profile)


@router.get("/profile", response_model=SeekerProfileView)
def get_profile(
    current_user: TokenClaims = Depends(get_current_user),
    profiles: ProfileRepository = Depends(get_profile_repository)
):
    """Get the caller's seeker profile. 404 if none has been saved."""
    return profiles.get_seeker_profile(current_user.id)
