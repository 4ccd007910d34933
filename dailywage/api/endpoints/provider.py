"""
Provider endpoints: the provider's job posting, and the listings.

- POST /profile: Save or update the caller's provider profile
- GET /profile: Get the caller's provider profile
- GET /seekers: Browse available workers
- GET /jobs: Browse posted jobs (used by seekers)
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query
from pydantic import ValidationError as PydanticValidationError

from dailywage.core.deps import get_current_user, get_listing_service, get_profile_repository
from dailywage.core.exceptions import ValidationError, describe_validation_errors
from dailywage.crud.profile import ProfileRepository
from dailywage.schemas.listing import JobFilters, JobListResponse, SeekerFilters, SeekerListResponse
from dailywage.schemas.profile import ProviderProfileRequest, ProviderProfileSaveResponse, ProviderProfileView
from dailywage.schemas.user import TokenClaims
from dailywage.services.listing_service import ListingService

router = APIRouter(prefix="/provider", tags=["Provider"])


@router.post("/profile", response_model=ProviderProfileSaveResponse)
def save_profile(
    request: ProviderProfileRequest,
    current_user: TokenClaims = Depends(get_current_user),
    profiles: ProfileRepository = Depends(get_profile_repository)
):
    """
    Save or update the caller's provider profile (job posting).

    customHours is stored only when workingHours is "Custom".
    """
    profile = profiles.save_provider_profile(current_user.id, request)
    return ProviderProfileSaveResponse(message="Profile saved successfully", profile=profile)


@router.get("/profile", response_model=ProviderProfileView)
def get_profile(
    current_user: TokenClaims = Depends(get_current_user),
    profiles: ProfileRepository = Depends(get_profile_repository)
):
    """Get the caller's provider profile. 404 if none has been saved."""
    return profiles.get_provider_profile(current_user.id)


def seeker_filters(
    work_type: Optional[str] = Query(None, alias="workType"),
    max_budget: Optional[str] = Query(None, alias="maxBudget"),
    location: Optional[str] = Query(None),
) -> SeekerFilters:
    try:
        return SeekerFilters.model_validate({"workType": work_type, "maxBudget": max_budget, "location": location})
    except PydanticValidationError as e:
        raise ValidationError(describe_validation_errors(e.errors()))


def job_filters(
    work_type: Optional[str] = Query(None, alias="workType"),
    min_budget: Optional[str] = Query(None, alias="minBudget"),
    location: Optional[str] = Query(None),
) -> JobFilters:
    try:
        return JobFilters.model_validate({"workType": work_type, "minBudget": min_budget, "location": location})
    except PydanticValidationError as e:
        raise ValidationError(describe_validation_errors(e.errors()))


@router.get("/seekers", response_model=SeekerListResponse)
def list_seekers(
    current_user: TokenClaims = Depends(get_current_user),
    filters: SeekerFilters = Depends(seeker_filters),
    listings: ListingService = Depends(get_listing_service)
):
    """
    Browse available workers, newest first (at most 50).

    Args:
        workType: Only seekers offering this work type (among others)
        maxBudget: Only seekers whose expected wage is at most this
        location: Case-insensitive substring of the seeker's location
    """
    return SeekerListResponse(seekers=listings.list_seekers(filters))


@router.get("/jobs", response_model=JobListResponse)
def list_jobs(
    current_user: TokenClaims = Depends(get_current_user),
    filters: JobFilters = Depends(job_filters),
    listings: ListingService = Depends(get_listing_service)
):
    """
    Browse posted jobs, newest first (at most 50).

    Args:
        workType: Exact work type
        minBudget: Only jobs paying at least this per day
        location: Case-insensitive substring of the job location
    """
    return JobListResponse(jobs=listings.list_jobs(filters))
