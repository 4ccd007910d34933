"""
Pydantic schemas for the job and worker listings.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from dailywage.models.profile import ProviderProfile
from dailywage.schemas.common import CamelModel
from dailywage.schemas.profile import SeekerSummary


class _ListingFilters(CamelModel):
    """Optional filters combined with AND. Blank values mean "not set"."""
    work_type: Optional[str] = None
    location: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def blank_is_unset(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v.strip() if isinstance(v, str) else v


class SeekerFilters(_ListingFilters):
    max_budget: Optional[float] = Field(None, allow_inf_nan=False)


class JobFilters(_ListingFilters):
    min_budget: Optional[float] = Field(None, allow_inf_nan=False)


class EmployerRef(CamelModel):
    name: str
    phone: str


class JobListing(CamelModel):
    """A provider profile as shown to seekers browsing jobs."""
    id: int
    employer_id: int
    work_type: str
    budget_per_day: float
    workers_needed: int
    working_hours: str
    custom_hours: Optional[str] = None
    location: str
    work_start_time: Optional[str] = None
    created_at: Optional[datetime] = None
    employer: EmployerRef

    @classmethod
    def from_model(cls, profile: ProviderProfile) -> "JobListing":
        return cls(
            id=profile.id,
            employer_id=profile.user_id,
            work_type=profile.work_type,
            budget_per_day=float(profile.budget_per_day),
            workers_needed=profile.workers_needed,
            working_hours=profile.working_hours,
            custom_hours=profile.custom_hours,
            location=profile.location,
            work_start_time=profile.work_start_time,
            created_at=profile.created_at,
            employer=EmployerRef.model_validate(profile.user),
        )


class SeekerListResponse(BaseModel):
    seekers: List[SeekerSummary]


class JobListResponse(BaseModel):
    jobs: List[JobListing]
