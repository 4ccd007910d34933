"""
Pydantic schemas for provider and seeker profiles.

Request schemas validate input at the HTTP boundary. View schemas are
the joined shapes handed back to callers; they are built from the ORM
rows but are distinct from them (identity is nested under userId).
"""

from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import Field, model_validator

from dailywage.models.profile import CUSTOM_HOURS, ProviderProfile, SeekerProfile
from dailywage.schemas.common import Amount, CamelModel, NonBlankStr


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class ProviderProfileRequest(CamelModel):
    """
    Request schema for saving a provider profile (job posting).

    Length limits mirror the column sizes in models/profile.py.
    """
    work_type: NonBlankStr = Field(..., max_length=100)
    budget_per_day: Amount
    workers_needed: int = Field(..., ge=1)
    working_hours: NonBlankStr = Field(..., max_length=50)
    custom_hours: Optional[str] = Field(None, max_length=100)
    location: NonBlankStr = Field(..., max_length=255)
    work_start_time: Optional[str] = Field(None, max_length=50)

    @model_validator(mode="after")
    def check_custom_hours(self) -> "ProviderProfileRequest":
        self.custom_hours = _blank_to_none(self.custom_hours)
        self.work_start_time = _blank_to_none(self.work_start_time)
        if self.working_hours == CUSTOM_HOURS and self.custom_hours is None:
            raise ValueError("customHours is required when workingHours is Custom")
        return self


class SeekerProfileRequest(CamelModel):
    """Request schema for saving a seeker profile."""
    work_types: List[Annotated[NonBlankStr, Field(max_length=100)]] = Field(..., min_length=1)
    expected_wage: Amount
    hours_availability: NonBlankStr = Field(..., max_length=50)
    custom_hours: Optional[str] = Field(None, max_length=100)
    available_days: List[Annotated[NonBlankStr, Field(max_length=20)]] = Field(default_factory=list)
    location: NonBlankStr = Field(..., max_length=255)
    experience: Optional[str] = None

    @model_validator(mode="after")
    def check_custom_hours(self) -> "SeekerProfileRequest":
        self.custom_hours = _blank_to_none(self.custom_hours)
        self.experience = _blank_to_none(self.experience)
        if self.hours_availability == CUSTOM_HOURS and self.custom_hours is None:
            raise ValueError("customHours is required when hoursAvailability is Custom")
        return self


class UserRef(CamelModel):
    """Identity of the profile owner."""
    id: int
    name: str
    phone: str


class ProviderProfileView(CamelModel):
    id: int
    user_id: UserRef
    work_type: str
    budget_per_day: float
    workers_needed: int
    working_hours: str
    custom_hours: Optional[str] = None
    location: str
    work_start_time: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_model(cls, profile: ProviderProfile) -> "ProviderProfileView":
        return cls(
            id=profile.id,
            user_id=UserRef.model_validate(profile.user),
            work_type=profile.work_type,
            budget_per_day=float(profile.budget_per_day),
            workers_needed=profile.workers_needed,
            working_hours=profile.working_hours,
            custom_hours=profile.custom_hours,
            location=profile.location,
            work_start_time=profile.work_start_time,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )


class SeekerSummary(CamelModel):
    """Seeker as shown in listings."""
    id: int
    user_id: UserRef
    work_types: List[str]
    expected_wage: float
    hours_availability: str
    custom_hours: Optional[str] = None
    available_days: List[str]
    location: str
    experience: Optional[str] = None

    @classmethod
    def _fields_from(cls, profile: SeekerProfile) -> dict:
        return dict(
            id=profile.id,
            user_id=UserRef.model_validate(profile.user),
            work_types=[wt.work_type for wt in profile.work_types],
            expected_wage=float(profile.expected_wage),
            hours_availability=profile.hours_availability,
            custom_hours=profile.custom_hours,
            available_days=[d.day for d in profile.available_days],
            location=profile.location,
            experience=profile.experience,
        )

    @classmethod
    def from_model(cls, profile: SeekerProfile) -> "SeekerSummary":
        return cls(**cls._fields_from(profile))


class SeekerProfileView(SeekerSummary):
    """Seeker profile as returned to its owner."""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_model(cls, profile: SeekerProfile) -> "SeekerProfileView":
        return cls(
            **cls._fields_from(profile),
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )


class ProviderProfileSaveResponse(CamelModel):
    message: str
    profile: ProviderProfileView


class SeekerProfileSaveResponse(CamelModel):
    message: str
    profile: SeekerProfileView
