"""
Profile repository: upsert and read for provider and seeker profiles.

Profiles are keyed by their owning user. Saving looks the profile up by
user_id and either updates it in place or inserts it. A seeker save also
replaces the seeker's work types and available days, all inside one
transaction, so readers never see a mix of old and new rows.
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, func, insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload, selectinload, sessionmaker

from dailywage.core.exceptions import NotFoundError, PersistenceError
from dailywage.models.profile import (
    CUSTOM_HOURS,
    ProviderProfile,
    SeekerAvailableDay,
    SeekerProfile,
    SeekerWorkType,
)
from dailywage.schemas.profile import (
    ProviderProfileRequest,
    ProviderProfileView,
    SeekerProfileRequest,
    SeekerProfileView,
)

logger = logging.getLogger(__name__)


def _custom_hours(hours: str, custom_hours: Optional[str]) -> Optional[str]:
    """custom_hours is only kept when the hours field says "Custom"."""
    return custom_hours if hours == CUSTOM_HOURS else None


class ProfileRepository:
    """
    Reads and writes profiles through sessions checked out of the
    injected session factory (and therefore its engine's pool).
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    # ── Provider ──

    def save_provider_profile(self, user_id: int, data: ProviderProfileRequest) -> ProviderProfileView:
        """
        Create or update the provider profile owned by user_id.

        Args:
            user_id: Owning user
            data: Validated profile fields

        Returns:
            The stored profile joined with the owner's identity

        Raises:
            PersistenceError: If the write fails
        """
        values = dict(
            work_type=data.work_type,
            budget_per_day=data.budget_per_day,
            workers_needed=data.workers_needed,
            working_hours=data.working_hours,
            custom_hours=_custom_hours(data.working_hours, data.custom_hours),
            location=data.location,
            work_start_time=data.work_start_time,
        )

        try:
            with self.session_factory() as session, session.begin():
                profile = session.query(ProviderProfile).filter(ProviderProfile.user_id == user_id).first()
                if profile:
                    for field, value in values.items():
                        setattr(profile, field, value)
                    profile.updated_at = func.now()
                    created = False
                else:
                    session.add(ProviderProfile(user_id=user_id, **values))
                    created = True
        except SQLAlchemyError as e:
            logger.error(f"Failed to save provider profile for user {user_id}: {e}")
            raise PersistenceError("Failed to save provider profile") from e

        logger.info(f"Provider profile {'created' if created else 'updated'} for user {user_id}")
        return self.get_provider_profile(user_id)

    def get_provider_profile(self, user_id: int) -> ProviderProfileView:
        """
        Raises:
            NotFoundError: If the user has no provider profile
        """
        try:
            with self.session_factory() as session:
                profile = (
                    session.query(ProviderProfile)
                    .options(joinedload(ProviderProfile.user))
                    .filter(ProviderProfile.user_id == user_id)
                    .first()
                )
                if profile is None:
                    raise NotFoundError("Profile not found")
                return ProviderProfileView.from_model(profile)
        except SQLAlchemyError as e:
            logger.error(f"Failed to load provider profile for user {user_id}: {e}")
            raise PersistenceError("Failed to load provider profile") from e

    # ── Seeker ──

    def save_seeker_profile(self, user_id: int, data: SeekerProfileRequest) -> SeekerProfileView:
        """
        Create or update the seeker profile owned by user_id.

        Runs as a single transaction:
        1. Upsert the seekers row
        2. When updating, delete the old work type and available day rows
        3. Insert the submitted work types and days

        Any failure rolls the whole transaction back, leaving the previous
        profile (or no profile) in place.

        Raises:
            PersistenceError: If any step fails
        """
        values = dict(
            expected_wage=data.expected_wage,
            hours_availability=data.hours_availability,
            custom_hours=_custom_hours(data.hours_availability, data.custom_hours),
            location=data.location,
            experience=data.experience,
        )

        try:
            # session.begin() commits on success and rolls back on any
            # exception; leaving the outer block returns the connection.
            with self.session_factory() as session, session.begin():
                seeker = session.query(SeekerProfile).filter(SeekerProfile.user_id == user_id).first()
                updating = seeker is not None
                if updating:
                    for field, value in values.items():
                        setattr(seeker, field, value)
                    seeker.updated_at = func.now()
                else:
                    seeker = SeekerProfile(user_id=user_id, **values)
                    session.add(seeker)
                session.flush()

                self._replace_attributes(session, seeker.id, data.work_types, data.available_days, updating)
        except SQLAlchemyError as e:
            logger.error(f"Failed to save seeker profile for user {user_id}, rolled back: {e}")
            raise PersistenceError("Failed to save seeker profile") from e

        logger.info(
            f"Seeker profile {'updated' if updating else 'created'} for user {user_id} "
            f"({len(data.work_types)} work types, {len(data.available_days)} days)"
        )
        return self.get_seeker_profile(user_id)

    def _replace_attributes(
        self,
        session: Session,
        seeker_id: int,
        work_types: List[str],
        available_days: List[str],
        updating: bool,
    ) -> None:
        """Rewrite a seeker's work types and days within the caller's transaction."""
        if updating:
            session.execute(delete(SeekerWorkType).where(SeekerWorkType.seeker_id == seeker_id))
            session.execute(delete(SeekerAvailableDay).where(SeekerAvailableDay.seeker_id == seeker_id))

        if work_types:
            session.execute(
                insert(SeekerWorkType),
                [{"seeker_id": seeker_id, "work_type": work_type} for work_type in work_types],
            )
        if available_days:
            session.execute(
                insert(SeekerAvailableDay),
                [{"seeker_id": seeker_id, "day": day} for day in available_days],
            )

    def get_seeker_profile(self, user_id: int) -> SeekerProfileView:
        """
        Raises:
            NotFoundError: If the user has no seeker profile
        """
        try:
            with self.session_factory() as session:
                seeker = (
                    session.query(SeekerProfile)
                    .options(
                        joinedload(SeekerProfile.user),
                        selectinload(SeekerProfile.work_types),
                        selectinload(SeekerProfile.available_days),
                    )
                    .filter(SeekerProfile.user_id == user_id)
                    .first()
                )
                if seeker is None:
                    raise NotFoundError("Profile not found")
                return SeekerProfileView.from_model(seeker)
        except SQLAlchemyError as e:
            logger.error(f"Failed to load seeker profile for user {user_id}: {e}")
            raise PersistenceError("Failed to load seeker profile") from e
