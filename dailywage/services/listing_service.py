"""
Listing queries: seekers for providers to browse and jobs for seekers.

Both listings apply only the filters that are set, newest profiles
first, capped at MAX_RESULTS rows. There is no pagination.
"""

import logging
from typing import List

from sqlalchemy import exists
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload, selectinload, sessionmaker

from dailywage.core.exceptions import PersistenceError
from dailywage.models.profile import ProviderProfile, SeekerProfile, SeekerWorkType
from dailywage.schemas.listing import JobFilters, JobListing, SeekerFilters
from dailywage.schemas.profile import SeekerSummary

logger = logging.getLogger(__name__)

MAX_RESULTS = 50


def _contains_pattern(text: str) -> str:
    """LIKE pattern matching text anywhere, with wildcards in text taken literally."""
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class ListingService:

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def list_seekers(self, filters: SeekerFilters) -> List[SeekerSummary]:
        """
        Seekers matching every filter that is set.

        - work_type: the seeker's work-type set contains the tag (the
          seeker may have other types too)
        - max_budget: expected_wage <= value
        - location: case-insensitive substring
        """
        try:
            with self.session_factory() as session:
                query = session.query(SeekerProfile).options(
                    joinedload(SeekerProfile.user),
                    # one batched query per attribute for the whole page
                    selectinload(SeekerProfile.work_types),
                    selectinload(SeekerProfile.available_days),
                )

                if filters.work_type:
                    query = query.filter(
                        exists().where(
                            SeekerWorkType.seeker_id == SeekerProfile.id,
                            SeekerWorkType.work_type == filters.work_type,
                        )
                    )
                if filters.max_budget is not None:
                    query = query.filter(SeekerProfile.expected_wage <= filters.max_budget)
                if filters.location:
                    query = query.filter(SeekerProfile.location.ilike(_contains_pattern(filters.location), escape="\\"))

                seekers = (
                    query.order_by(SeekerProfile.created_at.desc(), SeekerProfile.id.desc())
                    .limit(MAX_RESULTS)
                    .all()
                )
                return [SeekerSummary.from_model(seeker) for seeker in seekers]
        except SQLAlchemyError as e:
            logger.error(f"Failed to list seekers with {filters}: {e}")
            raise PersistenceError("Failed to list seekers") from e

    def list_jobs(self, filters: JobFilters) -> List[JobListing]:
        """
        Provider profiles matching every filter that is set.

        - work_type: exact match (a provider posts a single work type)
        - min_budget: budget_per_day >= value
        - location: case-insensitive substring
        """
        try:
            with self.session_factory() as session:
                query = session.query(ProviderProfile).options(joinedload(ProviderProfile.user))

                if filters.work_type:
                    query = query.filter(ProviderProfile.work_type == filters.work_type)
                if filters.min_budget is not None:
                    query = query.filter(ProviderProfile.budget_per_day >= filters.min_budget)
                if filters.location:
                    query = query.filter(ProviderProfile.location.ilike(_contains_pattern(filters.location), escape="\\"))

                jobs = (
                    query.order_by(ProviderProfile.created_at.desc(), ProviderProfile.id.desc())
                    .limit(MAX_RESULTS)
                    .all()
                )
                return [JobListing.from_model(job) for job in jobs]
        except SQLAlchemyError as e:
            logger.error(f"Failed to list jobs with {filters}: {e}")
            raise PersistenceError("Failed to list jobs") from e
