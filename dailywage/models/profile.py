"""
Provider and seeker profile models.

Each user owns at most one profile of its kind (unique user_id). A
seeker's work types and available days live in child tables that are
rewritten wholesale on every profile save.
"""

from sqlalchemy import Column, Integer, String, Text, Numeric, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from dailywage.core.database import Base

# Value of the hours fields that makes custom_hours meaningful
CUSTOM_HOURS = "Custom"


class ProviderProfile(Base):
    """
    A provider's job posting. One per provider; saved with upsert semantics.
    """
    __tablename__ = "providers"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False, index=True)

    work_type = Column(String(100), nullable=False, index=True)
    budget_per_day = Column(Numeric(10, 2), nullable=False)
    workers_needed = Column(Integer, nullable=False, default=1)
    working_hours = Column(String(50), nullable=False)
    custom_hours = Column(String(100), nullable=True)  # only when working_hours == "Custom"
    location = Column(String(255), nullable=False)
    work_start_time = Column(String(50), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="provider_profile")

    def __repr__(self):
        return f"<ProviderProfile(id={self.id}, user_id={self.user_id}, work_type='{self.work_type}')>"


class SeekerProfile(Base):
    """
    A worker's availability profile. One per seeker; saved with upsert semantics.
    """
    __tablename__ = "seekers"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False, index=True)

    expected_wage = Column(Numeric(10, 2), nullable=False)
    hours_availability = Column(String(50), nullable=False)
    custom_hours = Column(String(100), nullable=True)  # only when hours_availability == "Custom"
    location = Column(String(255), nullable=False)
    experience = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="seeker_profile")
    # Read back in insertion order, i.e. the order they were submitted
    work_types = relationship("SeekerWorkType", order_by="SeekerWorkType.id", cascade="all, delete-orphan")
    available_days = relationship("SeekerAvailableDay", order_by="SeekerAvailableDay.id", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<SeekerProfile(id={self.id}, user_id={self.user_id})>"


class SeekerWorkType(Base):
    __tablename__ = "seeker_work_types"

    id = Column(Integer, primary_key=True)
    seeker_id = Column(Integer, ForeignKey("seekers.id", ondelete="CASCADE"), nullable=False, index=True)
    work_type = Column(String(100), nullable=False, index=True)


class SeekerAvailableDay(Base):
    __tablename__ = "seeker_available_days"

    id = Column(Integer, primary_key=True)
    seeker_id = Column(Integer, ForeignKey("seekers.id", ondelete="CASCADE"), nullable=False, index=True)
    day = Column(String(20), nullable=False)
