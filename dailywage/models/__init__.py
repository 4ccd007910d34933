"""
Database models package.
"""

from dailywage.models.user import User, UserRole
from dailywage.models.profile import (
    CUSTOM_HOURS,
    ProviderProfile,
    SeekerProfile,
    SeekerWorkType,
    SeekerAvailableDay,
)

__all__ = [
    "User",
    "UserRole",
    "CUSTOM_HOURS",
    "ProviderProfile",
    "SeekerProfile",
    "SeekerWorkType",
    "SeekerAvailableDay",
]
