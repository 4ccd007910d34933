"""
Repositories for database models.

This layer keeps SQL out of the API routes. Each repository takes the
session factory in its constructor instead of reaching for a global
database handle.
"""

from dailywage.crud.profile import ProfileRepository
from dailywage.crud.user import UserRepository

__all__ = ["ProfileRepository", "UserRepository"]
