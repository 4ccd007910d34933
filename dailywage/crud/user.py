"""
Credential store: user registration and lookup by phone.
"""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from dailywage.core.exceptions import PersistenceError, ValidationError
from dailywage.models.user import User, UserRole

logger = logging.getLogger(__name__)

DUPLICATE_PHONE_MESSAGE = "Phone already registered"


class UserRepository:
    """Persists user identities. Sessions come from the injected factory."""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def get_by_phone(self, phone: str) -> Optional[User]:
        try:
            with self.session_factory() as session:
                return session.query(User).filter(User.phone == phone).first()
        except SQLAlchemyError as e:
            logger.error(f"Failed to look up user by phone: {e}")
            raise PersistenceError("Failed to look up user") from e

    def create(self, name: str, phone: str, password_hash: str, role: UserRole) -> User:
        """
        Insert a new user.

        Raises:
            ValidationError: If the phone number is already registered
            PersistenceError: On any other store failure
        """
        if self.get_by_phone(phone) is not None:
            raise ValidationError(DUPLICATE_PHONE_MESSAGE)

        user = User(name=name, phone=phone, password_hash=password_hash, role=role)
        try:
            with self.session_factory() as session, session.begin():
                session.add(user)
        except IntegrityError as e:
            # Lost a race with a concurrent registration of the same phone
            logger.warning(f"Duplicate phone on insert: {e.orig}")
            raise ValidationError(DUPLICATE_PHONE_MESSAGE) from e
        except SQLAlchemyError as e:
            logger.error(f"Failed to create user: {e}")
            raise PersistenceError("Failed to create user") from e

        return user
