"""
User model for authentication.

A User is created once at registration and is either a provider
(posting daily-wage work) or a seeker (looking for work).
"""

import enum
from sqlalchemy import Column, Integer, String, DateTime, Enum, func
from sqlalchemy.orm import relationship
from dailywage.core.database import Base


class UserRole(str, enum.Enum):
    PROVIDER = "provider"
    SEEKER = "seeker"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)

    # Login identifier, globally unique
    phone = Column(String(20), unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)

    role = Column(
        Enum(UserRole, values_callable=lambda roles: [r.value for r in roles], name="userrole"),
        nullable=False
    )

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships (at most one profile of each kind)
    provider_profile = relationship("ProviderProfile", back_populates="user", uselist=False)
    seeker_profile = relationship("SeekerProfile", back_populates="user", uselist=False)

    def __repr__(self):
        return f"<User(id={self.id}, phone='{self.phone}', role={self.role.value})>"
