"""
Pydantic schemas for registration, login and token claims.
"""

from pydantic import BaseModel, Field

from dailywage.models.user import UserRole
from dailywage.schemas.common import NonBlankStr


class RegisterRequest(BaseModel):
    """Request schema for user registration."""
    name: NonBlankStr = Field(..., max_length=100)
    phone: NonBlankStr = Field(..., max_length=20)
    password: NonBlankStr
    role: UserRole


class LoginRequest(BaseModel):
    """Request schema for login by phone number."""
    phone: NonBlankStr
    password: NonBlankStr


class TokenClaims(BaseModel):
    """Identity carried inside an access token."""
    id: int
    name: str
    phone: str
    role: UserRole


class UserPublic(TokenClaims):
    """User identity returned to clients (no password hash)."""

    class Config:
        from_attributes = True


class AuthResponse(BaseModel):
    """Registration/login response: the user plus a fresh token."""
    message: str
    user: UserPublic
    token: str
