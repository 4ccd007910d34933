"""
FastAPI dependencies for authentication and data access.

The session factory lives on app.state (see main.create_app); the
repository dependencies below hand it to each repository's constructor.
"""

import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError
from sqlalchemy.orm import sessionmaker

from dailywage.core.exceptions import AuthError
from dailywage.core.security import verify_token
from dailywage.crud.profile import ProfileRepository
from dailywage.crud.user import UserRepository
from dailywage.schemas.user import TokenClaims
from dailywage.services.listing_service import ListingService

logger = logging.getLogger(__name__)

# HTTP Bearer token scheme (Authorization: Bearer <token>)
# auto_error is off so a missing header is reported as AuthError (401)
security = HTTPBearer(auto_error=False)


def get_session_factory(request: Request) -> sessionmaker:
    return request.app.state.session_factory


def get_user_repository(session_factory: sessionmaker = Depends(get_session_factory)) -> UserRepository:
    return UserRepository(session_factory)


def get_profile_repository(session_factory: sessionmaker = Depends(get_session_factory)) -> ProfileRepository:
    return ProfileRepository(session_factory)


def get_listing_service(session_factory: sessionmaker = Depends(get_session_factory)) -> ListingService:
    return ListingService(session_factory)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> TokenClaims:
    """
    Extract and validate the caller's identity from the JWT token.

    Verification is stateless: the claims embedded at login are trusted
    until the token expires.

    Raises:
        AuthError: If the token is missing, invalid or expired
    """
    if credentials is None or not credentials.credentials:
        raise AuthError("No token provided")

    try:
        return verify_token(credentials.credentials)
    except JWTError as e:
        logger.warning(f"Rejected token: {e}")
        raise AuthError("Invalid or expired token")
