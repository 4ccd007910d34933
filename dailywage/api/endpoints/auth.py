"""
Authentication endpoints for registration and login.

- POST /register: Create a provider or seeker account
- POST /login: Authenticate by phone and password

Both return the user's identity and a signed access token.
"""

import logging
from fastapi import APIRouter, Depends

from dailywage.core.deps import get_user_repository
from dailywage.core.exceptions import AuthError
from dailywage.core.security import create_access_token, dummy_verify_password, get_password_hash, verify_password
from dailywage.crud.user import UserRepository
from dailywage.schemas.user import AuthResponse, LoginRequest, RegisterRequest, UserPublic

router = APIRouter(prefix="/auth", tags=["Authentication"])
logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


@router.post("/register", response_model=AuthResponse)
def register(
    request: RegisterRequest,
    users: UserRepository = Depends(get_user_repository)
):
    """
    Register a new user account.

    Fails with 400 if the phone number is already registered.
    Returns a token for immediate use.
    """
    user = users.create(
        name=request.name,
        phone=request.phone,
        password_hash=get_password_hash(request.password),
        role=request.role,
    )
    logger.info(f"New user registered: {user.id} ({user.role.value})")

    public = UserPublic.model_validate(user)
    return AuthResponse(message="Registered successfully", user=public, token=create_access_token(public))


@router.post("/login", response_model=AuthResponse)
def login(
    request: LoginRequest,
    users: UserRepository = Depends(get_user_repository)
):
    """
    Authenticate by phone and password.

    Unknown phone numbers and wrong passwords produce the same error so
    callers cannot tell which phone numbers are registered.
    """
    user = users.get_by_phone(request.phone)
    if user is None:
        # Same bcrypt cost as a wrong password
        dummy_verify_password()
        logger.warning("Failed login attempt")
        raise AuthError(INVALID_CREDENTIALS)
    if not verify_password(request.password, user.password_hash):
        logger.warning("Failed login attempt")
        raise AuthError(INVALID_CREDENTIALS)

    logger.info(f"User logged in: {user.id}")

    public = UserPublic.model_validate(user)
    return AuthResponse(message="Login success", user=public, token=create_access_token(public))
