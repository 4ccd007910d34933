"""
Security utilities for JWT authentication and password hashing.

Tokens are stateless HS256 JWTs carrying the user's identity claims
(id, name, phone, role) and expire after ACCESS_TOKEN_EXPIRE_DAYS.
Passwords are hashed using bcrypt.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from dailywage.core.config import settings
from dailywage.schemas.user import TokenClaims

# Password hashing context (bcrypt)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a hashed password."""
    # Bcrypt has a 72-byte limit - truncate if necessary
    password_bytes = plain_password.encode('utf-8')[:72]
    return pwd_context.verify(password_bytes, hashed_password)


def dummy_verify_password() -> None:
    """Spend one bcrypt check's worth of time without a real hash (unknown users)."""
    pwd_context.dummy_verify()


def get_password_hash(password: str) -> str:
    """
    Hash a password using bcrypt.

    Note: Bcrypt has a 72-byte limit. Passwords longer than 72 bytes
    are automatically truncated to comply with this limitation.
    """
    password_bytes = password.encode('utf-8')[:72]
    return pwd_context.hash(password_bytes)


def create_access_token(claims: TokenClaims, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a signed JWT for the given identity.

    Args:
        claims: Identity to embed (id, name, phone, role)
        expires_delta: Optional lifetime (default: ACCESS_TOKEN_EXPIRE_DAYS)

    Returns:
        Encoded JWT token as a string
    """
    if expires_delta is None:
        expires_delta = timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)

    to_encode = {
        "sub": str(claims.id),
        "name": claims.name,
        "phone": claims.phone,
        "role": claims.role.value,
        "exp": datetime.now(timezone.utc) + expires_delta,
    }
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_token(token: str) -> dict:
    """
    Decode and validate a JWT token.

    Raises:
        JWTError: If token is invalid or expired
    """
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])


def verify_token(token: str) -> TokenClaims:
    """
    Decode a token back into the identity claims it was issued for.

    Raises:
        JWTError: If the token is invalid, expired, or lacks identity claims
    """
    payload = decode_token(token)
    try:
        return TokenClaims(
            id=int(payload["sub"]),
            name=payload["name"],
            phone=payload["phone"],
            role=payload["role"],
        )
    except (KeyError, TypeError, ValueError) as e:
        raise JWTError(f"Malformed token claims: {e}")
