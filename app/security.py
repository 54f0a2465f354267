"""
Security utilities for authentication.

Provides password hashing and JWT access token generation and validation.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError

from app.config import settings

logger = logging.getLogger("recipebox.security")


# ==================== PASSWORD HASHING ====================


def hash_password(password: str) -> str:
    """
    Hash a password using bcrypt.

    Args:
        password: Plain text password

    Returns:
        Hashed password string
    """
    salt = bcrypt.gensalt(rounds=settings.password_hash_rounds)
    hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    """
    Verify a password against its hash.

    Returns:
        True if password matches, False otherwise (including malformed hashes)
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError as e:
        logger.error(f"Password verification failed: {e}")
        return False


# ==================== JWT TOKENS ====================


def create_access_token(
    user_id: str,
    email: str,
    expires_minutes: Optional[int] = None,
) -> str:
    """
    Create a signed JWT access token.

    Args:
        user_id: User's UUID (stored in the ``sub`` claim)
        email: User's email
        expires_minutes: Override for the configured token lifetime

    Returns:
        Encoded JWT access token
    """
    now = datetime.now(timezone.utc)
    lifetime = expires_minutes or settings.access_token_expire_minutes
    expire = now + timedelta(minutes=lifetime)

    payload = {
        "sub": str(user_id),
        "email": email,
        "type": "access",
        "iat": now,
        "exp": expire,
    }

    token = jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)
    logger.debug(f"Created access token for user {user_id}, expires at {expire}")
    return token


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """
    Decode and validate a JWT access token.

    Returns:
        Decoded payload if valid, None otherwise
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm]
        )
    except ExpiredSignatureError:
        logger.debug("Access token expired")
        return None
    except InvalidTokenError as e:
        logger.warning(f"Invalid access token: {e}")
        return None

    if payload.get("type") != "access" or not payload.get("sub"):
        logger.warning("Access token missing subject or has wrong type")
        return None

    return payload


def get_token_from_header(authorization: Optional[str]) -> Optional[str]:
    """
    Extract Bearer token from Authorization header.

    Returns:
        Token string if valid Bearer format, None otherwise
    """
    if not authorization:
        return None

    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None

    return parts[1]
