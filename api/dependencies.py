"""
API dependencies for dependency injection
"""

from typing import Optional
from fastapi import Header

from app.exceptions import UnauthorizedError
from app.security import get_token_from_header
from domain.schemas.auth_schemas import SessionUser
from services.auth_service import AuthService


def get_current_user(authorization: Optional[str] = Header(None)) -> SessionUser:
    """
    Resolve the signed-in caller from ``Authorization: Bearer <token>``.

    Raises:
        UnauthorizedError: header missing, malformed, or token invalid/expired
    """
    if not authorization:
        raise UnauthorizedError("Authorization header required")

    token = get_token_from_header(authorization)
    if token is None:
        raise UnauthorizedError(
            "Invalid authorization header format. Use: Bearer <token>"
        )
    return AuthService.resolve_token(token)


def get_optional_user(
    authorization: Optional[str] = Header(None),
) -> Optional[SessionUser]:
    """Like get_current_user, but anonymous callers get None instead of a 401"""
    if not authorization:
        return None
    return get_current_user(authorization)
