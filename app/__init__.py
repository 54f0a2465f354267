"""
App package - Application configuration and core utilities.
Contains settings, exceptions, security helpers and foundational application code.
"""

from app.config import settings
from app.exceptions import (
    RecipeBoxError,
    ServiceValidationError,
    NotFoundError,
    ConflictError,
    UnauthorizedError,
    ForbiddenError,
)

__all__ = [
    "settings",
    "RecipeBoxError",
    "ServiceValidationError",
    "NotFoundError",
    "ConflictError",
    "UnauthorizedError",
    "ForbiddenError",
]
