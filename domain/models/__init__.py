"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    build_engine,
    init_database,
    get_db_session,
    utcnow,
)
from domain.models.user import User, Profile
from domain.models.recipe import Recipe, RecipeIngredient, RecipeReview, Favorite
from domain.models.meal_plan import MealPlanEntry

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "build_engine",
    "init_database",
    "get_db_session",
    "utcnow",
    # Account models
    "User",
    "Profile",
    # Recipe models
    "Recipe",
    "RecipeIngredient",
    "RecipeReview",
    "Favorite",
    # Meal plan models
    "MealPlanEntry",
]
