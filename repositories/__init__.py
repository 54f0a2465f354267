"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.user_repository import UserRepository, ProfileRepository
from repositories.recipe_repository import RecipeRepository
from repositories.review_repository import ReviewRepository
from repositories.favorite_repository import FavoriteRepository
from repositories.meal_plan_repository import MealPlanRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "ProfileRepository",
    "RecipeRepository",
    "ReviewRepository",
    "FavoriteRepository",
    "MealPlanRepository",
]
