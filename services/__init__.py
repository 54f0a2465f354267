"""Services package - Business logic layer"""

from services.auth_service import AuthService
from services.profile_service import ProfileService
from services.recipe_service import RecipeService
from services.review_service import ReviewService
from services.favorite_service import FavoriteService
from services.meal_plan_service import MealPlanService

__all__ = [
    "AuthService",
    "ProfileService",
    "RecipeService",
    "ReviewService",
    "FavoriteService",
    "MealPlanService",
]
