"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.auth_schemas import (
    SignUpRequest,
    LoginRequest,
    SessionUser,
    SessionResponse,
)
from domain.schemas.profile_schemas import (
    ProfileUpdateRequest,
    ProfileResponse,
    AuthorSummary,
)
from domain.schemas.recipe_schemas import (
    IngredientInput,
    RecipeCreate,
    IngredientResponse,
    RecipeSummary,
    RecipeDetail,
    ReviewCreate,
    ReviewResponse,
)
from domain.schemas.favorite_schemas import (
    FavoriteCreate,
    FavoriteResponse,
    FavoriteToggleResponse,
)
from domain.schemas.plan_schemas import (
    MealPlanEntryCreate,
    MealPlanRecipe,
    MealPlanEntryResponse,
    MealPlanDay,
    MealPlanResponse,
)

__all__ = [
    # Auth schemas
    "SignUpRequest",
    "LoginRequest",
    "SessionUser",
    "SessionResponse",
    # Profile schemas
    "ProfileUpdateRequest",
    "ProfileResponse",
    "AuthorSummary",
    # Recipe schemas
    "IngredientInput",
    "RecipeCreate",
    "IngredientResponse",
    "RecipeSummary",
    "RecipeDetail",
    "ReviewCreate",
    "ReviewResponse",
    # Favorite schemas
    "FavoriteCreate",
    "FavoriteResponse",
    "FavoriteToggleResponse",
    # Meal plan schemas
    "MealPlanEntryCreate",
    "MealPlanRecipe",
    "MealPlanEntryResponse",
    "MealPlanDay",
    "MealPlanResponse",
]
