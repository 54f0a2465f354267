"""
Recipe domain mappers.
Handles transformation between ORM models and DTOs for recipe-related entities.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List, Optional
from uuid import UUID

from domain.models import Recipe, RecipeReview
from domain.schemas.recipe_schemas import (
    RecipeSummary,
    RecipeDetail,
    IngredientResponse,
    ReviewResponse,
)


def average_rating(ratings: Iterable[int]) -> Optional[float]:
    """Mean rating rounded half-up to one decimal; None when there are no ratings."""
    ratings = list(ratings)
    if not ratings:
        return None
    mean = Decimal(sum(ratings)) / Decimal(len(ratings))
    return float(mean.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


class RecipeMapper:
    """Mapper for recipe-related transformations."""

    @staticmethod
    def to_summary(recipe: Recipe) -> RecipeSummary:
        return RecipeSummary.model_validate(recipe)

    @staticmethod
    def to_review(review: RecipeReview) -> ReviewResponse:
        return ReviewResponse.model_validate(review)

    @staticmethod
    def to_detail(
        recipe: Recipe,
        reviews: List[RecipeReview],
        viewer_id: Optional[UUID] = None,
        is_favorite: bool = False,
    ) -> RecipeDetail:
        """
        Convert a Recipe ORM model to the RecipeDetail DTO.

        Args:
            recipe: Recipe ORM instance with author and ingredients loaded
            reviews: the recipe's reviews, newest first
            viewer_id: id of the authenticated caller, None for anonymous
            is_favorite: whether the caller has saved the recipe

        Returns:
            RecipeDetail DTO with ratings aggregated
        """
        summary = RecipeMapper.to_summary(recipe)
        ingredients = sorted(recipe.ingredients, key=lambda i: i.display_order)

        return RecipeDetail(
            **summary.model_dump(),
            instructions=recipe.instructions,
            updated_at=recipe.updated_at,
            ingredients=[IngredientResponse.model_validate(i) for i in ingredients],
            reviews=[RecipeMapper.to_review(r) for r in reviews],
            average_rating=average_rating(r.rating for r in reviews),
            review_count=len(reviews),
            is_favorite=is_favorite if viewer_id is not None else False,
            is_owner=viewer_id is not None and viewer_id == recipe.user_id,
        )
