from typing import List
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from domain.models import RecipeReview
from domain.schemas.recipe_schemas import ReviewCreate
from repositories import ReviewRepository
from services.recipe_service import RecipeService

logger = logging.getLogger("recipebox.reviews")


class ReviewService:
    """Star ratings and comments on recipes"""

    @staticmethod
    def list_reviews(db: Session, recipe_id: UUID) -> List[RecipeReview]:
        RecipeService.get_recipe(db, recipe_id)
        return ReviewRepository(db).list_for_recipe(recipe_id)

    @staticmethod
    def add_review(
        db: Session, user_id: UUID, recipe_id: UUID, data: ReviewCreate
    ) -> RecipeReview:
        """Record a review; a user may review the same recipe more than once"""
        RecipeService.get_recipe(db, recipe_id)
        review = ReviewRepository(db).add_review(
            recipe_id=recipe_id,
            user_id=user_id,
            rating=data.rating,
            comment=data.comment,
        )
        logger.info(
            f"review_added recipe_id={recipe_id} user_id={user_id} rating={data.rating}"
        )
        return review
