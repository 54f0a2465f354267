"""
Review Repository - Data access layer for recipe ratings and comments
"""

from typing import List
from uuid import UUID
from sqlalchemy.orm import Session, joinedload

from repositories.base import BaseRepository
from domain.models import RecipeReview


class ReviewRepository(BaseRepository[RecipeReview]):
    """Repository for review data access"""

    def __init__(self, db: Session):
        super().__init__(db, RecipeReview)

    def list_for_recipe(self, recipe_id: UUID) -> List[RecipeReview]:
        """Reviews of a recipe with reviewer profiles, newest first"""
        return (
            self.db.query(RecipeReview)
            .options(joinedload(RecipeReview.author))
            .filter(RecipeReview.recipe_id == recipe_id)
            .order_by(RecipeReview.created_at.desc())
            .all()
        )

    def add_review(
        self, recipe_id: UUID, user_id: UUID, rating: int, comment: str = None
    ) -> RecipeReview:
        review = RecipeReview(
            recipe_id=recipe_id, user_id=user_id, rating=rating, comment=comment
        )
        self.create(review)
        return review
