"""
Favorite Repository - Data access layer for saved recipes
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session, joinedload
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.models import Favorite, Recipe
from app.exceptions import ConflictError


class FavoriteRepository(BaseRepository[Favorite]):
    """Repository for favorite data access"""

    def __init__(self, db: Session):
        super().__init__(db, Favorite)

    def get_for_user(self, user_id: UUID, recipe_id: UUID) -> Optional[Favorite]:
        return (
            self.db.query(Favorite)
            .filter(Favorite.user_id == user_id, Favorite.recipe_id == recipe_id)
            .first()
        )

    def is_favorite(self, user_id: UUID, recipe_id: UUID) -> bool:
        return self.get_for_user(user_id, recipe_id) is not None

    def list_for_user(self, user_id: UUID) -> List[Favorite]:
        """Saved recipes with their authors, most recently saved first"""
        return (
            self.db.query(Favorite)
            .options(joinedload(Favorite.recipe).joinedload(Recipe.author))
            .filter(Favorite.user_id == user_id)
            .order_by(Favorite.created_at.desc())
            .all()
        )

    def add_favorite(self, user_id: UUID, recipe_id: UUID) -> Favorite:
        favorite = Favorite(user_id=user_id, recipe_id=recipe_id)
        try:
            self.db.add(favorite)
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError(f"Recipe {recipe_id} is already in favorites")
        self.db.refresh(favorite)
        return favorite

    def remove_favorite(self, user_id: UUID, recipe_id: UUID) -> bool:
        count = (
            self.db.query(Favorite)
            .filter(Favorite.user_id == user_id, Favorite.recipe_id == recipe_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return count > 0
