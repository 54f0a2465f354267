from typing import List
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from app.exceptions import NotFoundError
from domain.models import Favorite
from repositories import FavoriteRepository
from services.recipe_service import RecipeService

logger = logging.getLogger("recipebox.favorites")


class FavoriteService:
    """Saved recipes per user"""

    @staticmethod
    def list_favorites(db: Session, user_id: UUID) -> List[Favorite]:
        return FavoriteRepository(db).list_for_user(user_id)

    @staticmethod
    def add_favorite(db: Session, user_id: UUID, recipe_id: UUID) -> Favorite:
        RecipeService.get_recipe(db, recipe_id)
        favorite = FavoriteRepository(db).add_favorite(user_id, recipe_id)
        logger.info(f"favorite_added recipe_id={recipe_id} user_id={user_id}")
        return favorite

    @staticmethod
    def remove_favorite(db: Session, user_id: UUID, recipe_id: UUID) -> None:
        removed = FavoriteRepository(db).remove_favorite(user_id, recipe_id)
        if not removed:
            raise NotFoundError(f"Recipe {recipe_id} is not in favorites")
        logger.info(f"favorite_removed recipe_id={recipe_id} user_id={user_id}")

    @staticmethod
    def toggle_favorite(db: Session, user_id: UUID, recipe_id: UUID) -> bool:
        """Flip the saved state of a recipe; returns the new state"""
        repo = FavoriteRepository(db)
        if repo.is_favorite(user_id, recipe_id):
            repo.remove_favorite(user_id, recipe_id)
            logger.info(f"favorite_removed recipe_id={recipe_id} user_id={user_id}")
            return False

        FavoriteService.add_favorite(db, user_id, recipe_id)
        return True
