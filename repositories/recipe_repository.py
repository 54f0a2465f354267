"""
Recipe Repository - Data access layer for recipes and their ingredient lists
"""

from typing import List, Optional, Tuple
from uuid import UUID
from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload, selectinload

from repositories.base import BaseRepository
from domain.enums import Difficulty
from domain.models import Recipe, RecipeIngredient


class RecipeRepository(BaseRepository[Recipe]):
    """Repository for recipe data access"""

    def __init__(self, db: Session):
        super().__init__(db, Recipe)

    def get_by_id(self, recipe_id: UUID) -> Optional[Recipe]:
        """Get recipe with author and ingredients loaded"""
        return (
            self.db.query(Recipe)
            .options(joinedload(Recipe.author), selectinload(Recipe.ingredients))
            .filter(Recipe.id == recipe_id)
            .first()
        )

    def search(
        self,
        q: Optional[str] = None,
        difficulty: Optional[Difficulty] = None,
        skip: int = 0,
        limit: int = 24,
    ) -> Tuple[List[Recipe], int]:
        """
        Catalog query, newest first.

        Args:
            q: case-insensitive substring matched against title or description
            difficulty: exact difficulty filter
            skip: rows to skip
            limit: page size

        Returns:
            (page of recipes with authors loaded, total matching rows)
        """
        query = self.db.query(Recipe)
        if difficulty is not None:
            query = query.filter(Recipe.difficulty == difficulty)
        if q:
            query = query.filter(
                or_(
                    Recipe.title.icontains(q, autoescape=True),
                    Recipe.description.icontains(q, autoescape=True),
                )
            )

        total = query.count()
        items = (
            query.options(joinedload(Recipe.author))
            .order_by(Recipe.created_at.desc(), Recipe.id)
            .offset(skip)
            .limit(limit)
            .all()
        )
        return items, total

    def list_by_user(self, user_id: UUID) -> List[Recipe]:
        """Recipes published by one author, newest first"""
        return (
            self.db.query(Recipe)
            .options(joinedload(Recipe.author))
            .filter(Recipe.user_id == user_id)
            .order_by(Recipe.created_at.desc())
            .all()
        )

    def create_recipe(
        self, recipe: Recipe, ingredients: List[RecipeIngredient]
    ) -> Recipe:
        """Insert a recipe and its ingredient rows in one transaction"""
        recipe.ingredients = ingredients
        self.db.add(recipe)
        self.db.commit()
        return self.get_by_id(recipe.id)

    def replace_ingredients(
        self, recipe: Recipe, ingredients: List[RecipeIngredient]
    ) -> Recipe:
        """
        Commit pending field changes on ``recipe`` and swap its whole ingredient
        list for ``ingredients``.
        """
        # delete-orphan removes the previous rows on flush
        recipe.ingredients = ingredients
        self.db.commit()
        self.db.refresh(recipe)
        return recipe

    def delete_recipe(self, recipe: Recipe) -> None:
        """Delete a recipe; ingredients, reviews, favorites and plan entries cascade"""
        self.db.delete(recipe)
        self.db.commit()
