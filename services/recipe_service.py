from typing import List, Optional, Tuple
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from app.exceptions import ForbiddenError, NotFoundError, ServiceValidationError
from domain.enums import Difficulty
from domain.mappers import RecipeMapper
from domain.models import Recipe, RecipeIngredient
from domain.schemas.recipe_schemas import IngredientInput, RecipeCreate, RecipeDetail
from repositories import FavoriteRepository, RecipeRepository, ReviewRepository

logger = logging.getLogger("recipebox.recipes")

# Query value meaning "no difficulty filter"
ALL_DIFFICULTIES = "all"


class RecipeService:
    """Business logic for the recipe catalog, recipe page and recipe editor"""

    @staticmethod
    def parse_difficulty(value: Optional[str]) -> Optional[Difficulty]:
        """Map a difficulty query value to the enum; None/"all" disables the filter"""
        if value is None or value == "" or value.lower() == ALL_DIFFICULTIES:
            return None
        for member in Difficulty:
            if member.value.lower() == value.lower():
                return member
        allowed = ", ".join(d.value for d in Difficulty)
        raise ServiceValidationError(
            f"Unknown difficulty '{value}'. Use one of: {allowed}, all"
        )

    @staticmethod
    def list_recipes(
        db: Session,
        q: Optional[str] = None,
        difficulty: Optional[str] = None,
        page: int = 1,
        page_size: int = 24,
    ) -> Tuple[List[Recipe], int]:
        """Search the catalog; returns one page of recipes and the total count"""
        search = q.strip() if q else None
        items, total = RecipeRepository(db).search(
            q=search or None,
            difficulty=RecipeService.parse_difficulty(difficulty),
            skip=(page - 1) * page_size,
            limit=page_size,
        )
        logger.info(f"recipes_listed q={search!r} difficulty={difficulty} total={total}")
        return items, total

    @staticmethod
    def get_recipe(db: Session, recipe_id: UUID) -> Recipe:
        recipe = RecipeRepository(db).get_by_id(recipe_id)
        if not recipe:
            raise NotFoundError(f"Recipe {recipe_id} not found")
        return recipe

    @staticmethod
    def get_owned_recipe(db: Session, user_id: UUID, recipe_id: UUID) -> Recipe:
        """Load a recipe the caller is allowed to change"""
        recipe = RecipeService.get_recipe(db, recipe_id)
        if recipe.user_id != user_id:
            logger.warning(
                f"recipe_owner_mismatch recipe_id={recipe_id} user_id={user_id}"
            )
            raise ForbiddenError("You can only edit your own recipes")
        return recipe

    @staticmethod
    def get_recipe_detail(
        db: Session, recipe_id: UUID, viewer_id: Optional[UUID] = None
    ) -> RecipeDetail:
        """
        Assemble the recipe page: recipe, author, ordered ingredients,
        reviews newest first, rating summary, and the caller's favorite flag.
        """
        recipe = RecipeService.get_recipe(db, recipe_id)
        reviews = ReviewRepository(db).list_for_recipe(recipe_id)
        is_favorite = False
        if viewer_id is not None:
            is_favorite = FavoriteRepository(db).is_favorite(viewer_id, recipe_id)
        return RecipeMapper.to_detail(
            recipe, reviews, viewer_id=viewer_id, is_favorite=is_favorite
        )

    @staticmethod
    def build_ingredients(rows: List[IngredientInput]) -> List[RecipeIngredient]:
        """Drop incomplete rows and number the remaining ones in order"""
        kept = [row for row in rows if row.is_complete()]
        return [
            RecipeIngredient(
                ingredient=row.ingredient,
                quantity=row.quantity,
                unit=row.unit or None,
                display_order=index,
            )
            for index, row in enumerate(kept)
        ]

    @staticmethod
    def create_recipe(db: Session, user_id: UUID, data: RecipeCreate) -> RecipeDetail:
        recipe = Recipe(
            user_id=user_id,
            title=data.title,
            description=data.description,
            prep_time=data.prep_time,
            cook_time=data.cook_time,
            servings=data.servings,
            difficulty=data.difficulty,
            instructions=data.instructions,
            image_url=data.image_url,
        )
        ingredients = RecipeService.build_ingredients(data.ingredients)
        recipe = RecipeRepository(db).create_recipe(recipe, ingredients)
        logger.info(
            f"recipe_created recipe_id={recipe.id} user_id={user_id} "
            f"ingredients={len(ingredients)}"
        )
        return RecipeMapper.to_detail(recipe, [], viewer_id=user_id)

    @staticmethod
    def update_recipe(
        db: Session, user_id: UUID, recipe_id: UUID, data: RecipeCreate
    ) -> RecipeDetail:
        """Overwrite all editable fields and replace the ingredient list"""
        recipe = RecipeService.get_owned_recipe(db, user_id, recipe_id)

        recipe.title = data.title
        recipe.description = data.description
        recipe.prep_time = data.prep_time
        recipe.cook_time = data.cook_time
        recipe.servings = data.servings
        recipe.difficulty = data.difficulty
        recipe.instructions = data.instructions
        recipe.image_url = data.image_url

        ingredients = RecipeService.build_ingredients(data.ingredients)
        recipe = RecipeRepository(db).replace_ingredients(recipe, ingredients)
        logger.info(
            f"recipe_updated recipe_id={recipe_id} user_id={user_id} "
            f"ingredients={len(ingredients)}"
        )
        return RecipeService.get_recipe_detail(db, recipe_id, viewer_id=user_id)

    @staticmethod
    def delete_recipe(db: Session, user_id: UUID, recipe_id: UUID) -> None:
        recipe = RecipeService.get_owned_recipe(db, user_id, recipe_id)
        RecipeRepository(db).delete_recipe(recipe)
        logger.info(f"recipe_deleted recipe_id={recipe_id} user_id={user_id}")
