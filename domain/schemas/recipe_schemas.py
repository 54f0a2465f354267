"""Pydantic schemas for recipes, their ingredients and reviews."""

from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from uuid import UUID
from datetime import datetime

from domain.enums import Difficulty
from domain.schemas.profile_schemas import AuthorSummary


class IngredientInput(BaseModel):
    """
    One ingredient row as typed in the recipe editor.

    Rows missing either the ingredient name or the quantity are dropped
    when the recipe is saved, so blank editor rows are accepted here.
    """

    ingredient: str = ""
    quantity: str = ""
    unit: Optional[str] = ""

    @field_validator("ingredient", "quantity", "unit", mode="before")
    @classmethod
    def coerce_text(cls, v):
        if v is None:
            return ""
        if isinstance(v, (int, float)):
            return str(v)
        return v.strip() if isinstance(v, str) else v

    def is_complete(self) -> bool:
        return bool(self.ingredient and self.quantity)


class RecipeCreate(BaseModel):
    """Recipe editor payload, used for both create (POST) and full update (PUT)."""

    title: str = Field(..., max_length=200)
    description: Optional[str] = None
    prep_time: int = Field(default=0, ge=0, description="Preparation time in minutes")
    cook_time: int = Field(default=0, ge=0, description="Cooking time in minutes")
    servings: int = Field(default=1, ge=1)
    difficulty: Difficulty = Difficulty.EASY
    instructions: Optional[str] = None
    image_url: Optional[str] = None
    ingredients: List[IngredientInput] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title must not be blank")
        return v


class IngredientResponse(BaseModel):
    id: UUID
    ingredient: str
    quantity: str
    unit: Optional[str] = None
    display_order: int

    model_config = {"from_attributes": True}


class RecipeSummary(BaseModel):
    """Card shown in the catalog, favorites and profile listings"""

    id: UUID
    user_id: UUID
    title: str
    description: Optional[str] = None
    prep_time: int = 0
    cook_time: int = 0
    total_time: int = 0
    servings: int = 1
    difficulty: Difficulty
    image_url: Optional[str] = None
    created_at: Optional[datetime] = None
    author: Optional[AuthorSummary] = None

    model_config = {"from_attributes": True}


class ReviewCreate(BaseModel):
    rating: int = Field(default=5, ge=1, le=5)
    comment: Optional[str] = Field(default="", max_length=5000)


class ReviewResponse(BaseModel):
    id: UUID
    recipe_id: UUID
    user_id: UUID
    rating: int
    comment: Optional[str] = None
    created_at: Optional[datetime] = None
    author: Optional[AuthorSummary] = None

    model_config = {"from_attributes": True}


class RecipeDetail(RecipeSummary):
    """Everything the recipe page renders"""

    instructions: Optional[str] = None
    updated_at: Optional[datetime] = None
    ingredients: List[IngredientResponse] = Field(default_factory=list)
    reviews: List[ReviewResponse] = Field(default_factory=list)
    average_rating: Optional[float] = Field(
        default=None, description="Mean rating rounded to one decimal, null without reviews"
    )
    review_count: int = 0
    is_favorite: bool = False
    is_owner: bool = False
