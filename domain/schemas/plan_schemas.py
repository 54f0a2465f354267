from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from domain.enums import MealType


class MealPlanEntryCreate(BaseModel):
    recipe_id: UUID
    meal_date: date
    meal_type: MealType = MealType.DINNER


class MealPlanRecipe(BaseModel):
    id: UUID
    title: str
    image_url: Optional[str] = None

    model_config = {"from_attributes": True}


class MealPlanEntryResponse(BaseModel):
    id: UUID
    recipe_id: UUID
    meal_date: date
    meal_type: MealType
    created_at: Optional[datetime] = None
    recipe: Optional[MealPlanRecipe] = None

    model_config = {"from_attributes": True}


class MealPlanDay(BaseModel):
    meal_date: date
    entries: List[MealPlanEntryResponse] = Field(default_factory=list)


class MealPlanResponse(BaseModel):
    from_date: date
    entries: List[MealPlanEntryResponse] = Field(default_factory=list)
    days: List[MealPlanDay] = Field(default_factory=list)
