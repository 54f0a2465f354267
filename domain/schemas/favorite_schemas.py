from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from domain.schemas.recipe_schemas import RecipeSummary


class FavoriteCreate(BaseModel):
    recipe_id: UUID


class FavoriteResponse(BaseModel):
    id: UUID
    recipe_id: UUID
    created_at: Optional[datetime] = None
    recipe: Optional[RecipeSummary] = None

    model_config = {"from_attributes": True}


class FavoriteToggleResponse(BaseModel):
    recipe_id: UUID
    is_favorite: bool
