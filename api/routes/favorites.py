"""Favorite recipe routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from uuid import UUID
from typing import List

from api.dependencies import get_current_user
from domain.models import get_db_session
from domain.schemas.auth_schemas import SessionUser
from domain.schemas.favorite_schemas import FavoriteCreate, FavoriteResponse
from services.favorite_service import FavoriteService

router = APIRouter(prefix="/favorites", tags=["Favorites"])


@router.get("", response_model=List[FavoriteResponse])
def list_favorites(
    user: SessionUser = Depends(get_current_user),
    db: Session = Depends(get_db_session),
):
    """Saved recipes of the signed-in user, most recently saved first."""
    favorites = FavoriteService.list_favorites(db, user.id)
    return [FavoriteResponse.model_validate(f) for f in favorites]


@router.post("", response_model=FavoriteResponse, status_code=status.HTTP_201_CREATED)
def add_favorite(
    body: FavoriteCreate,
    user: SessionUser = Depends(get_current_user),
    db: Session = Depends(get_db_session),
):
    """Save a recipe."""
    favorite = FavoriteService.add_favorite(db, user.id, body.recipe_id)
    return FavoriteResponse.model_validate(favorite)


@router.delete("/{recipe_id}")
def remove_favorite(
    recipe_id: UUID,
    user: SessionUser = Depends(get_current_user),
    db: Session = Depends(get_db_session),
):
    """Remove a recipe from favorites."""
    FavoriteService.remove_favorite(db, user.id, recipe_id)
    return {"status": "ok", "removed": str(recipe_id)}
