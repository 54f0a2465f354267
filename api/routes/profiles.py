"""Profile routes (own profile editing, public author pages)"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from uuid import UUID
from typing import List

from api.dependencies import get_current_user
from domain.mappers import RecipeMapper
from domain.models import get_db_session
from domain.schemas.auth_schemas import SessionUser
from domain.schemas.profile_schemas import ProfileResponse, ProfileUpdateRequest
from domain.schemas.recipe_schemas import RecipeSummary
from services.profile_service import ProfileService

router = APIRouter(prefix="/profiles", tags=["Profiles"])


@router.get("/me", response_model=ProfileResponse)
def get_my_profile(
    user: SessionUser = Depends(get_current_user),
    db: Session = Depends(get_db_session),
):
    """Get the signed-in user's profile."""
    return ProfileResponse.model_validate(ProfileService.get_profile(db, user.id))


@router.put("/me", response_model=ProfileResponse)
def update_my_profile(
    body: ProfileUpdateRequest,
    user: SessionUser = Depends(get_current_user),
    db: Session = Depends(get_db_session),
):
    """Update full name, bio and avatar URL of the signed-in user."""
    profile = ProfileService.update_profile(db, user.id, body)
    return ProfileResponse.model_validate(profile)


@router.get("/{user_id}", response_model=ProfileResponse)
def get_profile(user_id: UUID, db: Session = Depends(get_db_session)):
    """Public profile of any author."""
    return ProfileResponse.model_validate(ProfileService.get_profile(db, user_id))


@router.get("/{user_id}/recipes", response_model=List[RecipeSummary])
def get_profile_recipes(user_id: UUID, db: Session = Depends(get_db_session)):
    """Recipes published by an author, newest first."""
    recipes = ProfileService.list_recipes(db, user_id)
    return [RecipeMapper.to_summary(r) for r in recipes]
