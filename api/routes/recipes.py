"""
Recipe routes - catalog search, recipe page, recipe editor and reviews.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID

from api.dependencies import get_current_user, get_optional_user
from api.responses import PaginatedResponse, paginated_response
from app.config import settings
from domain.mappers import RecipeMapper
from domain.models import get_db_session
from domain.schemas.auth_schemas import SessionUser
from domain.schemas.favorite_schemas import FavoriteToggleResponse
from domain.schemas.recipe_schemas import (
    RecipeCreate,
    RecipeDetail,
    RecipeSummary,
    ReviewCreate,
    ReviewResponse,
)
from services.favorite_service import FavoriteService
from services.recipe_service import RecipeService
from services.review_service import ReviewService

router = APIRouter(prefix="/recipes", tags=["Recipes"])


@router.get("", response_model=PaginatedResponse[RecipeSummary])
def list_recipes(
    q: Optional[str] = Query(
        default=None, description="Case-insensitive search in title and description"
    ),
    difficulty: Optional[str] = Query(
        default=None, description="Easy, Medium, Hard, or 'all'"
    ),
    page: int = Query(default=1, ge=1, description="Page number"),
    page_size: Optional[int] = Query(
        default=None, ge=1, le=settings.max_page_size, description="Items per page"
    ),
    db: Session = Depends(get_db_session),
):
    """
    Browse the shared catalog, newest first.

    - **q**: matches title or description
    - **difficulty**: exact difficulty filter
    - **page** / **page_size**: pagination
    """
    size = page_size or settings.default_page_size
    recipes, total = RecipeService.list_recipes(
        db, q=q, difficulty=difficulty, page=page, page_size=size
    )
    return paginated_response(
        [RecipeMapper.to_summary(r) for r in recipes], total, page, size
    )


@router.post("", response_model=RecipeDetail, status_code=status.HTTP_201_CREATED)
def create_recipe(
    body: RecipeCreate,
    user: SessionUser = Depends(get_current_user),
    db: Session = Depends(get_db_session),
):
    """Publish a recipe with its ingredient list."""
    return RecipeService.create_recipe(db, user.id, body)


@router.get("/{recipe_id}", response_model=RecipeDetail)
def get_recipe(
    recipe_id: UUID,
    user: Optional[SessionUser] = Depends(get_optional_user),
    db: Session = Depends(get_db_session),
):
    """
    Full recipe page: ingredients, instructions, reviews with average rating,
    and, for signed-in callers, whether the recipe is saved and owned.
    """
    viewer_id = user.id if user else None
    return RecipeService.get_recipe_detail(db, recipe_id, viewer_id=viewer_id)


@router.put("/{recipe_id}", response_model=RecipeDetail)
def update_recipe(
    recipe_id: UUID,
    body: RecipeCreate,
    user: SessionUser = Depends(get_current_user),
    db: Session = Depends(get_db_session),
):
    """Replace a recipe you own, including its whole ingredient list."""
    return RecipeService.update_recipe(db, user.id, recipe_id, body)


@router.delete("/{recipe_id}")
def delete_recipe(
    recipe_id: UUID,
    user: SessionUser = Depends(get_current_user),
    db: Session = Depends(get_db_session),
):
    """Delete a recipe you own."""
    RecipeService.delete_recipe(db, user.id, recipe_id)
    return {"status": "ok", "deleted": str(recipe_id)}


@router.get("/{recipe_id}/reviews", response_model=List[ReviewResponse])
def list_reviews(recipe_id: UUID, db: Session = Depends(get_db_session)):
    """Reviews of a recipe, newest first."""
    reviews = ReviewService.list_reviews(db, recipe_id)
    return [RecipeMapper.to_review(r) for r in reviews]


@router.post(
    "/{recipe_id}/reviews",
    response_model=ReviewResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_review(
    recipe_id: UUID,
    body: ReviewCreate,
    user: SessionUser = Depends(get_current_user),
    db: Session = Depends(get_db_session),
):
    """Leave a 1-5 star rating with an optional comment."""
    review = ReviewService.add_review(db, user.id, recipe_id, body)
    return RecipeMapper.to_review(review)


@router.post("/{recipe_id}/favorite/toggle", response_model=FavoriteToggleResponse)
def toggle_favorite(
    recipe_id: UUID,
    user: SessionUser = Depends(get_current_user),
    db: Session = Depends(get_db_session),
):
    """Save or unsave a recipe; returns the new state."""
    is_favorite = FavoriteService.toggle_favorite(db, user.id, recipe_id)
    return FavoriteToggleResponse(recipe_id=recipe_id, is_favorite=is_favorite)
