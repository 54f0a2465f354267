from datetime import date
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from api.dependencies import get_current_user
from domain.mappers import MealPlanMapper
from domain.models import get_db_session
from domain.schemas.auth_schemas import SessionUser
from domain.schemas.plan_schemas import (
    MealPlanEntryCreate,
    MealPlanEntryResponse,
    MealPlanResponse,
)
from services.meal_plan_service import MealPlanService

router = APIRouter(prefix="/meal-plan", tags=["Meal Planning"])


@router.get("", response_model=MealPlanResponse)
def get_meal_plan(
    from_date: Optional[date] = Query(
        default=None, description="First day to include (defaults to today)"
    ),
    user: SessionUser = Depends(get_current_user),
    db: Session = Depends(get_db_session),
):
    """
    Upcoming meal plan of the signed-in user.

    Entries are ordered by date, then by meal slot
    (Breakfast, Lunch, Dinner, Snack), and are also returned grouped per day.
    """
    return MealPlanService.get_plan(db, user.id, from_date)


@router.post("", response_model=MealPlanEntryResponse, status_code=status.HTTP_201_CREATED)
def add_to_meal_plan(
    body: MealPlanEntryCreate,
    user: SessionUser = Depends(get_current_user),
    db: Session = Depends(get_db_session),
):
    """Schedule a recipe into a meal slot (meal_type defaults to Dinner)."""
    entry = MealPlanService.add_entry(db, user.id, body)
    return MealPlanMapper.to_entry(entry)


@router.delete("/{entry_id}")
def remove_from_meal_plan(
    entry_id: UUID,
    user: SessionUser = Depends(get_current_user),
    db: Session = Depends(get_db_session),
):
    """Remove one of your meal plan entries."""
    MealPlanService.remove_entry(db, user.id, entry_id)
    return {"status": "ok", "removed": str(entry_id)}
