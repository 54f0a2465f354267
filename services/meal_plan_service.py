from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session

from app.exceptions import NotFoundError
from domain.mappers import MealPlanMapper
from domain.models import MealPlanEntry
from domain.schemas.plan_schemas import MealPlanEntryCreate, MealPlanResponse
from repositories import MealPlanRepository
from services.recipe_service import RecipeService

logger = logging.getLogger("recipebox.meal_plan")


def utc_today() -> date:
    """Current calendar date in UTC, the default start of the plan window"""
    return datetime.now(timezone.utc).date()


class MealPlanService:
    """
    Date-indexed meal plan:
    - one entry schedules one recipe into a (meal_date, meal_type) slot
    - a slot may hold several recipes
    - the plan view shows entries from a start date (today by default) onwards
    """

    @staticmethod
    def get_plan(
        db: Session, user_id: UUID, from_date: Optional[date] = None
    ) -> MealPlanResponse:
        start = from_date or utc_today()
        entries = MealPlanRepository(db).list_from(user_id, start)
        logger.info(
            "meal_plan_fetched user_id=%s from=%s entries=%d", user_id, start, len(entries)
        )
        return MealPlanMapper.to_plan(start, entries)

    @staticmethod
    def add_entry(
        db: Session, user_id: UUID, data: MealPlanEntryCreate
    ) -> MealPlanEntry:
        RecipeService.get_recipe(db, data.recipe_id)
        entry = MealPlanRepository(db).add_entry(
            user_id=user_id,
            recipe_id=data.recipe_id,
            meal_date=data.meal_date,
            meal_type=data.meal_type,
        )
        logger.info(
            "meal_planned entry_id=%s recipe_id=%s date=%s type=%s",
            entry.id,
            data.recipe_id,
            data.meal_date,
            data.meal_type.value,
        )
        return entry

    @staticmethod
    def remove_entry(db: Session, user_id: UUID, entry_id: UUID) -> None:
        """Delete one of the caller's entries; other users' entries read as missing"""
        repo = MealPlanRepository(db)
        entry = repo.get_by_id_and_user(entry_id, user_id)
        if not entry:
            raise NotFoundError(f"Meal plan entry {entry_id} not found")
        repo.delete(entry.id)
        logger.info("meal_plan_entry_removed entry_id=%s user_id=%s", entry_id, user_id)
