"""
Meal plan domain mappers.
"""

from datetime import date
from typing import List

from domain.enums import MEAL_TYPE_ORDER, MealType
from domain.models import MealPlanEntry
from domain.schemas.plan_schemas import (
    MealPlanDay,
    MealPlanEntryResponse,
    MealPlanResponse,
)


class MealPlanMapper:
    """Mapper for meal plan transformations."""

    @staticmethod
    def to_entry(entry: MealPlanEntry) -> MealPlanEntryResponse:
        return MealPlanEntryResponse.model_validate(entry)

    @staticmethod
    def to_plan(from_date: date, entries: List[MealPlanEntry]) -> MealPlanResponse:
        """
        Build the meal plan view: entries ordered by date then meal slot,
        plus the same entries grouped per day (dates ascending).
        """
        ordered = sorted(
            entries,
            key=lambda e: (e.meal_date, MEAL_TYPE_ORDER[MealType(e.meal_type)]),
        )
        flat = [MealPlanMapper.to_entry(e) for e in ordered]

        days: List[MealPlanDay] = []
        for item in flat:
            if not days or days[-1].meal_date != item.meal_date:
                days.append(MealPlanDay(meal_date=item.meal_date))
            days[-1].entries.append(item)

        return MealPlanResponse(from_date=from_date, entries=flat, days=days)
