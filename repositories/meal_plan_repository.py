"""
Meal Plan Repository - Data access layer for meal plan operations
"""

from datetime import date
from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session, joinedload

from repositories.base import BaseRepository
from domain.enums import MealType
from domain.models import MealPlanEntry


class MealPlanRepository(BaseRepository[MealPlanEntry]):
    """Repository for meal plan entry data access"""

    def __init__(self, db: Session):
        super().__init__(db, MealPlanEntry)

    def get_by_id_and_user(
        self, entry_id: UUID, user_id: UUID
    ) -> Optional[MealPlanEntry]:
        """Get meal plan entry by ID for specific user"""
        return (
            self.db.query(MealPlanEntry)
            .filter(MealPlanEntry.id == entry_id, MealPlanEntry.user_id == user_id)
            .first()
        )

    def list_from(self, user_id: UUID, from_date: date) -> List[MealPlanEntry]:
        """Entries on or after ``from_date`` with their recipes, earliest day first"""
        return (
            self.db.query(MealPlanEntry)
            .options(joinedload(MealPlanEntry.recipe))
            .filter(
                MealPlanEntry.user_id == user_id,
                MealPlanEntry.meal_date >= from_date,
            )
            .order_by(MealPlanEntry.meal_date, MealPlanEntry.created_at)
            .all()
        )

    def add_entry(
        self, user_id: UUID, recipe_id: UUID, meal_date: date, meal_type: MealType
    ) -> MealPlanEntry:
        entry = MealPlanEntry(
            user_id=user_id,
            recipe_id=recipe_id,
            meal_date=meal_date,
            meal_type=meal_type,
        )
        self.create(entry)
        return entry
