"""
Meal planning models.
"""

from sqlalchemy import Column, Date, DateTime, ForeignKey, Uuid, Enum as SQLEnum
from sqlalchemy.orm import relationship
import uuid

from domain.models.database import Base, utcnow
from domain.enums import MealType


class MealPlanEntry(Base):
    """A recipe scheduled into one meal slot of a given day"""

    __tablename__ = "meal_plans"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    recipe_id = Column(
        Uuid,
        ForeignKey("recipes.id", ondelete="CASCADE"),
        nullable=False,
    )
    meal_date = Column(Date, nullable=False, index=True)
    meal_type = Column(
        SQLEnum(
            MealType,
            name="meal_type",
            native_enum=False,
            values_callable=lambda e: [m.value for m in e],
            length=16,
        ),
        nullable=False,
        default=MealType.DINNER,
    )
    created_at = Column(DateTime(timezone=True), default=utcnow)

    recipe = relationship("Recipe", back_populates="meal_plan_entries")
