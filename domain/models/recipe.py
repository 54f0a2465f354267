"""
Recipe catalog models: recipes, their ingredients, reviews and favorites.
"""

from sqlalchemy import (
    Column,
    Text,
    Integer,
    DateTime,
    ForeignKey,
    Uuid,
    Enum as SQLEnum,
    CheckConstraint,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
import uuid

from domain.models.database import Base, utcnow
from domain.enums import Difficulty


def _enum_values(enum_cls):
    return [member.value for member in enum_cls]


class Recipe(Base):
    """A published recipe"""

    __tablename__ = "recipes"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = Column(Text, nullable=False)
    description = Column(Text)
    prep_time = Column(Integer, nullable=False, default=0)  # minutes
    cook_time = Column(Integer, nullable=False, default=0)  # minutes
    servings = Column(Integer, nullable=False, default=1)
    difficulty = Column(
        SQLEnum(
            Difficulty,
            name="recipe_difficulty",
            native_enum=False,
            values_callable=_enum_values,
            length=16,
        ),
        nullable=False,
        default=Difficulty.EASY,
    )
    instructions = Column(Text)
    image_url = Column(Text)
    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    author = relationship("Profile", back_populates="recipes")
    ingredients = relationship(
        "RecipeIngredient",
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by="RecipeIngredient.display_order",
    )
    reviews = relationship(
        "RecipeReview", back_populates="recipe", cascade="all, delete-orphan"
    )
    favorites = relationship(
        "Favorite", back_populates="recipe", cascade="all, delete-orphan"
    )
    meal_plan_entries = relationship(
        "MealPlanEntry", back_populates="recipe", cascade="all, delete-orphan"
    )

    __table_args__ = (
        CheckConstraint("prep_time >= 0", name="ck_recipes_prep_time_nonneg"),
        CheckConstraint("cook_time >= 0", name="ck_recipes_cook_time_nonneg"),
        CheckConstraint("servings >= 1", name="ck_recipes_servings_positive"),
    )

    @property
    def total_time(self) -> int:
        return (self.prep_time or 0) + (self.cook_time or 0)


class RecipeIngredient(Base):
    """One line of a recipe's ingredient list"""

    __tablename__ = "recipe_ingredients"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    recipe_id = Column(
        Uuid,
        ForeignKey("recipes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    ingredient = Column(Text, nullable=False)
    quantity = Column(Text, nullable=False)  # free text, e.g. "1 1/2"
    unit = Column(Text)
    display_order = Column(Integer, nullable=False, default=0)

    recipe = relationship("Recipe", back_populates="ingredients")


class RecipeReview(Base):
    """Star rating with an optional comment"""

    __tablename__ = "recipe_reviews"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    recipe_id = Column(
        Uuid,
        ForeignKey("recipes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(
        Uuid,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    )
    rating = Column(Integer, nullable=False)
    comment = Column(Text)
    created_at = Column(DateTime(timezone=True), default=utcnow)

    recipe = relationship("Recipe", back_populates="reviews")
    author = relationship("Profile")

    __table_args__ = (
        CheckConstraint("rating BETWEEN 1 AND 5", name="ck_recipe_reviews_rating"),
    )


class Favorite(Base):
    """Recipe saved by a user"""

    __tablename__ = "favorites"

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
    created_at = Column(DateTime(timezone=True), default=utcnow)

    recipe = relationship("Recipe", back_populates="favorites")

    __table_args__ = (
        UniqueConstraint("user_id", "recipe_id", name="uq_favorites_user_recipe"),
    )
