"""
Domain enums for RecipeBox.
Contains all enumeration types used across the domain models and schemas.
"""

import enum


class Difficulty(str, enum.Enum):
    """How hard a recipe is to cook"""

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class MealType(str, enum.Enum):
    """Slot of the day a planned meal belongs to"""

    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACK = "Snack"


# Position of each slot within a day, used to order meal plan entries.
MEAL_TYPE_ORDER = {
    MealType.BREAKFAST: 0,
    MealType.LUNCH: 1,
    MealType.DINNER: 2,
    MealType.SNACK: 3,
}
