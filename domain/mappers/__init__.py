"""
Domain mappers package.
Handles transformation between ORM models and DTOs (Data Transfer Objects).
"""

from domain.mappers.recipe_mapper import RecipeMapper, average_rating
from domain.mappers.meal_plan_mapper import MealPlanMapper

__all__ = ["RecipeMapper", "MealPlanMapper", "average_rating"]
