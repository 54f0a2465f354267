"""API routes package"""

from . import auth, profiles, recipes, favorites, meal_plan, health

__all__ = ["auth", "profiles", "recipes", "favorites", "meal_plan", "health"]
