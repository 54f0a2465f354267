#!/usr/bin/env python3
"""
Seed a demo account with a handful of recipes, reviews and a meal plan.

Usage:
    python scripts/seed_recipes.py [--email demo@example.com] [--password demo1234]

Running it twice is safe: an existing demo account is reused and recipes
with the same title are skipped.
"""

import sys
import argparse
import logging
from datetime import date, timedelta
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from app.config import settings
from app.security import hash_password
from domain.enums import Difficulty, MealType
from domain.models import Recipe, SessionLocal, init_database
from domain.schemas.plan_schemas import MealPlanEntryCreate
from domain.schemas.recipe_schemas import RecipeCreate, ReviewCreate
from repositories import UserRepository
from services.meal_plan_service import MealPlanService
from services.recipe_service import RecipeService
from services.review_service import ReviewService

logging.basicConfig(level=logging.INFO, format=settings.log_format)
logger = logging.getLogger("recipebox.seed")


SAMPLE_RECIPES = [
    {
        "title": "Classic Pancakes",
        "description": "Fluffy buttermilk pancakes for a slow weekend breakfast",
        "prep_time": 10,
        "cook_time": 15,
        "servings": 4,
        "difficulty": Difficulty.EASY,
        "instructions": "Whisk the dry ingredients.\nAdd buttermilk, eggs and melted butter.\nCook on a hot griddle until golden.",
        "ingredients": [
            {"ingredient": "flour", "quantity": "250", "unit": "g"},
            {"ingredient": "buttermilk", "quantity": "400", "unit": "ml"},
            {"ingredient": "eggs", "quantity": "2", "unit": ""},
            {"ingredient": "butter", "quantity": "30", "unit": "g"},
        ],
        "meal_type": MealType.BREAKFAST,
    },
    {
        "title": "Roasted Tomato Soup",
        "description": "Sweet roasted tomatoes blended with garlic and basil",
        "prep_time": 15,
        "cook_time": 45,
        "servings": 4,
        "difficulty": Difficulty.EASY,
        "instructions": "Roast tomatoes and garlic.\nSimmer with stock.\nBlend and season.",
        "ingredients": [
            {"ingredient": "tomatoes", "quantity": "1", "unit": "kg"},
            {"ingredient": "garlic", "quantity": "4", "unit": "cloves"},
            {"ingredient": "vegetable stock", "quantity": "500", "unit": "ml"},
        ],
        "meal_type": MealType.LUNCH,
    },
    {
        "title": "Chicken Tikka Masala",
        "description": "Charred marinated chicken in a creamy spiced tomato sauce",
        "prep_time": 30,
        "cook_time": 40,
        "servings": 4,
        "difficulty": Difficulty.MEDIUM,
        "instructions": "Marinate the chicken.\nGrill until charred.\nSimmer in the sauce.",
        "ingredients": [
            {"ingredient": "chicken thighs", "quantity": "800", "unit": "g"},
            {"ingredient": "yogurt", "quantity": "200", "unit": "g"},
            {"ingredient": "garam masala", "quantity": "2", "unit": "tbsp"},
            {"ingredient": "cream", "quantity": "150", "unit": "ml"},
        ],
        "meal_type": MealType.DINNER,
    },
    {
        "title": "Beef Wellington",
        "description": "Tenderloin wrapped in mushroom duxelles and puff pastry",
        "prep_time": 60,
        "cook_time": 45,
        "servings": 6,
        "difficulty": Difficulty.HARD,
        "instructions": "Sear the beef.\nWrap in duxelles and prosciutto.\nEncase in pastry and bake.",
        "ingredients": [
            {"ingredient": "beef tenderloin", "quantity": "1", "unit": "kg"},
            {"ingredient": "mushrooms", "quantity": "500", "unit": "g"},
            {"ingredient": "puff pastry", "quantity": "1", "unit": "sheet"},
        ],
        "meal_type": MealType.DINNER,
    },
]


def get_or_create_demo_user(db, email: str, password: str):
    repo = UserRepository(db)
    user = repo.get_by_email(email)
    if user:
        logger.info(f"Reusing demo account {email}")
        return user
    user = repo.create_user(
        email=email, password_hash=hash_password(password), full_name="Demo Cook"
    )
    logger.info(f"Created demo account {email}")
    return user


def seed(email: str, password: str) -> int:
    init_database()
    db = SessionLocal()
    created = 0
    try:
        user = get_or_create_demo_user(db, email, password)
        existing = {
            title
            for (title,) in db.query(Recipe.title).filter(Recipe.user_id == user.id)
        }

        for offset, sample in enumerate(SAMPLE_RECIPES):
            if sample["title"] in existing:
                logger.info(f"Skipping existing recipe '{sample['title']}'")
                continue

            fields = {k: v for k, v in sample.items() if k != "meal_type"}
            recipe = RecipeService.create_recipe(db, user.id, RecipeCreate(**fields))
            ReviewService.add_review(
                db, user.id, recipe.id, ReviewCreate(rating=5, comment="Family favorite")
            )
            MealPlanService.add_entry(
                db,
                user.id,
                MealPlanEntryCreate(
                    recipe_id=recipe.id,
                    meal_date=date.today() + timedelta(days=offset),
                    meal_type=sample["meal_type"],
                ),
            )
            created += 1
    finally:
        db.close()

    logger.info(f"Seeded {created} recipes for {email}")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed RecipeBox with demo data")
    parser.add_argument("--email", default="demo@example.com")
    parser.add_argument("--password", default="demo1234")
    args = parser.parse_args()
    return seed(args.email, args.password)


if __name__ == "__main__":
    sys.exit(main())
