"""
Shared test fixtures and utilities for the RecipeBox test suite.

This module contains common mock objects, helper functions, and test client setup
that are reused across multiple test files to ensure consistency and reduce duplication.
"""

import uuid
from types import SimpleNamespace
from datetime import datetime, date, timezone
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.security import create_access_token
from domain.enums import Difficulty, MealType
from domain.models import Base, SessionLocal, engine, User, Profile
from main import app

# TestClient without a context manager skips the lifespan; tests that touch
# the database create the schema through the db_session fixture.
client = TestClient(app)


def unique_email(prefix: str = "test") -> str:
    """Generate unique email address using UUID to avoid conflicts"""
    return f"{prefix}-{uuid.uuid4()}@example.com"


def auth_headers(user_id=None, email=None) -> dict:
    """Authorization header carrying a valid access token"""
    token = create_access_token(str(user_id or uuid.uuid4()), email or unique_email())
    return {"Authorization": f"Bearer {token}"}


# Realistic default authors
REALISTIC_USERS = {
    "default": {"full_name": "Sarah Martinez", "email_prefix": "sarah.martinez"},
    "baker": {"full_name": "Michael Chen", "email_prefix": "michael.chen"},
    "casual": {"full_name": "Emma Johnson", "email_prefix": "emma.johnson"},
}


def _now():
    return datetime.now(timezone.utc)


def make_profile(user_id=None, full_name=None, bio=None, profile_type="default"):
    """
    Create a mock profile object for route tests.

    Example:
        >>> profile = make_profile()  # Sarah Martinez
        >>> profile.full_name
        'Sarah Martinez'
    """
    defaults = REALISTIC_USERS.get(profile_type, REALISTIC_USERS["default"])
    return SimpleNamespace(
        id=user_id or uuid.uuid4(),
        full_name=full_name or defaults["full_name"],
        bio=bio,
        avatar_url=None,
        created_at=_now(),
        updated_at=_now(),
    )


def make_recipe(
    recipe_id=None,
    user_id=None,
    title="Lemon Garlic Chicken",
    prep_time=15,
    cook_time=30,
    servings=4,
    difficulty=Difficulty.EASY,
    author=None,
    ingredients=None,
):
    """
    Create a mock recipe with its author, shaped like the ORM object.

    Example:
        >>> recipe = make_recipe(prep_time=10, cook_time=20)
        >>> recipe.total_time
        30
    """
    uid = user_id or uuid.uuid4()
    return SimpleNamespace(
        id=recipe_id or uuid.uuid4(),
        user_id=uid,
        title=title,
        description="Weeknight roast chicken with lemon and garlic",
        prep_time=prep_time,
        cook_time=cook_time,
        total_time=prep_time + cook_time,
        servings=servings,
        difficulty=difficulty,
        instructions="Season the chicken.\nRoast for 30 minutes.",
        image_url=None,
        created_at=_now(),
        updated_at=_now(),
        author=author or make_profile(user_id=uid),
        ingredients=ingredients or [],
    )


def make_ingredient(ingredient="chicken thighs", quantity="800", unit="g", display_order=0):
    return SimpleNamespace(
        id=uuid.uuid4(),
        ingredient=ingredient,
        quantity=quantity,
        unit=unit,
        display_order=display_order,
    )


def make_review(recipe_id=None, user_id=None, rating=5, comment="Great dinner"):
    uid = user_id or uuid.uuid4()
    return SimpleNamespace(
        id=uuid.uuid4(),
        recipe_id=recipe_id or uuid.uuid4(),
        user_id=uid,
        rating=rating,
        comment=comment,
        created_at=_now(),
        author=make_profile(user_id=uid, profile_type="casual"),
    )


def make_favorite(user_id=None, recipe=None):
    recipe = recipe or make_recipe()
    return SimpleNamespace(
        id=uuid.uuid4(),
        user_id=user_id or uuid.uuid4(),
        recipe_id=recipe.id,
        created_at=_now(),
        recipe=recipe,
    )


def make_meal_plan_entry(
    user_id=None, recipe=None, meal_date=None, meal_type=MealType.DINNER
):
    recipe = recipe or make_recipe()
    return SimpleNamespace(
        id=uuid.uuid4(),
        user_id=user_id or uuid.uuid4(),
        recipe_id=recipe.id,
        meal_date=meal_date or date.today(),
        meal_type=meal_type,
        created_at=_now(),
        recipe=recipe,
    )


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """
    Real database session against the in-memory SQLite engine.

    The schema is created before and dropped after every test, so each test
    starts from empty tables. Routes called through ``client`` share the
    same connection and therefore see the same rows.
    """
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
        Base.metadata.drop_all(bind=engine)


def create_account(db: Session, full_name: str = "Sarah Martinez", email=None) -> User:
    """Insert a user with its profile directly (password hash is not usable)"""
    user = User(email=email or unique_email(), password_hash="not-a-real-hash")
    user.profile = Profile(full_name=full_name)
    db.add(user)
    db.commit()
    return user
