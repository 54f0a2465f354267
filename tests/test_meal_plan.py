"""
Tests for the date-indexed meal plan.

The plan view lists entries from a start date onwards, ordered by date and
then by meal slot (Breakfast, Lunch, Dinner, Snack), and groups them per day.
"""

import uuid
from datetime import date, datetime, timedelta, timezone

import pytest
from sqlalchemy.orm import Session

from test_fixtures import (
    client,
    db_session,
    auth_headers,
    create_account,
    make_meal_plan_entry,
    make_recipe,
)
from app.exceptions import NotFoundError
from domain.enums import MealType
from domain.mappers import MealPlanMapper
from domain.schemas.plan_schemas import MealPlanEntryCreate
from domain.schemas.recipe_schemas import RecipeCreate
from services import meal_plan_service
from services.meal_plan_service import MealPlanService, utc_today
from services.recipe_service import RecipeService


def test_mapper_orders_by_date_then_slot_and_groups_days():
    today = date(2026, 3, 2)
    tomorrow = today + timedelta(days=1)
    entries = [
        make_meal_plan_entry(meal_date=tomorrow, meal_type=MealType.BREAKFAST),
        make_meal_plan_entry(meal_date=today, meal_type=MealType.SNACK),
        make_meal_plan_entry(meal_date=today, meal_type=MealType.BREAKFAST),
        # stored values come back as plain strings on some backends
        make_meal_plan_entry(meal_date=today, meal_type="Lunch"),
    ]

    plan = MealPlanMapper.to_plan(today, entries)

    assert [(e.meal_date, e.meal_type) for e in plan.entries] == [
        (today, MealType.BREAKFAST),
        (today, MealType.LUNCH),
        (today, MealType.SNACK),
        (tomorrow, MealType.BREAKFAST),
    ]
    assert [d.meal_date for d in plan.days] == [today, tomorrow]
    assert len(plan.days[0].entries) == 3


def test_add_entry_route_defaults_to_dinner(monkeypatch):
    user_id = uuid.uuid4()
    recipe = make_recipe()
    captured = {}

    def fake_add(db, uid, data):
        captured["meal_type"] = data.meal_type
        return make_meal_plan_entry(
            user_id=uid, recipe=recipe, meal_date=data.meal_date, meal_type=data.meal_type
        )

    monkeypatch.setattr(MealPlanService, "add_entry", fake_add)
    r = client.post(
        "/meal-plan",
        json={"recipe_id": str(recipe.id), "meal_date": "2026-03-02"},
        headers=auth_headers(user_id),
    )
    assert r.status_code == 201
    assert captured["meal_type"] == MealType.DINNER
    body = r.json()
    assert body["meal_type"] == "Dinner"
    assert body["recipe"]["title"] == "Lemon Garlic Chicken"


def test_add_entry_rejects_unknown_meal_type():
    r = client.post(
        "/meal-plan",
        json={
            "recipe_id": str(uuid.uuid4()),
            "meal_date": "2026-03-02",
            "meal_type": "Brunch",
        },
        headers=auth_headers(),
    )
    assert r.status_code == 422


def test_meal_plan_requires_auth():
    assert client.get("/meal-plan").status_code == 401


def test_utc_today_uses_utc_calendar_date():
    assert utc_today() in {
        datetime.now(timezone.utc).date(),
        (datetime.now(timezone.utc) - timedelta(seconds=1)).date(),
    }


def test_plan_window_defaults_to_utc_today(db_session: Session, monkeypatch):
    cook = create_account(db_session)
    recipe = RecipeService.create_recipe(
        db_session, cook.id, RecipeCreate(title="Congee")
    )
    fixed = date(2026, 1, 10)
    MealPlanService.add_entry(
        db_session,
        cook.id,
        MealPlanEntryCreate(recipe_id=recipe.id, meal_date=fixed - timedelta(days=1)),
    )
    kept = MealPlanService.add_entry(
        db_session,
        cook.id,
        MealPlanEntryCreate(recipe_id=recipe.id, meal_date=fixed),
    )
    monkeypatch.setattr(meal_plan_service, "utc_today", lambda: fixed)

    plan = MealPlanService.get_plan(db_session, cook.id)
    assert plan.from_date == fixed
    assert [e.id for e in plan.entries] == [kept.id]


def test_plan_from_date_and_ownership(db_session: Session):
    cook = create_account(db_session)
    other = create_account(db_session, full_name="Michael Chen")
    recipe = RecipeService.create_recipe(
        db_session, cook.id, RecipeCreate(title="Overnight Oats")
    )
    today = utc_today()

    past = MealPlanService.add_entry(
        db_session,
        cook.id,
        MealPlanEntryCreate(
            recipe_id=recipe.id, meal_date=today - timedelta(days=1)
        ),
    )
    dinner = MealPlanService.add_entry(
        db_session,
        cook.id,
        MealPlanEntryCreate(recipe_id=recipe.id, meal_date=today),
    )
    breakfast = MealPlanService.add_entry(
        db_session,
        cook.id,
        MealPlanEntryCreate(
            recipe_id=recipe.id, meal_date=today, meal_type=MealType.BREAKFAST
        ),
    )
    MealPlanService.add_entry(
        db_session,
        other.id,
        MealPlanEntryCreate(recipe_id=recipe.id, meal_date=today),
    )

    plan = MealPlanService.get_plan(db_session, cook.id)
    assert plan.from_date == today
    assert [e.id for e in plan.entries] == [breakfast.id, dinner.id]
    assert plan.entries[0].recipe.title == "Overnight Oats"

    with_past = MealPlanService.get_plan(db_session, cook.id, today - timedelta(days=7))
    assert with_past.entries[0].id == past.id
    assert len(with_past.days) == 2

    with pytest.raises(NotFoundError):
        MealPlanService.remove_entry(db_session, other.id, dinner.id)

    MealPlanService.remove_entry(db_session, cook.id, dinner.id)
    plan = MealPlanService.get_plan(db_session, cook.id)
    assert [e.id for e in plan.entries] == [breakfast.id]


def test_meal_plan_routes_against_database(db_session: Session):
    cook = create_account(db_session)
    recipe = RecipeService.create_recipe(
        db_session, cook.id, RecipeCreate(title="Chili con Carne")
    )
    headers = auth_headers(cook.id)
    day = utc_today() + timedelta(days=2)

    created = client.post(
        "/meal-plan",
        json={"recipe_id": str(recipe.id), "meal_date": day.isoformat(), "meal_type": "Lunch"},
        headers=headers,
    )
    assert created.status_code == 201
    entry_id = created.json()["id"]

    plan = client.get("/meal-plan", headers=headers).json()
    assert plan["days"][0]["meal_date"] == day.isoformat()
    assert plan["entries"][0]["meal_type"] == "Lunch"

    later = client.get(
        f"/meal-plan?from_date={(day + timedelta(days=1)).isoformat()}", headers=headers
    ).json()
    assert later["entries"] == []

    missing_recipe = client.post(
        "/meal-plan",
        json={"recipe_id": str(uuid.uuid4()), "meal_date": day.isoformat()},
        headers=headers,
    )
    assert missing_recipe.status_code == 404

    assert client.delete(f"/meal-plan/{entry_id}", headers=auth_headers()).status_code == 404
    assert client.delete(f"/meal-plan/{entry_id}", headers=headers).status_code == 200
