"""
Tests for saving recipes as favorites.
"""

import uuid

import pytest
from sqlalchemy.orm import Session

from test_fixtures import (
    client,
    db_session,
    auth_headers,
    create_account,
    make_favorite,
)
from app.exceptions import ConflictError, NotFoundError
from domain.schemas.recipe_schemas import RecipeCreate
from services.favorite_service import FavoriteService
from services.recipe_service import RecipeService


def test_list_favorites_route(monkeypatch):
    user_id = uuid.uuid4()
    favorite = make_favorite(user_id=user_id)
    monkeypatch.setattr(FavoriteService, "list_favorites", lambda db, uid: [favorite])

    r = client.get("/favorites", headers=auth_headers(user_id))
    assert r.status_code == 200
    body = r.json()
    assert body[0]["recipe_id"] == str(favorite.recipe_id)
    assert body[0]["recipe"]["title"] == "Lemon Garlic Chicken"


def test_favorites_require_auth():
    assert client.get("/favorites").status_code == 401
    assert client.post("/favorites", json={"recipe_id": str(uuid.uuid4())}).status_code == 401


def test_add_duplicate_favorite_is_409(monkeypatch):
    def fake_add(db, uid, rid):
        raise ConflictError(f"Recipe {rid} is already in favorites")

    monkeypatch.setattr(FavoriteService, "add_favorite", fake_add)
    r = client.post(
        "/favorites", json={"recipe_id": str(uuid.uuid4())}, headers=auth_headers()
    )
    assert r.status_code == 409


def test_favorite_lifecycle(db_session: Session):
    author = create_account(db_session)
    fan = create_account(db_session, full_name="Emma Johnson")
    recipe = RecipeService.create_recipe(
        db_session, author.id, RecipeCreate(title="Miso Ramen")
    )
    headers = auth_headers(fan.id)

    added = client.post("/favorites", json={"recipe_id": str(recipe.id)}, headers=headers)
    assert added.status_code == 201
    assert added.json()["recipe"]["author"]["full_name"] == "Sarah Martinez"

    again = client.post("/favorites", json={"recipe_id": str(recipe.id)}, headers=headers)
    assert again.status_code == 409

    detail = client.get(f"/recipes/{recipe.id}", headers=headers).json()
    assert detail["is_favorite"] is True

    listed = client.get("/favorites", headers=headers).json()
    assert [f["recipe_id"] for f in listed] == [str(recipe.id)]

    removed = client.delete(f"/favorites/{recipe.id}", headers=headers)
    assert removed.status_code == 200
    assert client.delete(f"/favorites/{recipe.id}", headers=headers).status_code == 404
    assert client.get("/favorites", headers=headers).json() == []


def test_favorite_missing_recipe(db_session: Session):
    user = create_account(db_session)
    with pytest.raises(NotFoundError):
        FavoriteService.add_favorite(db_session, user.id, uuid.uuid4())


def test_toggle_favorite(db_session: Session):
    author = create_account(db_session)
    recipe = RecipeService.create_recipe(
        db_session, author.id, RecipeCreate(title="Focaccia")
    )
    headers = auth_headers(author.id)

    on = client.post(f"/recipes/{recipe.id}/favorite/toggle", headers=headers)
    assert on.status_code == 200
    assert on.json() == {"recipe_id": str(recipe.id), "is_favorite": True}

    off = client.post(f"/recipes/{recipe.id}/favorite/toggle", headers=headers)
    assert off.json()["is_favorite"] is False

    missing = client.post(f"/recipes/{uuid.uuid4()}/favorite/toggle", headers=headers)
    assert missing.status_code == 404
