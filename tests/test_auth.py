"""
Tests for sign-up, login and session resolution.

Covers:
- POST /auth/signup creates the account and its profile and signs the user in
- duplicate emails are rejected with 409
- POST /auth/login fails identically for unknown email and wrong password
- GET /auth/session requires a valid bearer token
"""

import uuid

from sqlalchemy.orm import Session

from test_fixtures import client, db_session, auth_headers, unique_email
from domain.models import Profile, User
from services.auth_service import AuthService, INVALID_CREDENTIALS
from domain.schemas.auth_schemas import SessionResponse, SessionUser


def test_signup_creates_account_profile_and_session(db_session: Session):
    email = unique_email("sarah.martinez")
    r = client.post(
        "/auth/signup",
        json={"email": email, "password": "hunter22", "full_name": "  Sarah Martinez "},
    )
    assert r.status_code == 201
    body = r.json()
    assert body["token_type"] == "bearer"
    assert body["user"]["email"] == email
    assert body["expires_in"] > 0

    user = db_session.query(User).filter(User.email == email).one()
    profile = db_session.get(Profile, user.id)
    assert profile.full_name == "Sarah Martinez"
    assert user.password_hash != "hunter22"

    session = client.get(
        "/auth/session",
        headers={"Authorization": f"Bearer {body['access_token']}"},
    )
    assert session.status_code == 200
    assert session.json()["id"] == str(user.id)


def test_signup_duplicate_email_conflicts(db_session: Session):
    email = unique_email()
    payload = {"email": email, "password": "hunter22", "full_name": "Emma Johnson"}
    assert client.post("/auth/signup", json=payload).status_code == 201

    r = client.post("/auth/signup", json={**payload, "email": email.upper()})
    assert r.status_code == 409
    assert r.json()["error"]["code"] == "CONFLICT"


def test_signup_validation_errors():
    r = client.post(
        "/auth/signup",
        json={"email": "not-an-email", "password": "123", "full_name": " "},
    )
    assert r.status_code == 422
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"


def test_signup_rejects_passwords_over_72_bytes():
    too_long = client.post(
        "/auth/signup",
        json={"email": unique_email(), "password": "p" * 100, "full_name": "Long Pass"},
    )
    assert too_long.status_code == 422
    assert too_long.json()["error"]["code"] == "VALIDATION_ERROR"

    # 40 characters, 80 bytes in UTF-8
    multi_byte = client.post(
        "/auth/signup",
        json={"email": unique_email(), "password": "é" * 40, "full_name": "Accent"},
    )
    assert multi_byte.status_code == 422


def test_signup_accepts_password_at_72_bytes(db_session: Session):
    email = unique_email()
    r = client.post(
        "/auth/signup",
        json={"email": email, "password": "p" * 72, "full_name": "Exact Fit"},
    )
    assert r.status_code == 201

    ok = client.post("/auth/login", json={"email": email, "password": "p" * 72})
    assert ok.status_code == 200


def test_login_rejects_passwords_over_72_bytes():
    r = client.post(
        "/auth/login", json={"email": unique_email(), "password": "p" * 73}
    )
    assert r.status_code == 422


def test_login_success_and_failures(db_session: Session):
    email = unique_email()
    client.post(
        "/auth/signup",
        json={"email": email, "password": "hunter22", "full_name": "Raj Patel"},
    )

    ok = client.post("/auth/login", json={"email": email, "password": "hunter22"})
    assert ok.status_code == 200
    assert ok.json()["user"]["email"] == email

    wrong = client.post("/auth/login", json={"email": email, "password": "nope"})
    unknown = client.post(
        "/auth/login", json={"email": unique_email(), "password": "hunter22"}
    )
    assert wrong.status_code == 401
    assert unknown.status_code == 401
    assert wrong.json()["error"]["message"] == INVALID_CREDENTIALS
    assert unknown.json()["error"]["message"] == INVALID_CREDENTIALS
    assert wrong.headers["WWW-Authenticate"] == "Bearer"


def test_login_route_delegates_to_service(monkeypatch):
    user_id = uuid.uuid4()

    def fake_login(db, data):
        assert data.email == "cook@example.com"
        return SessionResponse(
            access_token="token",
            expires_in=60,
            user=SessionUser(id=user_id, email=data.email),
        )

    monkeypatch.setattr(AuthService, "login", fake_login)
    r = client.post("/auth/login", json={"email": "cook@example.com", "password": "x"})
    assert r.status_code == 200
    assert r.json()["access_token"] == "token"


def test_session_requires_authorization_header():
    r = client.get("/auth/session")
    assert r.status_code == 401
    assert r.json()["error"]["message"] == "Authorization header required"


def test_session_rejects_malformed_and_invalid_tokens():
    r = client.get("/auth/session", headers={"Authorization": "Token abc"})
    assert r.status_code == 401
    assert "Bearer <token>" in r.json()["error"]["message"]

    r = client.get("/auth/session", headers={"Authorization": "Bearer abc"})
    assert r.status_code == 401
    assert r.json()["error"]["message"] == "Invalid or expired token"


def test_session_returns_token_subject():
    user_id = uuid.uuid4()
    r = client.get(
        "/auth/session", headers=auth_headers(user_id, "chef@example.com")
    )
    assert r.status_code == 200
    assert r.json() == {"id": str(user_id), "email": "chef@example.com"}
