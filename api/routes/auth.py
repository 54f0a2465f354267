"""Sign-up, login and session routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from api.dependencies import get_current_user
from domain.models import get_db_session
from domain.schemas.auth_schemas import (
    LoginRequest,
    SessionResponse,
    SessionUser,
    SignUpRequest,
)
from services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post(
    "/signup", response_model=SessionResponse, status_code=status.HTTP_201_CREATED
)
def sign_up(body: SignUpRequest, db: Session = Depends(get_db_session)):
    """Create an account and its profile; the response is already signed in."""
    return AuthService.sign_up(db, body)


@router.post("/login", response_model=SessionResponse)
def login(body: LoginRequest, db: Session = Depends(get_db_session)):
    """Exchange email and password for an access token."""
    return AuthService.login(db, body)


@router.get("/session", response_model=SessionUser)
def get_session(user: SessionUser = Depends(get_current_user)):
    """Return the user the bearer token belongs to."""
    return user
