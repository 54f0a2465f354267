import logging
from uuid import UUID

from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import UnauthorizedError
from app.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from domain.models import User
from domain.schemas.auth_schemas import (
    LoginRequest,
    SessionResponse,
    SessionUser,
    SignUpRequest,
)
from repositories import UserRepository

logger = logging.getLogger("recipebox.auth")

INVALID_CREDENTIALS = "Invalid email or password"


class AuthService:
    """Account creation, password login and access token resolution"""

    @staticmethod
    def build_session(user: User) -> SessionResponse:
        token = create_access_token(str(user.id), user.email)
        return SessionResponse(
            access_token=token,
            expires_in=settings.access_token_expire_minutes * 60,
            user=SessionUser(id=user.id, email=user.email),
        )

    @staticmethod
    def sign_up(db: Session, data: SignUpRequest) -> SessionResponse:
        """Create an account plus profile and return a signed-in session"""
        user_repo = UserRepository(db)
        user = user_repo.create_user(
            email=data.email,
            password_hash=hash_password(data.password),
            full_name=data.full_name,
        )
        logger.info(f"user_signed_up user_id={user.id}")
        return AuthService.build_session(user)

    @staticmethod
    def login(db: Session, data: LoginRequest) -> SessionResponse:
        """Check credentials; unknown email and wrong password fail identically"""
        user = UserRepository(db).get_by_email(data.email)
        if not user or not verify_password(data.password, user.password_hash):
            logger.warning(f"login_failed email={data.email}")
            raise UnauthorizedError(INVALID_CREDENTIALS)

        logger.info(f"user_logged_in user_id={user.id}")
        return AuthService.build_session(user)

    @staticmethod
    def resolve_token(token: str) -> SessionUser:
        """Turn a bearer token into the session user, or raise UnauthorizedError"""
        payload = decode_access_token(token)
        if payload is None:
            raise UnauthorizedError("Invalid or expired token")
        try:
            user_id = UUID(payload["sub"])
        except ValueError:
            raise UnauthorizedError("Invalid or expired token")
        return SessionUser(id=user_id, email=payload.get("email", ""))
