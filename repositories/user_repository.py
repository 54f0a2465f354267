"""
User Repository - Data access layer for accounts and profiles
"""

from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.models import User, Profile
from app.exceptions import ConflictError


class UserRepository(BaseRepository[User]):
    """Repository for account data access"""

    def __init__(self, db: Session):
        super().__init__(db, User)

    def get_by_email(self, email: str) -> Optional[User]:
        """Get account by (lower-cased) email"""
        return self.db.query(User).filter(User.email == email.lower()).first()

    def create_user(self, email: str, password_hash: str, full_name: str) -> User:
        """Create an account together with its public profile"""
        user = User(email=email.lower(), password_hash=password_hash)
        user.profile = Profile(full_name=full_name)
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
            return user
        except IntegrityError:
            self.db.rollback()
            raise ConflictError(f"User with email {email} already exists")


class ProfileRepository(BaseRepository[Profile]):
    """Repository for profile data access"""

    def __init__(self, db: Session):
        super().__init__(db, Profile)

    def update_profile(
        self,
        profile: Profile,
        full_name: str,
        bio: Optional[str] = None,
        avatar_url: Optional[str] = None,
    ) -> Profile:
        """Overwrite the editable profile fields"""
        profile.full_name = full_name
        profile.bio = bio
        profile.avatar_url = avatar_url
        return self.update(profile)

