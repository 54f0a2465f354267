from typing import List
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from domain.models import Profile, Recipe
from domain.schemas.profile_schemas import ProfileUpdateRequest
from repositories import ProfileRepository, RecipeRepository
from app.exceptions import NotFoundError

logger = logging.getLogger("recipebox.profile")


class ProfileService:
    """Business logic for profile management"""

    @staticmethod
    def get_profile(db: Session, user_id: UUID) -> Profile:
        """Retrieve a profile or raise NotFoundError"""
        profile = ProfileRepository(db).get_by_id(user_id)
        if not profile:
            logger.warning(f"profile_not_found user_id={user_id}")
            raise NotFoundError(f"Profile {user_id} not found")
        return profile

    @staticmethod
    def update_profile(
        db: Session, user_id: UUID, data: ProfileUpdateRequest
    ) -> Profile:
        """Overwrite name, bio and avatar of the caller's own profile"""
        profile = ProfileService.get_profile(db, user_id)
        updated = ProfileRepository(db).update_profile(
            profile,
            full_name=data.full_name,
            bio=data.bio,
            avatar_url=data.avatar_url,
        )
        logger.info(f"profile_updated user_id={user_id}")
        return updated

    @staticmethod
    def list_recipes(db: Session, user_id: UUID) -> List[Recipe]:
        """Recipes authored by a profile, newest first"""
        ProfileService.get_profile(db, user_id)
        return RecipeRepository(db).list_by_user(user_id)
