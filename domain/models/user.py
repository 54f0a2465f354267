"""
Account and profile database models.
"""

from sqlalchemy import Column, Text, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship
import uuid

from domain.models.database import Base, utcnow


class User(Base):
    """Authentication account"""

    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    email = Column(Text, unique=True, nullable=False)  # stored lower-cased
    password_hash = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)

    profile = relationship(
        "Profile",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
    )


class Profile(Base):
    """Public author profile, one per account"""

    __tablename__ = "profiles"

    id = Column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    full_name = Column(Text, nullable=False)
    bio = Column(Text)
    avatar_url = Column(Text)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    user = relationship("User", back_populates="profile")
    recipes = relationship("Recipe", back_populates="author")
