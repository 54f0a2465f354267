"""
Database configuration and session management.
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import settings

logger = logging.getLogger("recipebox.database")

# Create SQLAlchemy Base
Base = declarative_base()


def utcnow() -> datetime:
    """Timestamp default for created_at / updated_at columns"""
    return datetime.now(timezone.utc)


def build_engine(url: str, echo: bool = False):
    """Create an engine; in-memory SQLite shares one connection across threads."""
    if url.startswith("sqlite"):
        return create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(url, echo=echo, pool_pre_ping=True)


# Create engine
engine = build_engine(settings.database_url, echo=settings.db_echo)

# Create session factory
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def init_database():
    """Initialize database schema"""
    with engine.begin() as conn:
        Base.metadata.create_all(bind=conn)
    logger.info("Database tables created successfully")


def get_db_session():
    """Get database session (for FastAPI dependency injection)"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
