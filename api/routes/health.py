"""Health check routes"""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import logging

from api.responses import HealthResponse
from app.config import settings
from domain.models import get_db_session

router = APIRouter(tags=["Health"])
logger = logging.getLogger("recipebox.api.health")


@router.get("/health-check", response_model=HealthResponse)
def health_check():
    """Basic health check endpoint"""
    return HealthResponse(
        status="ok", service=settings.app_name, version=settings.app_version
    )


@router.get("/health/db")
def database_health(db: Session = Depends(get_db_session)):
    """Run a trivial query against the configured database."""
    try:
        db.execute(text("SELECT 1"))
        return {"database": "ok"}
    except SQLAlchemyError as e:
        logger.exception("Database health check failed")
        return {"database": "unavailable", "error": str(e)}
