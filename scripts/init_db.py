#!/usr/bin/env python3
"""
Create the RecipeBox tables against the configured database.
Reads DATABASE_URL (and the rest of the settings) from the environment or .env
"""

import sys
import logging
from pathlib import Path

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from app.config import settings
from domain.models.database import engine, init_database

logging.basicConfig(level=logging.INFO, format=settings.log_format)
logger = logging.getLogger("recipebox.init_db")


def main() -> int:
    logger.info("=" * 60)
    logger.info("Initializing RecipeBox database...")
    logger.info("=" * 60)

    try:
        init_database()
    except SQLAlchemyError as e:
        logger.error(f"Failed to create tables: {e}")
        return 1

    tables = inspect(engine).get_table_names()
    logger.info(f"Database ready with {len(tables)} tables: {', '.join(sorted(tables))}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
