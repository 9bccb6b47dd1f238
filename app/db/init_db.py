# app/db/init_db.py
"""Database initialization utilities."""
from typing import Optional

from sqlalchemy.engine import Engine

from app.config.logging import get_logger
from app.db.base import Base
from app.db.session import engine as default_engine

logger = get_logger(__name__)


def init_db(engine: Optional[Engine] = None) -> None:
    """
    Create all tables that do not exist yet.

    Note: This is suitable for development/testing only.
    For production, manage the schema with migrations instead.
    """
    bind = engine or default_engine
    try:
        Base.metadata.create_all(bind=bind)
        logger.info("Database tables created successfully")
    except Exception as e:
        logger.error(f"Error initializing database: {e}")
        raise


def drop_db(engine: Optional[Engine] = None) -> None:
    """
    Drop all database tables.

    WARNING: This will delete all data! Use with caution.
    """
    bind = engine or default_engine
    Base.metadata.drop_all(bind=bind)
    logger.warning("All database tables dropped")
