"""
Database connection and session management for the saved-inputs store.
"""

import logging
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import NullPool

from finance_app.config import get_settings
from finance_app.db.models import Base

logger = logging.getLogger(__name__)
settings = get_settings()

# SQLite needs same-thread checks disabled for FastAPI's threadpool
if settings.database_url.startswith("postgresql"):
    engine = create_engine(settings.database_url, poolclass=NullPool)
else:
    engine = create_engine(
        settings.database_url,
        connect_args={"check_same_thread": False},
    )

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db():
    """Create the saved-inputs tables if they do not exist."""
    logger.info(f"Initializing database at {engine.url.render_as_string(hide_password=True)}")
    Base.metadata.create_all(bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Dependency for getting database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
