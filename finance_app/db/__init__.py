"""
Database configuration and models.
"""

from finance_app.db.database import engine, SessionLocal, get_db, init_db
from finance_app.db.models import Base, SavedInput, InputKey

__all__ = ["engine", "SessionLocal", "get_db", "init_db", "Base", "SavedInput", "InputKey"]
