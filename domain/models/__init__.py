"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    build_engine,
    init_database,
    get_db_session,
)
from domain.models.types import UTCDateTime
from domain.models.dog import Dog, Feeding

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "build_engine",
    "init_database",
    "get_db_session",
    # Column types
    "UTCDateTime",
    # Dog models
    "Dog",
    "Feeding",
]
