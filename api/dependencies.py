"""
API dependencies for dependency injection
"""

from typing import Callable, Generator, Optional
from uuid import UUID

from fastapi import Query
from sqlalchemy.orm import Session

from app.config import settings
from domain.models import SessionLocal, get_db_session


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


def get_session_factory() -> Callable[[], Session]:
    """Session factory for routes that open one session per concurrent task"""
    return SessionLocal


def get_user_id(
    user_id: UUID = Query(..., description="Authenticated user ID from the identity provider"),
) -> UUID:
    """Caller identity; every query is filtered by it"""
    return user_id


def get_timezone(
    tz: Optional[str] = Query(
        None, description="IANA timezone that defines the caller's calendar days"
    ),
) -> str:
    """Caller timezone, falling back to the configured default"""
    return tz or settings.default_timezone
