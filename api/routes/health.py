"""Health check and utility routes"""

from fastapi import APIRouter
import logging
from sqlalchemy import text

from app.config import settings
from domain.models import SessionLocal

router = APIRouter(tags=["Health"])
logger = logging.getLogger("feedtracker.api.health")


@router.get("/health-check")
def health_check():
    """Basic health check endpoint"""
    return {"status": "ok", "service": settings.app_name, "version": settings.app_version}


@router.get("/health-check/database")
def database_status():
    """Report whether the database answers a trivial query."""
    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
        return {"database": "ok"}
    except Exception as e:
        logger.exception("Database health check failed")
        return {"database": "unavailable", "error": str(e)}
