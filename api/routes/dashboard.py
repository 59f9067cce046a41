"""Dashboard route: every dog with today's feeding count"""

from fastapi import APIRouter, Depends
import logging
from typing import Callable, List
from uuid import UUID

from sqlalchemy.orm import Session

from api.dependencies import get_session_factory, get_timezone, get_user_id
from domain.schemas.dog_schemas import DogWithFeedings
from services import FeedingService

router = APIRouter(tags=["Dashboard"])
logger = logging.getLogger("feedtracker.api.dashboard")


@router.get("/dashboard", response_model=List[DogWithFeedings])
async def dashboard(
    user_id: UUID = Depends(get_user_id),
    tz: str = Depends(get_timezone),
    session_factory: Callable[[], Session] = Depends(get_session_factory),
):
    """List the user's dogs with how often each was fed today"""
    return await FeedingService.dashboard(session_factory, user_id, tz_name=tz)
