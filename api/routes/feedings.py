"""Feeding logging, daily count and history routes"""

from datetime import datetime, timezone
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from uuid import UUID

from api.dependencies import get_db, get_timezone, get_user_id
from domain.day_window import local_date, resolve_timezone
from domain.schemas.feeding_schemas import (
    FeedingCreate,
    FeedingResponse,
    FeedingHistoryResponse,
    TodaysFeedingsResponse,
)
from services import FeedingService, HistoryService

router = APIRouter(prefix="/dogs/{dog_id}", tags=["Feedings"])
logger = logging.getLogger("feedtracker.api.feedings")


@router.post(
    "/feedings", response_model=FeedingResponse, status_code=status.HTTP_201_CREATED
)
def log_feeding(
    dog_id: UUID,
    feeding_data: FeedingCreate,
    user_id: UUID = Depends(get_user_id),
    tz: str = Depends(get_timezone),
    db: Session = Depends(get_db),
):
    """
    Log a feeding for a dog.

    ``timestamp`` without an offset is read as wall-clock time in ``tz``.
    Omit it and set ``default_to_now`` to log the current time.

    Raises:
        400: If the timestamp is missing without default_to_now, or tz is unknown
        404: If the dog is not the caller's
        503: If the feeding could not be saved
    """
    feeding = FeedingService.log_feeding(
        db,
        user_id,
        dog_id,
        timestamp=feeding_data.timestamp,
        tz_name=tz,
        default_to_now=feeding_data.default_to_now,
    )
    return feeding


@router.get("/feedings/today", response_model=TodaysFeedingsResponse)
def todays_feedings(
    dog_id: UUID,
    user_id: UUID = Depends(get_user_id),
    tz: str = Depends(get_timezone),
    db: Session = Depends(get_db),
):
    """How many times the dog was fed on the caller's current local day"""
    now = datetime.now(timezone.utc)
    count = FeedingService.count_todays_feedings(db, user_id, dog_id, now, tz)
    return TodaysFeedingsResponse(
        dog_id=dog_id,
        date=local_date(now, resolve_timezone(tz)),
        timezone=tz,
        todays_feedings=count,
    )


@router.get("/history", response_model=FeedingHistoryResponse)
def feeding_history(
    dog_id: UUID,
    user_id: UUID = Depends(get_user_id),
    tz: str = Depends(get_timezone),
    db: Session = Depends(get_db),
):
    """
    Feeding history grouped by local day, most recent day first.

    Raises:
        404: If the dog is not the caller's
    """
    return HistoryService.build_history(db, user_id, dog_id, tz)
