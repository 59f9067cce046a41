from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import date, datetime
from uuid import UUID


class FeedingCreate(BaseModel):
    """Schema for logging a feeding"""

    timestamp: Optional[datetime] = Field(
        None,
        description=(
            "When the dog was fed. A value without an offset is local wall-clock "
            "time in the request timezone."
        ),
    )
    default_to_now: bool = Field(
        default=False,
        description="Use the current time when no timestamp is given",
    )


class FeedingResponse(BaseModel):
    """Schema for feeding response"""

    id: UUID
    dog_id: UUID
    user_id: UUID
    timestamp: datetime

    model_config = {"from_attributes": True}


class TodaysFeedingsResponse(BaseModel):
    """Feeding count for one dog on the caller's current local day"""

    dog_id: UUID
    date: date
    timezone: str
    todays_feedings: int = Field(..., ge=0)


class HistoryFeeding(BaseModel):
    """One feeding inside a history day"""

    id: UUID
    timestamp: datetime
    local_timestamp: datetime
    time_label: str  # "HH:MM" in the request timezone


class HistoryDay(BaseModel):
    """All feedings of one local calendar day, earliest first"""

    date: date
    feeding_count: int
    feedings: List[HistoryFeeding]


class FeedingHistoryResponse(BaseModel):
    """Feeding history of a dog, most recent day first"""

    dog_id: UUID
    dog_name: str
    dog_photo_url: Optional[str] = None
    dog_created_at: datetime
    timezone: str
    total_feedings: int
    days: List[HistoryDay]
