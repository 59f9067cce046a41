"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.dog_schemas import DogCreate, DogResponse, DogWithFeedings
from domain.schemas.feeding_schemas import (
    FeedingCreate,
    FeedingResponse,
    TodaysFeedingsResponse,
    HistoryFeeding,
    HistoryDay,
    FeedingHistoryResponse,
)

__all__ = [
    # Dog schemas
    "DogCreate",
    "DogResponse",
    "DogWithFeedings",
    # Feeding schemas
    "FeedingCreate",
    "FeedingResponse",
    "TodaysFeedingsResponse",
    "HistoryFeeding",
    "HistoryDay",
    "FeedingHistoryResponse",
]
