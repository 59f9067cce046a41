"""Services package - Business logic layer"""

from services.dog_service import DogService
from services.feeding_service import FeedingService
from services.history_service import HistoryService

__all__ = [
    "DogService",
    "FeedingService",
    "HistoryService",
]
