from collections import defaultdict
from datetime import date
from typing import Dict, List, Optional
from sqlalchemy.orm import Session
import logging
import uuid

from app.config import settings
from domain.day_window import resolve_timezone, to_local
from domain.models import Feeding
from domain.schemas.feeding_schemas import (
    FeedingHistoryResponse,
    HistoryDay,
    HistoryFeeding,
)
from repositories import FeedingRepository
from services.dog_service import DogService

logger = logging.getLogger("feedtracker.history")


class HistoryService:
    @staticmethod
    def group_by_day(feedings: List[Feeding], tz_name: str) -> List[HistoryDay]:
        """
        Bucket feedings by local calendar date.

        Every feeding lands in exactly one bucket. Buckets are ordered most
        recent day first; inside a bucket feedings are ordered earliest first,
        ties broken by id.
        """
        zone = resolve_timezone(tz_name)
        buckets: Dict[date, List[HistoryFeeding]] = defaultdict(list)

        for feeding in sorted(feedings, key=lambda f: (f.timestamp, str(f.id))):
            local = to_local(feeding.timestamp, zone)
            buckets[local.date()].append(
                HistoryFeeding(
                    id=feeding.id,
                    timestamp=feeding.timestamp,
                    local_timestamp=local,
                    time_label=local.strftime("%H:%M"),
                )
            )

        return [
            HistoryDay(date=day, feeding_count=len(items), feedings=items)
            for day, items in sorted(buckets.items(), key=lambda x: x[0], reverse=True)
        ]

    @staticmethod
    def build_history(
        db: Session,
        user_id: uuid.UUID,
        dog_id: uuid.UUID,
        tz_name: Optional[str] = None,
    ) -> FeedingHistoryResponse:
        """
        Build the day-grouped feeding history of one dog.

        A dog without feedings yields an empty ``days`` list, which is not an
        error.

        Args:
            db: Database session
            user_id: UUID of the owning user
            dog_id: UUID of the dog
            tz_name: IANA timezone defining the calendar days

        Returns:
            FeedingHistoryResponse with days sorted most recent first

        Raises:
            ServiceValidationError: If the timezone is unknown
            NotFoundError: If the dog does not exist or belongs to another user
            PersistenceError: If a query fails
        """
        tz_name = tz_name or settings.default_timezone
        resolve_timezone(tz_name)

        dog = DogService.get_dog(db, user_id, dog_id)
        feedings = FeedingRepository(db).list_for_dog(dog_id, user_id)
        days = HistoryService.group_by_day(feedings, tz_name)

        logger.info(
            f"history_built user_id={user_id} dog_id={dog_id} "
            f"feedings={len(feedings)} days={len(days)} tz={tz_name}"
        )

        return FeedingHistoryResponse(
            dog_id=dog.id,
            dog_name=dog.name,
            dog_photo_url=dog.photo_url,
            dog_created_at=dog.created_at,
            timezone=tz_name,
            total_feedings=len(feedings),
            days=days,
        )
