from typing import Callable, List, Optional
from sqlalchemy.orm import Session
import logging
import uuid
from datetime import datetime, timezone

import anyio

from app.config import settings
from app.exceptions import ServiceValidationError
from domain.day_window import day_window, resolve_timezone, to_utc
from domain.models import Feeding
from domain.schemas.dog_schemas import DogResponse, DogWithFeedings
from repositories import FeedingRepository
from services.dog_service import DogService

logger = logging.getLogger("feedtracker.feedings")


class FeedingService:
    @staticmethod
    def count_todays_feedings(
        db: Session,
        user_id: uuid.UUID,
        dog_id: uuid.UUID,
        now: Optional[datetime] = None,
        tz_name: Optional[str] = None,
    ) -> int:
        """
        Count a dog's feedings on the caller's current local day.

        The day is [local midnight, next local midnight) in ``tz_name``: a
        feeding at exactly midnight belongs to the day it opens. A dog with no
        feedings, or one the user does not own, counts 0.

        Args:
            db: Database session
            user_id: UUID of the owning user
            dog_id: UUID of the dog
            now: Reference instant, defaults to the current time. Naive values
                are wall-clock time in ``tz_name``.
            tz_name: IANA timezone name, defaults to settings.default_timezone

        Returns:
            Non-negative feeding count

        Raises:
            ServiceValidationError: If the timezone is unknown
            PersistenceError: If the count query fails
        """
        zone = resolve_timezone(tz_name or settings.default_timezone)
        now = now or datetime.now(timezone.utc)
        start, end = day_window(now, zone)

        count = FeedingRepository(db).count_in_window(dog_id, user_id, start, end)
        logger.debug(
            f"todays_feedings user_id={user_id} dog_id={dog_id} "
            f"window={start.isoformat()}..{end.isoformat()} count={count}"
        )
        return count

    @staticmethod
    def log_feeding(
        db: Session,
        user_id: uuid.UUID,
        dog_id: uuid.UUID,
        timestamp: Optional[datetime] = None,
        tz_name: Optional[str] = None,
        default_to_now: bool = False,
        now: Optional[datetime] = None,
    ) -> Feeding:
        """
        Record that a dog was fed.

        The timestamp is normalized to a UTC instant before it is stored. A
        naive timestamp is wall-clock time in ``tz_name``; an aware one keeps
        its instant.

        Args:
            db: Database session
            user_id: UUID of the owning user
            dog_id: UUID of the dog that was fed
            timestamp: When the feeding happened
            tz_name: IANA timezone for naive timestamps
            default_to_now: Use the current time when ``timestamp`` is missing
            now: Current time override used with ``default_to_now``

        Returns:
            The created Feeding

        Raises:
            ServiceValidationError: If the timestamp is missing without
                default_to_now, or the timezone is unknown
            NotFoundError: If the dog does not belong to the user
            PersistenceError: If the insert fails
        """
        zone = resolve_timezone(tz_name or settings.default_timezone)

        if timestamp is None:
            if not default_to_now:
                logger.warning(
                    f"log_feeding rejected: no timestamp for dog {dog_id} user {user_id}"
                )
                raise ServiceValidationError(
                    "Feeding time is required",
                    details={"field": "timestamp"},
                    code="TIMESTAMP_REQUIRED",
                )
            timestamp = now or datetime.now(timezone.utc)

        # Only the owner may add feedings to a dog
        DogService.get_dog(db, user_id, dog_id)

        instant = to_utc(timestamp, zone)
        feeding = FeedingRepository(db).create_feeding(dog_id, user_id, instant)

        logger.info(
            f"feeding_logged user_id={user_id} dog_id={dog_id} "
            f"feeding_id={feeding.id} timestamp={instant.isoformat()}"
        )
        return feeding

    @staticmethod
    async def dashboard(
        session_factory: Callable[[], Session],
        user_id: uuid.UUID,
        now: Optional[datetime] = None,
        tz_name: Optional[str] = None,
    ) -> List[DogWithFeedings]:
        """
        List the user's dogs with today's feeding count for each.

        The per-dog counts run concurrently, each in a worker thread with its
        own session. Every task writes only its own result slot, and all of
        them are joined before the cards are built, in the registry's order.

        Raises:
            ServiceValidationError: If the timezone is unknown
            PersistenceError: If listing or any count fails
        """
        tz_name = tz_name or settings.default_timezone
        resolve_timezone(tz_name)
        now = now or datetime.now(timezone.utc)

        def load_dogs() -> List[DogResponse]:
            with session_factory() as db:
                return [
                    DogResponse.model_validate(dog)
                    for dog in DogService.list_dogs(db, user_id)
                ]

        dogs = await anyio.to_thread.run_sync(load_dogs)
        counts: List[int] = [0] * len(dogs)
        failures: List[Exception] = []

        def count_one(dog_id: uuid.UUID) -> int:
            with session_factory() as db:
                return FeedingService.count_todays_feedings(
                    db, user_id, dog_id, now, tz_name
                )

        async def fill(index: int, dog_id: uuid.UUID) -> None:
            try:
                counts[index] = await anyio.to_thread.run_sync(count_one, dog_id)
            except Exception as exc:
                failures.append(exc)

        async with anyio.create_task_group() as tg:
            for index, dog in enumerate(dogs):
                tg.start_soon(fill, index, dog.id)

        if failures:
            logger.error(
                f"dashboard failed user_id={user_id}: "
                f"{len(failures)} of {len(dogs)} counts failed"
            )
            raise failures[0]

        logger.info(f"dashboard_built user_id={user_id} dogs={len(dogs)}")
        return [
            DogWithFeedings(**dog.model_dump(), todays_feedings=count)
            for dog, count in zip(dogs, counts)
        ]
