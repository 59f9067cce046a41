"""
Feeding Repository - Data access layer for feeding events
"""

from typing import List
from uuid import UUID
from datetime import datetime
from sqlalchemy.orm import Session
from sqlalchemy import func

from repositories.base import BaseRepository
from domain.models import Feeding


class FeedingRepository(BaseRepository[Feeding]):
    """Repository for feeding data access"""

    def __init__(self, db: Session):
        super().__init__(db, Feeding)

    def list_for_dog(self, dog_id: UUID, user_id: UUID) -> List[Feeding]:
        """Get all feedings of a dog, earliest first"""
        with self.guard("list feedings"):
            return (
                self.db.query(Feeding)
                .filter(Feeding.dog_id == dog_id, Feeding.user_id == user_id)
                .order_by(Feeding.timestamp.asc(), Feeding.id.asc())
                .all()
            )

    def count_in_window(
        self, dog_id: UUID, user_id: UUID, start: datetime, end: datetime
    ) -> int:
        """Count feedings of a dog with start <= timestamp < end"""
        with self.guard("count feedings"):
            count = (
                self.db.query(func.count(Feeding.id))
                .filter(
                    Feeding.dog_id == dog_id,
                    Feeding.user_id == user_id,
                    Feeding.timestamp >= start,
                    Feeding.timestamp < end,
                )
                .scalar()
            )
        return count or 0

    def create_feeding(self, dog_id: UUID, user_id: UUID, timestamp: datetime) -> Feeding:
        """Insert a new feeding; ``timestamp`` must be timezone-aware"""
        return self.create(Feeding(dog_id=dog_id, user_id=user_id, timestamp=timestamp))
