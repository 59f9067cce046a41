"""
Dog Repository - Data access layer for dog profiles
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Dog


class DogRepository(BaseRepository[Dog]):
    """Repository for dog data access"""

    def __init__(self, db: Session):
        super().__init__(db, Dog)

    def list_for_user(self, user_id: UUID) -> List[Dog]:
        """Get all dogs owned by a user, ordered by created_at, then id"""
        with self.guard("list dogs"):
            return (
                self.db.query(Dog)
                .filter(Dog.user_id == user_id)
                .order_by(Dog.created_at, Dog.id)
                .all()
            )

    def get_for_user(self, dog_id: UUID, user_id: UUID) -> Optional[Dog]:
        """Get a dog only if it belongs to the user"""
        return self.get_by_id(dog_id, user_id)

    def create_dog(self, user_id: UUID, name: str, photo_url: str = None) -> Dog:
        """Insert a new dog"""
        return self.create(Dog(user_id=user_id, name=name, photo_url=photo_url))

    def delete_for_user(self, dog_id: UUID, user_id: UUID) -> int:
        """
        Delete the dog matching both ids.

        Feedings for the dog are removed by the ON DELETE CASCADE on
        feedings.dog_id.

        Returns:
            Number of deleted rows (0 or 1)
        """
        with self.guard("delete dog"):
            deleted = (
                self.db.query(Dog)
                .filter(Dog.id == dog_id, Dog.user_id == user_id)
                .delete(synchronize_session=False)
            )
            self.db.commit()
            return deleted
