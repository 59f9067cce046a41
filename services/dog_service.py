from typing import List, Optional
from sqlalchemy.orm import Session
import logging
import uuid

from domain.models import Dog
from repositories import DogRepository
from app.exceptions import NotFoundError, ServiceValidationError

logger = logging.getLogger("feedtracker.dogs")


class DogService:
    @staticmethod
    def list_dogs(db: Session, user_id: uuid.UUID) -> List[Dog]:
        """Return every dog owned by the user, oldest first"""
        return DogRepository(db).list_for_user(user_id)

    @staticmethod
    def get_dog(db: Session, user_id: uuid.UUID, dog_id: uuid.UUID) -> Dog:
        """
        Load one dog for its owner.

        Raises:
            NotFoundError: If the dog does not exist or belongs to another user
        """
        dog = DogRepository(db).get_for_user(dog_id, user_id)
        if dog is None:
            logger.warning(f"get_dog failed: dog {dog_id} not found for user {user_id}")
            raise NotFoundError(f"Dog {dog_id} not found", code="DOG_NOT_FOUND")
        return dog

    @staticmethod
    def create_dog(
        db: Session, user_id: uuid.UUID, name: str, photo_url: Optional[str] = None
    ) -> Dog:
        """
        Register a new dog for a user.

        The name is trimmed before it is stored; a blank photo reference is
        stored as no photo.

        Args:
            db: Database session
            user_id: UUID of the owning user
            name: Dog name
            photo_url: Optional URL of an already uploaded photo

        Returns:
            The created Dog with its server-assigned id and created_at

        Raises:
            ServiceValidationError: If the name is empty after trimming
            PersistenceError: If the insert fails
        """
        clean_name = (name or "").strip()
        if not clean_name:
            logger.warning(f"create_dog rejected: blank name for user {user_id}")
            raise ServiceValidationError(
                "Dog name is required", details={"field": "name"}, code="NAME_REQUIRED"
            )

        clean_photo = photo_url.strip() if photo_url else None
        dog = DogRepository(db).create_dog(
            user_id=user_id, name=clean_name, photo_url=clean_photo or None
        )

        logger.info(
            f"dog_created user_id={user_id} dog_id={dog.id} "
            f"has_photo={dog.photo_url is not None}"
        )
        return dog

    @staticmethod
    def delete_dog(
        db: Session, user_id: uuid.UUID, dog_id: uuid.UUID, confirmed: bool = False
    ) -> int:
        """
        Delete a dog and, through the schema cascade, all its feedings.

        Deleting is irreversible, so the caller has to pass ``confirmed=True``.
        A dog that does not exist or belongs to someone else is left alone and
        no error is raised.

        Returns:
            Number of dogs deleted (0 or 1)

        Raises:
            ServiceValidationError: If the deletion was not confirmed
            PersistenceError: If the delete fails
        """
        if not confirmed:
            raise ServiceValidationError(
                "Deleting a dog also deletes all its feeding records and must be confirmed",
                details={"field": "confirm"},
                code="CONFIRMATION_REQUIRED",
            )

        deleted = DogRepository(db).delete_for_user(dog_id, user_id)
        if deleted:
            logger.info(f"dog_deleted user_id={user_id} dog_id={dog_id}")
        else:
            logger.info(f"dog_delete_noop user_id={user_id} dog_id={dog_id}")
        return deleted
