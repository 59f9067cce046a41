"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

import logging
from contextlib import contextmanager
from typing import Generic, TypeVar, Optional, Type
from uuid import UUID
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from abc import ABC

from app.exceptions import PersistenceError

ModelType = TypeVar("ModelType")

logger = logging.getLogger("feedtracker.repositories")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing common operations.
    All repositories should inherit from this class.

    Every query a subclass issues is scoped by the owning user id.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    @contextmanager
    def guard(self, operation: str):
        """
        Translate database failures into PersistenceError.

        The session is rolled back first so a failed insert or delete
        leaves nothing behind.

        Args:
            operation: short description used in logs and the error message
        """
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"{self.model.__name__} {operation} failed: {e}")
            raise PersistenceError(
                f"Could not {operation}",
                details={"entity": self.model.__name__},
                code="PERSISTENCE_ERROR",
            ) from e

    def get_by_id(self, entity_id: UUID, user_id: UUID) -> Optional[ModelType]:
        """
        Get entity by ID, scoped to its owner.

        Args:
            entity_id: Entity UUID
            user_id: Owning user UUID

        Returns:
            Entity or None if not found
        """
        with self.guard("load record"):
            return (
                self.db.query(self.model)
                .filter(self.model.id == entity_id, self.model.user_id == user_id)
                .first()
            )

    def create(self, entity: ModelType) -> ModelType:
        """Create new entity"""
        with self.guard("save record"):
            self.db.add(entity)
            self.db.commit()
            self.db.refresh(entity)
            return entity
