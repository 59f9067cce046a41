"""
Dog and feeding models.
"""

from sqlalchemy import (
    Column,
    Text,
    ForeignKey,
    Uuid,
    CheckConstraint,
    Index,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base
from domain.models.types import UTCDateTime


class Dog(Base):
    """A dog registered by a user"""

    __tablename__ = "dogs"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    photo_url = Column(Text)
    created_at = Column(UTCDateTime, server_default=func.now(), nullable=False)
    user_id = Column(Uuid(as_uuid=True), nullable=False, index=True)

    # Feedings are removed by the database cascade, not by the ORM
    feedings = relationship(
        "Feeding", back_populates="dog", passive_deletes=True
    )

    __table_args__ = (
        CheckConstraint("length(trim(name)) > 0", name="ck_dogs_name_not_blank"),
    )


class Feeding(Base):
    """A single feeding event for a dog"""

    __tablename__ = "feedings"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    dog_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("dogs.id", ondelete="CASCADE"),
        nullable=False,
    )
    user_id = Column(Uuid(as_uuid=True), nullable=False)
    timestamp = Column(UTCDateTime, nullable=False)

    # Relationships
    dog = relationship("Dog", back_populates="feedings")

    __table_args__ = (
        Index("ix_feedings_owner_dog_timestamp", "user_id", "dog_id", "timestamp"),
    )
