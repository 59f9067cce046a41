"""Dog registry routes"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
import logging
from typing import List
from uuid import UUID

from api.dependencies import get_db, get_user_id
from domain.schemas.dog_schemas import DogCreate, DogResponse
from services import DogService

router = APIRouter(prefix="/dogs", tags=["Dogs"])
logger = logging.getLogger("feedtracker.api.dogs")


@router.get("", response_model=List[DogResponse])
def list_dogs(
    user_id: UUID = Depends(get_user_id),
    db: Session = Depends(get_db),
):
    """List all dogs owned by the user"""
    return DogService.list_dogs(db, user_id)


@router.post("", response_model=DogResponse, status_code=status.HTTP_201_CREATED)
def create_dog(
    dog_data: DogCreate,
    user_id: UUID = Depends(get_user_id),
    db: Session = Depends(get_db),
):
    """
    Register a new dog.

    Raises:
        400: If the name is blank
        503: If the dog could not be saved
    """
    dog = DogService.create_dog(db, user_id, dog_data.name, dog_data.photo_url)
    logger.info(f"Dog registered for user {user_id}: {dog.id}")
    return dog


@router.get("/{dog_id}", response_model=DogResponse)
def get_dog(
    dog_id: UUID,
    user_id: UUID = Depends(get_user_id),
    db: Session = Depends(get_db),
):
    """Get one dog; 404 when it does not exist or belongs to someone else"""
    return DogService.get_dog(db, user_id, dog_id)


@router.delete("/{dog_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_dog(
    dog_id: UUID,
    confirm: bool = Query(
        False, description="Must be true: the dog and all its feedings are removed"
    ),
    user_id: UUID = Depends(get_user_id),
    db: Session = Depends(get_db),
):
    """
    Delete a dog together with all its feeding records.

    Deleting a dog that does not exist (or is not the caller's) succeeds
    without changing anything.

    Raises:
        400: If ``confirm`` is not true
    """
    DogService.delete_dog(db, user_id, dog_id, confirmed=confirm)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
