from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from uuid import UUID


class DogCreate(BaseModel):
    """Schema for registering a new dog.

    Blank names are rejected by the service, not here, so that the
    error carries the service validation envelope.
    """

    name: str = Field(..., max_length=100, description="Dog name")
    photo_url: Optional[str] = Field(
        None, max_length=2048, description="Optional URL of an already uploaded photo"
    )


class DogResponse(BaseModel):
    """Schema for dog response"""

    id: UUID
    name: str
    photo_url: Optional[str] = None
    created_at: datetime
    user_id: UUID

    model_config = {"from_attributes": True}


class DogWithFeedings(DogResponse):
    """Dog card on the dashboard"""

    todays_feedings: int = Field(..., ge=0)
