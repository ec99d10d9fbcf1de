from datetime import datetime
from pydantic import BaseModel, Field


class PlaylistIdRequest(BaseModel):
    playlist_id: int = Field(..., gt=0)


class PlaylistCreate(BaseModel):
    """Schema for creating a playlist"""

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(None, max_length=1000)
    items: list[int] = Field(default_factory=list, description="Content ids in play order")


class PlaylistUpdate(BaseModel):
    """Schema for updating a playlist (partial)"""

    playlist_id: int = Field(..., gt=0)
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=1000)
    items: list[int] | None = None
    is_active: bool | None = None


class PlaylistResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    name: str
    description: str | None
    items: list[int]
    is_active: bool
    created_at: datetime
    updated_at: datetime
