from datetime import datetime
from pydantic import BaseModel, Field
from signage.models.screen import ScreenStatus


class ScreenIdRequest(BaseModel):
    screen_id: int = Field(..., gt=0)


class ScreenCreate(BaseModel):
    """Schema for registering a screen"""

    name: str = Field(..., min_length=1, max_length=255)
    location: str = Field(..., min_length=1, max_length=255)
    resolution: str | None = Field(None, max_length=50)


class ScreenUpdate(BaseModel):
    """Schema for updating a screen (partial); current_playlist_id may be set to null"""

    screen_id: int = Field(..., gt=0)
    name: str | None = Field(None, min_length=1, max_length=255)
    location: str | None = Field(None, min_length=1, max_length=255)
    resolution: str | None = Field(None, max_length=50)
    current_playlist_id: int | None = Field(None, gt=0)
    is_active: bool | None = None


class ScreenStatusUpdate(BaseModel):
    """
    Heartbeat from a screen.

    Devices report for themselves; dashboard callers must name the screen.
    """

    status: ScreenStatus
    screen_id: int | None = Field(None, gt=0)


class ScreenResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    name: str
    location: str
    resolution: str | None
    status: ScreenStatus
    current_playlist_id: int | None
    last_seen_at: datetime | None
    is_active: bool
    created_at: datetime


class ScreenRegistrationResponse(BaseModel):
    """Returned once by screens.create; the token is never retrievable again"""

    screen: ScreenResponse
    device_token: str
