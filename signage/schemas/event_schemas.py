from datetime import datetime
from pydantic import BaseModel, Field, model_validator
from signage.models.base import as_utc


class EventIdRequest(BaseModel):
    event_id: int = Field(..., gt=0)


class EventCreate(BaseModel):
    """Schema for scheduling an event"""

    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(None, max_length=2000)
    location: str | None = Field(None, max_length=255)
    start_time: datetime
    end_time: datetime

    @model_validator(mode="after")
    def check_time_range(self) -> "EventCreate":
        if as_utc(self.end_time) <= as_utc(self.start_time):
            raise ValueError("end_time must be after start_time")
        return self


class EventUpdate(BaseModel):
    """Schema for updating an event (partial)"""

    event_id: int = Field(..., gt=0)
    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=2000)
    location: str | None = Field(None, max_length=255)
    start_time: datetime | None = None
    end_time: datetime | None = None
    is_active: bool | None = None


class EventResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    title: str
    description: str | None
    location: str | None
    start_time: datetime
    end_time: datetime
    is_active: bool
