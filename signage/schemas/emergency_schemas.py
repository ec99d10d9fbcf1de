from datetime import datetime
from pydantic import BaseModel, Field
from signage.models.emergency_message import Importance

_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class EmergencyCreate(BaseModel):
    """Schema for raising an emergency message"""

    title: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1)
    importance: Importance = Importance.MEDIUM
    background_color: str = Field(default="#FFA500", pattern=_COLOR_PATTERN)
    text_color: str = Field(default="#000000", pattern=_COLOR_PATTERN)


class EmergencyIdRequest(BaseModel):
    emergency_id: int = Field(..., gt=0)


class EmergencyResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    title: str
    message: str
    importance: Importance
    background_color: str
    text_color: str
    is_active: bool
    created_at: datetime
