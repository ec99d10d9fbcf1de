from datetime import datetime
from pydantic import BaseModel, Field
from signage.models.content import ContentType


class ContentListRequest(BaseModel):
    """Schema for listing content"""

    include_inactive: bool = False


class ContentIdRequest(BaseModel):
    content_id: int = Field(..., gt=0)


class ContentCreate(BaseModel):
    """Schema for adding a content item"""

    title: str = Field(..., min_length=1, max_length=255)
    body: str = Field(..., min_length=1)
    content_type: ContentType = ContentType.TEXT
    media_url: str | None = Field(None, max_length=1024)
    source: str | None = Field(None, max_length=100)
    channel: str | None = Field(None, max_length=255)
    duration: int = Field(default=10, ge=1, le=3600)
    priority_order: int = 0
    tags: list[str] = Field(default_factory=list)


class ContentUpdate(BaseModel):
    """Schema for updating a content item (partial)"""

    content_id: int = Field(..., gt=0)
    title: str | None = Field(None, min_length=1, max_length=255)
    body: str | None = Field(None, min_length=1)
    content_type: ContentType | None = None
    media_url: str | None = Field(None, max_length=1024)
    channel: str | None = Field(None, max_length=255)
    duration: int | None = Field(None, ge=1, le=3600)
    priority_order: int | None = None
    tags: list[str] | None = None
    is_active: bool | None = None


class ContentResponse(BaseModel):
    """Schema for content response"""

    model_config = {"from_attributes": True}

    id: int
    title: str
    body: str
    content_type: ContentType
    media_url: str | None
    source: str | None
    channel: str | None
    external_id: str | None
    duration: int
    priority_order: int
    tags: list[str]
    is_active: bool
    created_at: datetime
    updated_at: datetime
