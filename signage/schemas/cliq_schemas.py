from pydantic import BaseModel, Field


class CliqSetupRequest(BaseModel):
    """Store (or replace) the tenant's Cliq OAuth credential"""

    access_token: str = Field(..., min_length=1)
    refresh_token: str | None = Field(None, min_length=1)
    channel_ids: list[str] = Field(
        default_factory=list, description="Restrict the integration to these channels"
    )


class ChannelMessagesRequest(BaseModel):
    channel_id: str = Field(..., min_length=1)
    limit: int = Field(default=50, ge=1, le=200)
    before: str | None = None


class LatestMessagesRequest(BaseModel):
    limit: int = Field(default=20, ge=1, le=200)


class HistoricalImportRequest(BaseModel):
    channel_id: str = Field(..., min_length=1)
    limit: int = Field(default=100, ge=1, le=500)
    create_content: bool = True


class CliqMessage(BaseModel):
    """A chat message normalized from the Cliq API payload"""

    id: str
    text: str
    sender: str
    channel: str
    timestamp: str | int | None = None
    is_bot: bool = False
    source: str = "zoho_cliq"
