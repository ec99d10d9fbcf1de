from typing import Literal
from pydantic import BaseModel, ConfigDict, Field


class DisplaySettings(BaseModel):
    """Display settings with platform defaults; stored values override them"""

    default_slide_timer: int = Field(default=10, ge=1)
    emergency_timeout: int = Field(default=30, ge=1)
    content_refresh_rate: int = Field(default=60, ge=1)
    display_mode: Literal["fullscreen", "windowed"] = "fullscreen"
    theme: Literal["light", "dark"] = "light"
    auto_play: bool = True
    transition_effect: str = "fade"
    volume: float = Field(default=0.8, ge=0, le=1)
    brightness: int = Field(default=100, ge=0, le=100)
    language: str = "en"
    timezone: str = "UTC"


class DisplaySettingsUpdate(BaseModel):
    """Subset of DisplaySettings; unknown keys are rejected"""

    model_config = ConfigDict(extra="forbid")

    default_slide_timer: int | None = Field(None, ge=1)
    emergency_timeout: int | None = Field(None, ge=1)
    content_refresh_rate: int | None = Field(None, ge=1)
    display_mode: Literal["fullscreen", "windowed"] | None = None
    theme: Literal["light", "dark"] | None = None
    auto_play: bool | None = None
    transition_effect: str | None = None
    volume: float | None = Field(None, ge=0, le=1)
    brightness: int | None = Field(None, ge=0, le=100)
    language: str | None = None
    timezone: str | None = None


class SettingsUpdateRequest(BaseModel):
    settings: DisplaySettingsUpdate
