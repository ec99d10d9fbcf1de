"""Importing the action modules registers their operations."""

from signage.actions import (  # noqa: F401
    cliq_actions,
    content_actions,
    emergency_actions,
    event_actions,
    playlist_actions,
    screen_actions,
    settings_actions,
    tenant_actions,
)
from signage.actions.registry import registry

__all__ = ["registry"]
