"""Import every model so Base.metadata knows all tables."""

from signage.models.base import Base
from signage.models.tenant import Tenant
from signage.models.integration_credential import IntegrationCredential
from signage.models.content import Content
from signage.models.playlist import Playlist
from signage.models.emergency_message import EmergencyMessage
from signage.models.setting import Setting
from signage.models.event import Event
from signage.models.screen import Screen

__all__ = [
    "Base",
    "Tenant",
    "IntegrationCredential",
    "Content",
    "Playlist",
    "EmergencyMessage",
    "Setting",
    "Event",
    "Screen",
]
