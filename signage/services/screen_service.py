from sqlalchemy.orm import Session
from signage.core.security import generate_device_token, hash_device_token
from signage.models.base import utc_now
from signage.models.screen import Screen
from signage.models.tenant_context import TenantContext
from signage.repositories.playlist_repository import PlaylistRepository
from signage.repositories.screen_repository import ScreenRepository
from signage.schemas.screen_schemas import ScreenCreate, ScreenUpdate, ScreenStatusUpdate
from signage.core.exceptions import NotFoundException, MissingFieldException


class ScreenService:
    """Service layer for playback screens and their device tokens"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ScreenRepository(db)
        self.playlist_repo = PlaylistRepository(db)

    def list_screens(self, context: TenantContext) -> list[Screen]:
        return self.repo.get_all(context.tenant_id)

    def get_screen(self, screen_id: int, context: TenantContext) -> Screen:
        screen = self.repo.get_by_id_and_tenant(screen_id, context.tenant_id)
        if not screen:
            raise NotFoundException("Screen not found")
        return screen

    def register_screen(self, data: ScreenCreate, context: TenantContext) -> tuple[Screen, str]:
        """
        Register a screen and issue its device token.

        Returns:
            Tuple of (screen, plaintext device token). Only the hash is
            persisted, so this is the one chance to hand the token out.
        """
        device_token = generate_device_token()
        screen = Screen(
            name=data.name,
            location=data.location,
            resolution=data.resolution,
            device_token_hash=hash_device_token(device_token),
        )
        return self.repo.create(screen, context.tenant_id), device_token

    def update_screen(self, data: ScreenUpdate, context: TenantContext) -> Screen:
        screen = self.get_screen(data.screen_id, context)

        if data.name is not None:
            screen.name = data.name
        if data.location is not None:
            screen.location = data.location
        if data.resolution is not None:
            screen.resolution = data.resolution
        if data.is_active is not None:
            screen.is_active = data.is_active
        if "current_playlist_id" in data.model_fields_set:
            if data.current_playlist_id is not None:
                playlist = self.playlist_repo.get_by_id_and_tenant(
                    data.current_playlist_id, context.tenant_id
                )
                if not playlist:
                    raise NotFoundException("Playlist not found")
            screen.current_playlist_id = data.current_playlist_id

        return self.repo.update(screen)

    def report_status(self, data: ScreenStatusUpdate, context: TenantContext) -> Screen:
        """
        Record a heartbeat.

        A device always reports for its own screen, whatever screen_id it
        sends; dashboard callers must name a screen of their tenant.
        """
        if context.is_device():
            screen = context.screen
        elif data.screen_id is None:
            raise MissingFieldException("screen_id")
        else:
            screen = self.get_screen(data.screen_id, context)

        screen.status = data.status
        screen.last_seen_at = utc_now()
        return self.repo.update(screen)

    def delete_screen(self, screen_id: int, context: TenantContext) -> None:
        """Delete a screen, which also revokes its device token"""
        screen = self.get_screen(screen_id, context)
        self.repo.delete(screen)
