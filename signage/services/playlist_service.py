from sqlalchemy.orm import Session
from signage.models.playlist import Playlist
from signage.models.tenant_context import TenantContext
from signage.repositories.content_repository import ContentRepository
from signage.repositories.playlist_repository import PlaylistRepository
from signage.repositories.screen_repository import ScreenRepository
from signage.schemas.playlist_schemas import PlaylistCreate, PlaylistUpdate
from signage.core.exceptions import NotFoundException


class PlaylistService:
    """Service layer for playlist business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = PlaylistRepository(db)
        self.content_repo = ContentRepository(db)
        self.screen_repo = ScreenRepository(db)

    def _check_items(self, items: list[int], context: TenantContext) -> list[int]:
        """
        Every item must be content owned by the same tenant.

        Raises:
            NotFoundException: Naming the first foreign or missing id
        """
        owned = self.content_repo.get_existing_ids(context.tenant_id, items)
        for content_id in items:
            if content_id not in owned:
                raise NotFoundException(f"Content {content_id} not found")
        return items

    def list_playlists(self, context: TenantContext) -> list[Playlist]:
        playlists = self.repo.get_all(context.tenant_id)
        if context.is_device():
            return [playlist for playlist in playlists if playlist.is_active]
        return playlists

    def get_playlist(self, playlist_id: int, context: TenantContext) -> Playlist:
        """
        Raises:
            NotFoundException: If playlist not found, belongs to another tenant,
                or is inactive and the caller is a device
        """
        playlist = self.repo.get_by_id_and_tenant(playlist_id, context.tenant_id)
        if not playlist or (context.is_device() and not playlist.is_active):
            raise NotFoundException("Playlist not found")
        return playlist

    def create_playlist(self, data: PlaylistCreate, context: TenantContext) -> Playlist:
        playlist = Playlist(
            name=data.name,
            description=data.description,
            items=self._check_items(data.items, context),
        )
        return self.repo.create(playlist, context.tenant_id)

    def update_playlist(self, data: PlaylistUpdate, context: TenantContext) -> Playlist:
        playlist = self.get_playlist(data.playlist_id, context)

        if data.name is not None:
            playlist.name = data.name
        if data.description is not None:
            playlist.description = data.description
        if data.items is not None:
            playlist.items = self._check_items(data.items, context)
        if data.is_active is not None:
            playlist.is_active = data.is_active

        return self.repo.update(playlist)

    def delete_playlist(self, playlist_id: int, context: TenantContext) -> None:
        """Delete a playlist and unassign it from the tenant's screens"""
        playlist = self.get_playlist(playlist_id, context)
        self.screen_repo.clear_playlist(context.tenant_id, playlist.id)
        self.repo.delete(playlist)
