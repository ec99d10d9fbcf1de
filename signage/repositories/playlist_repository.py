from signage.models.playlist import Playlist
from signage.repositories.scoped_repository import TenantScopedRepository


class PlaylistRepository(TenantScopedRepository[Playlist]):
    """Repository for Playlist model operations with multi-tenant support"""

    model = Playlist
