from signage.models.screen import Screen
from signage.repositories.scoped_repository import TenantScopedRepository


class ScreenRepository(TenantScopedRepository[Screen]):
    """Repository for Screen model operations"""

    model = Screen

    def get_active_by_token_hash(self, token_hash: str) -> Screen | None:
        """
        Look up the screen a device token was issued to.

        This is the one lookup not keyed by tenant: it is how a device
        request finds its tenant in the first place.
        """
        return (
            self.db.query(Screen)
            .filter(Screen.device_token_hash == token_hash, Screen.is_active.is_(True))
            .first()
        )

    def clear_playlist(self, tenant_id: int, playlist_id: int) -> int:
        """
        Unassign a playlist from the tenant's screens without committing.

        SQLite ignores ON DELETE SET NULL unless foreign keys are enabled.
        """
        screens = self._query(tenant_id).filter(Screen.current_playlist_id == playlist_id).all()
        for screen in screens:
            screen.current_playlist_id = None
        return len(screens)
