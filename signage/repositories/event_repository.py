from signage.models.event import Event
from signage.repositories.scoped_repository import TenantScopedRepository


class EventRepository(TenantScopedRepository[Event]):
    """Repository for Event model operations"""

    model = Event

    def get_all(self, tenant_id: int) -> list[Event]:
        """Events ordered by start time"""
        return self._query(tenant_id).order_by(Event.start_time.asc(), Event.id.asc()).all()
