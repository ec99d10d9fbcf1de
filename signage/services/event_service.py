from sqlalchemy.orm import Session
from signage.models.base import as_utc
from signage.models.event import Event
from signage.models.tenant_context import TenantContext
from signage.repositories.event_repository import EventRepository
from signage.schemas.event_schemas import EventCreate, EventUpdate
from signage.core.exceptions import NotFoundException, MalformedInputException


class EventService:
    """Service layer for scheduled events"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = EventRepository(db)

    def list_events(self, context: TenantContext) -> list[Event]:
        events = self.repo.get_all(context.tenant_id)
        if context.is_device():
            return [event for event in events if event.is_active]
        return events

    def get_event(self, event_id: int, context: TenantContext) -> Event:
        event = self.repo.get_by_id_and_tenant(event_id, context.tenant_id)
        if not event:
            raise NotFoundException("Event not found")
        return event

    def create_event(self, data: EventCreate, context: TenantContext) -> Event:
        event = Event(
            title=data.title,
            description=data.description,
            location=data.location,
            start_time=as_utc(data.start_time),
            end_time=as_utc(data.end_time),
        )
        return self.repo.create(event, context.tenant_id)

    def update_event(self, data: EventUpdate, context: TenantContext) -> Event:
        """
        Update an event (partial).

        Raises:
            NotFoundException: If event not found or belongs to another tenant
            MalformedInputException: If the resulting range ends before it starts
        """
        event = self.get_event(data.event_id, context)

        start_time = as_utc(data.start_time) if data.start_time is not None else as_utc(event.start_time)
        end_time = as_utc(data.end_time) if data.end_time is not None else as_utc(event.end_time)
        if end_time <= start_time:
            raise MalformedInputException("end_time must be after start_time")

        if data.title is not None:
            event.title = data.title
        if data.description is not None:
            event.description = data.description
        if data.location is not None:
            event.location = data.location
        if data.is_active is not None:
            event.is_active = data.is_active
        event.start_time = start_time
        event.end_time = end_time

        return self.repo.update(event)

    def delete_event(self, event_id: int, context: TenantContext) -> None:
        event = self.get_event(event_id, context)
        self.repo.delete(event)
