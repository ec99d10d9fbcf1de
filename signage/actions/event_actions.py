from signage.actions.registry import ActionRequest, OperationResult, registry, dump, dump_all
from signage.schemas.common import EmptyRequest
from signage.schemas.event_schemas import EventCreate, EventIdRequest, EventResponse, EventUpdate
from signage.services.event_service import EventService


@registry.register("events", "getAll", EmptyRequest, device_allowed=True)
async def list_events(request: ActionRequest, data: EmptyRequest) -> OperationResult:
    events = EventService(request.db).list_events(request.context)
    return OperationResult(f"Retrieved {len(events)} events", dump_all(EventResponse, events))


@registry.register("events", "create", EventCreate)
async def create_event(request: ActionRequest, data: EventCreate) -> OperationResult:
    event = EventService(request.db).create_event(data, request.context)
    return OperationResult("Event created successfully", dump(EventResponse, event))


@registry.register("events", "update", EventUpdate)
async def update_event(request: ActionRequest, data: EventUpdate) -> OperationResult:
    event = EventService(request.db).update_event(data, request.context)
    return OperationResult("Event updated successfully", dump(EventResponse, event))


@registry.register("events", "delete", EventIdRequest)
async def delete_event(request: ActionRequest, data: EventIdRequest) -> OperationResult:
    EventService(request.db).delete_event(data.event_id, request.context)
    return OperationResult("Event deleted successfully", {"event_id": data.event_id})
