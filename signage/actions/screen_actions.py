from signage.actions.registry import ActionRequest, OperationResult, registry, dump, dump_all
from signage.schemas.common import EmptyRequest
from signage.schemas.screen_schemas import (
    ScreenCreate,
    ScreenIdRequest,
    ScreenRegistrationResponse,
    ScreenResponse,
    ScreenStatusUpdate,
    ScreenUpdate,
)
from signage.services.screen_service import ScreenService


@registry.register("screens", "getAll", EmptyRequest)
async def list_screens(request: ActionRequest, data: EmptyRequest) -> OperationResult:
    screens = ScreenService(request.db).list_screens(request.context)
    return OperationResult(f"Retrieved {len(screens)} screens", dump_all(ScreenResponse, screens))


@registry.register("screens", "create", ScreenCreate)
async def register_screen(request: ActionRequest, data: ScreenCreate) -> OperationResult:
    """The device token in the response is shown exactly once"""
    screen, device_token = ScreenService(request.db).register_screen(data, request.context)
    registration = ScreenRegistrationResponse(
        screen=ScreenResponse.model_validate(screen), device_token=device_token
    )
    return OperationResult("Screen registered successfully", registration.model_dump(mode="json"))


@registry.register("screens", "update", ScreenUpdate)
async def update_screen(request: ActionRequest, data: ScreenUpdate) -> OperationResult:
    screen = ScreenService(request.db).update_screen(data, request.context)
    return OperationResult("Screen updated successfully", dump(ScreenResponse, screen))


@registry.register("screens", "updateStatus", ScreenStatusUpdate, device_allowed=True)
async def update_status(request: ActionRequest, data: ScreenStatusUpdate) -> OperationResult:
    screen = ScreenService(request.db).report_status(data, request.context)
    return OperationResult("Screen status updated", dump(ScreenResponse, screen))


@registry.register("screens", "delete", ScreenIdRequest)
async def delete_screen(request: ActionRequest, data: ScreenIdRequest) -> OperationResult:
    ScreenService(request.db).delete_screen(data.screen_id, request.context)
    return OperationResult("Screen deleted successfully", {"screen_id": data.screen_id})
