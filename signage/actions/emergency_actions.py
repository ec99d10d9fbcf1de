from signage.actions.registry import ActionRequest, OperationResult, registry, dump, dump_all
from signage.schemas.common import EmptyRequest
from signage.schemas.emergency_schemas import EmergencyCreate, EmergencyIdRequest, EmergencyResponse
from signage.services.emergency_service import EmergencyService


@registry.register("emergency", "getActive", EmptyRequest, device_allowed=True)
async def get_active(request: ActionRequest, data: EmptyRequest) -> OperationResult:
    messages = EmergencyService(request.db).get_active(request.context)
    return OperationResult("Emergency messages retrieved", dump_all(EmergencyResponse, messages))


@registry.register("emergency", "create", EmergencyCreate)
async def create_message(request: ActionRequest, data: EmergencyCreate) -> OperationResult:
    message = EmergencyService(request.db).create_message(data, request.context)
    return OperationResult("Emergency message created", dump(EmergencyResponse, message))


@registry.register("emergency", "clear", EmptyRequest)
async def clear_messages(request: ActionRequest, data: EmptyRequest) -> OperationResult:
    cleared = EmergencyService(request.db).clear(request.context)
    return OperationResult("Emergency messages cleared", {"cleared": cleared})


@registry.register("emergency", "delete", EmergencyIdRequest)
async def delete_message(request: ActionRequest, data: EmergencyIdRequest) -> OperationResult:
    EmergencyService(request.db).delete_message(data.emergency_id, request.context)
    return OperationResult("Emergency message deleted", {"emergency_id": data.emergency_id})
