from signage.actions.registry import ActionRequest, OperationResult, registry
from signage.schemas.common import EmptyRequest
from signage.schemas.setting_schemas import SettingsUpdateRequest
from signage.services.settings_service import SettingsService


@registry.register("settings", "getAll", EmptyRequest, device_allowed=True)
async def get_settings(request: ActionRequest, data: EmptyRequest) -> OperationResult:
    values = SettingsService(request.db).get_settings(request.context)
    return OperationResult("Settings retrieved successfully", values.model_dump(mode="json"))


@registry.register("settings", "update", SettingsUpdateRequest)
async def update_settings(request: ActionRequest, data: SettingsUpdateRequest) -> OperationResult:
    values = SettingsService(request.db).update_settings(data.settings, request.context)
    return OperationResult("Settings updated successfully", values.model_dump(mode="json"))
