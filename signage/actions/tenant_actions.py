from signage.actions.registry import ActionRequest, OperationResult, registry, dump, dump_all
from signage.schemas.common import EmptyRequest
from signage.schemas.tenant_schemas import ProfileUpdate, TenantIdRequest, TenantResponse
from signage.services.tenant_service import TenantService


@registry.register("profile", "get", EmptyRequest)
async def get_profile(request: ActionRequest, data: EmptyRequest) -> OperationResult:
    tenant = TenantService(request.db).get_profile(request.context)
    return OperationResult("Profile retrieved", dump(TenantResponse, tenant))


@registry.register("profile", "update", ProfileUpdate)
async def update_profile(request: ActionRequest, data: ProfileUpdate) -> OperationResult:
    tenant = TenantService(request.db).update_profile(data, request.context)
    return OperationResult("Profile updated", dump(TenantResponse, tenant))


@registry.register("tenants", "getAll", EmptyRequest, admin_only=True)
async def list_tenants(request: ActionRequest, data: EmptyRequest) -> OperationResult:
    tenants = TenantService(request.db).list_tenants(request.context)
    return OperationResult(f"Retrieved {len(tenants)} tenants", dump_all(TenantResponse, tenants))


@registry.register("tenants", "deactivate", TenantIdRequest, admin_only=True)
async def deactivate_tenant(request: ActionRequest, data: TenantIdRequest) -> OperationResult:
    tenant = TenantService(request.db).set_active(data.tenant_id, False, request.context)
    return OperationResult("Tenant deactivated", dump(TenantResponse, tenant))


@registry.register("tenants", "activate", TenantIdRequest, admin_only=True)
async def activate_tenant(request: ActionRequest, data: TenantIdRequest) -> OperationResult:
    tenant = TenantService(request.db).set_active(data.tenant_id, True, request.context)
    return OperationResult("Tenant activated", dump(TenantResponse, tenant))
