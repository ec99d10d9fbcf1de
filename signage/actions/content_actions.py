from signage.actions.registry import ActionRequest, OperationResult, registry, dump, dump_all
from signage.schemas.content_schemas import (
    ContentCreate,
    ContentIdRequest,
    ContentListRequest,
    ContentResponse,
    ContentUpdate,
)
from signage.services.content_service import ContentService


@registry.register("content", "getAll", ContentListRequest, device_allowed=True)
async def list_content(request: ActionRequest, data: ContentListRequest) -> OperationResult:
    """Content in play order (priority, then newest)"""
    items = ContentService(request.db).list_content(request.context, data.include_inactive)
    return OperationResult(f"Retrieved {len(items)} content items", dump_all(ContentResponse, items))


@registry.register("content", "get", ContentIdRequest, device_allowed=True)
async def get_content(request: ActionRequest, data: ContentIdRequest) -> OperationResult:
    content = ContentService(request.db).get_content(data.content_id, request.context)
    return OperationResult("Content retrieved", dump(ContentResponse, content))


@registry.register("content", "add", ContentCreate)
async def add_content(request: ActionRequest, data: ContentCreate) -> OperationResult:
    content = ContentService(request.db).add_content(data, request.context)
    return OperationResult("Content added successfully", dump(ContentResponse, content))


@registry.register("content", "update", ContentUpdate)
async def update_content(request: ActionRequest, data: ContentUpdate) -> OperationResult:
    content = ContentService(request.db).update_content(data, request.context)
    return OperationResult("Content updated successfully", dump(ContentResponse, content))


@registry.register("content", "delete", ContentIdRequest)
async def delete_content(request: ActionRequest, data: ContentIdRequest) -> OperationResult:
    ContentService(request.db).delete_content(data.content_id, request.context)
    return OperationResult("Content deleted successfully", {"content_id": data.content_id})
