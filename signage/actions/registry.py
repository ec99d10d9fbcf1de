"""Registry of (resource, action) operations and their input contracts."""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable

import httpx
from pydantic import BaseModel
from sqlalchemy.orm import Session

from signage.models.tenant_context import TenantContext
from signage.schemas.common import EmptyRequest


@dataclass
class ActionRequest:
    """Everything an operation handler may use; tenant context is always explicit."""

    context: TenantContext
    db: Session
    http_client: httpx.AsyncClient


@dataclass(frozen=True)
class OperationResult:
    message: str
    data: Any = None


Handler = Callable[[ActionRequest, Any], Awaitable[OperationResult]]


@dataclass(frozen=True)
class OperationDescriptor:
    """
    Declared operation.

    Attributes:
        input_model: pydantic model validated before any storage access
        device_allowed: playback devices may call it
        admin_only: only ADMIN tenants (via bearer token) may call it
    """

    resource: str
    action: str
    input_model: type[BaseModel]
    handler: Handler
    device_allowed: bool = False
    admin_only: bool = False


class ActionRegistry:
    """Maps (resource, action) to an OperationDescriptor"""

    def __init__(self):
        self._operations: dict[tuple[str, str], OperationDescriptor] = {}

    def register(
        self,
        resource: str,
        action: str,
        input_model: type[BaseModel] = EmptyRequest,
        *,
        device_allowed: bool = False,
        admin_only: bool = False,
    ) -> Callable[[Handler], Handler]:
        """Decorator registering an async handler for (resource, action)"""

        def decorator(handler: Handler) -> Handler:
            key = (resource, action)
            if key in self._operations:
                raise ValueError(f"Operation {resource}.{action} registered twice")
            self._operations[key] = OperationDescriptor(
                resource=resource,
                action=action,
                input_model=input_model,
                handler=handler,
                device_allowed=device_allowed,
                admin_only=admin_only,
            )
            return handler

        return decorator

    def lookup(self, resource: str, action: str) -> OperationDescriptor | None:
        return self._operations.get((resource, action))

    def actions_for(self, resource: str) -> list[str]:
        return sorted(action for (res, action) in self._operations if res == resource)

    def resources(self) -> list[str]:
        return sorted({resource for (resource, _) in self._operations})


def dump(schema: type[BaseModel], obj: Any) -> dict:
    """Serialize an ORM object through its response schema"""
    return schema.model_validate(obj).model_dump(mode="json")


def dump_all(schema: type[BaseModel], objs: list[Any]) -> list[dict]:
    return [dump(schema, obj) for obj in objs]


# Global registry populated by the action modules
registry = ActionRegistry()
