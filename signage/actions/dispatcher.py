"""Maps inbound (resource, action) requests onto registered operations."""

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError
from sqlalchemy.orm import Session

from signage.actions.registry import ActionRegistry, ActionRequest, OperationDescriptor
from signage.core.exceptions import (
    ForbiddenException,
    InternalErrorException,
    MalformedInputException,
    MissingFieldException,
    SignageException,
    UnknownActionException,
)
from signage.models.tenant_context import TenantContext
from signage.schemas.common import Envelope
from signage.services.tenant_resolver import TenantResolver

logger = logging.getLogger(__name__)


def _field_name(loc: tuple) -> str:
    return ".".join(str(part) for part in loc)


class ActionDispatcher:
    """
    Dispatch order, each step failing before the next runs:
    1. action present and registered (no storage touched)
    2. input validated against the operation's model (no storage touched)
    3. tenant resolved from request credentials
    4. caller allowed to run the operation (device / admin flags)
    5. handler executed; result wrapped in the envelope
    """

    def __init__(self, registry: ActionRegistry, db: Session, http_client: httpx.AsyncClient):
        self.registry = registry
        self.db = db
        self.http_client = http_client

    def _lookup(self, resource: str, body: dict[str, Any]) -> OperationDescriptor:
        action = body.get("action")
        if not isinstance(action, str) or not action:
            raise MalformedInputException("Action parameter is required")

        descriptor = self.registry.lookup(resource, action)
        if descriptor is None:
            supported = self.registry.actions_for(resource)
            if not supported:
                raise UnknownActionException(f"Unknown resource '{resource}'")
            raise UnknownActionException(
                f"Invalid action '{action}'. Supported actions: {', '.join(supported)}"
            )
        return descriptor

    def _validate(self, descriptor: OperationDescriptor, body: dict[str, Any]) -> BaseModel:
        # fields may be nested under "data" or sit next to "action"
        nested = body.get("data")
        if isinstance(nested, dict):
            fields = nested
        else:
            fields = {key: value for key, value in body.items() if key != "action"}

        try:
            return descriptor.input_model.model_validate(fields)
        except ValidationError as exc:
            errors = exc.errors()
            for error in errors:
                if error["type"] == "missing":
                    raise MissingFieldException(_field_name(error["loc"]))
            first = errors[0]
            name = _field_name(first["loc"])
            message = f"Invalid value for {name}: {first['msg']}" if name else first["msg"]
            raise MalformedInputException(message)

    def _authorize(self, descriptor: OperationDescriptor, context: TenantContext) -> None:
        if context.is_device() and not descriptor.device_allowed:
            raise ForbiddenException("Operation not available to playback devices")
        if descriptor.admin_only and not context.is_admin():
            raise ForbiddenException("Only admins can perform this operation")

    async def dispatch(
        self,
        resource: str,
        body: dict[str, Any],
        authorization: str | None,
        device_token: str | None,
    ) -> Envelope:
        descriptor = self._lookup(resource, body)
        payload = self._validate(descriptor, body)

        try:
            context = TenantResolver(self.db).resolve(authorization, device_token)
            self._authorize(descriptor, context)
            logger.info(
                "dispatch resource=%s action=%s tenant_id=%s device=%s",
                resource,
                descriptor.action,
                context.tenant_id,
                context.is_device(),
            )
            result = await descriptor.handler(
                ActionRequest(context=context, db=self.db, http_client=self.http_client), payload
            )
        except SignageException as exc:
            self.db.rollback()
            logger.info(
                "dispatch_failed resource=%s action=%s kind=%s", resource, descriptor.action, exc.kind
            )
            raise
        except Exception:
            self.db.rollback()
            logger.exception("dispatch_internal_error resource=%s action=%s", resource, descriptor.action)
            raise InternalErrorException()

        return Envelope(success=True, message=result.message, data=result.data)
