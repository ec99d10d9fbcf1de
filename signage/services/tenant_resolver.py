"""Resolves the acting tenant for an inbound request."""

import logging

from sqlalchemy.orm import Session

from signage.core.exceptions import NoTenantIdentityException
from signage.core.security import decode_jwt, hash_device_token
from signage.models.role import TenantRole
from signage.models.tenant_context import TenantContext
from signage.repositories.screen_repository import ScreenRepository
from signage.repositories.tenant_repository import TenantRepository

logger = logging.getLogger(__name__)


class TenantResolver:
    """
    Turns request credentials into a TenantContext.

    Resolution order (first match wins, no shared default tenant):
    1. Authorization: Bearer <jwt>, verified with the shared SECRET_KEY.
       A present but invalid token fails here; it never falls through.
    2. Device token header issued to an active screen.
    3. Otherwise NoTenantIdentity.
    """

    def __init__(self, db: Session):
        self.tenant_repo = TenantRepository(db)
        self.screen_repo = ScreenRepository(db)

    def resolve(self, authorization: str | None, device_token: str | None) -> TenantContext:
        if authorization:
            return self._resolve_bearer(authorization)
        if device_token:
            return self._resolve_device(device_token)
        raise NoTenantIdentityException()

    def _resolve_bearer(self, authorization: str) -> TenantContext:
        scheme, _, token = authorization.partition(" ")
        if scheme.lower() != "bearer" or not token.strip():
            raise NoTenantIdentityException("Authorization header must be 'Bearer <token>'")

        payload = decode_jwt(token.strip())
        role = TenantRole.ADMIN if payload.get("role") == TenantRole.ADMIN.value else TenantRole.USER
        tenant = self.tenant_repo.get_or_create_by_subject(
            payload["sub"], display_name=payload.get("name"), role=role
        )
        if not tenant.active:
            logger.info("tenant_resolution_rejected tenant_id=%s reason=inactive", tenant.id)
            raise NoTenantIdentityException("Tenant is deactivated")
        return TenantContext(tenant=tenant)

    def _resolve_device(self, device_token: str) -> TenantContext:
        screen = self.screen_repo.get_active_by_token_hash(hash_device_token(device_token))
        if screen is None:
            raise NoTenantIdentityException("Unknown or revoked device token")

        tenant = self.tenant_repo.get_by_id(screen.tenant_id)
        if tenant is None or not tenant.active:
            raise NoTenantIdentityException("Tenant is deactivated")
        return TenantContext(tenant=tenant, screen=screen)
