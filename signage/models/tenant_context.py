"""Tenant context for request authorization."""

from dataclasses import dataclass
from signage.models.tenant import Tenant
from signage.models.screen import Screen
from signage.models.role import TenantRole


@dataclass
class TenantContext:
    """
    Resolved identity of the caller, passed explicitly into every operation.

    Attributes:
        tenant: The Tenant all data access is scoped to
        screen: The playback Screen when the caller authenticated with a
            device token, otherwise None
    """

    tenant: Tenant
    screen: Screen | None = None

    @property
    def tenant_id(self) -> int:
        return self.tenant.id

    @property
    def role(self) -> TenantRole:
        return self.tenant.role

    def is_device(self) -> bool:
        """Check if the caller is a playback device rather than a dashboard user."""
        return self.screen is not None

    def is_admin(self) -> bool:
        """Device callers never carry admin rights, whatever their tenant's role."""
        return not self.is_device() and self.role == TenantRole.ADMIN

    def __repr__(self) -> str:
        via = f"screen:{self.screen.id}" if self.screen is not None else "bearer"
        return f"<TenantContext(tenant_id={self.tenant.id}, role={self.role.value}, via={via})>"
