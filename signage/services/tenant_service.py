from sqlalchemy.orm import Session
from signage.models.tenant import Tenant
from signage.models.tenant_context import TenantContext
from signage.repositories.tenant_repository import TenantRepository
from signage.schemas.tenant_schemas import ProfileUpdate
from signage.core.exceptions import NotFoundException, ForbiddenException


class TenantService:
    """Service layer for tenant profile and admin lifecycle operations"""

    def __init__(self, db: Session):
        self.db = db
        self.tenant_repo = TenantRepository(db)

    def get_profile(self, context: TenantContext) -> Tenant:
        return context.tenant

    def update_profile(self, data: ProfileUpdate, context: TenantContext) -> Tenant:
        context.tenant.display_name = data.display_name
        return self.tenant_repo.update(context.tenant)

    def list_tenants(self, context: TenantContext) -> list[Tenant]:
        """All tenants (ADMIN only, enforced by the dispatcher)"""
        return self.tenant_repo.get_all()

    def set_active(self, tenant_id: int, active: bool, context: TenantContext) -> Tenant:
        """
        Activate or deactivate a tenant. Tenants are never deleted.

        Raises:
            NotFoundException: If tenant not found
            ForbiddenException: If an admin tries to deactivate itself
        """
        tenant = self.tenant_repo.get_by_id(tenant_id)
        if not tenant:
            raise NotFoundException("Tenant not found")

        if not active and tenant.id == context.tenant_id:
            raise ForbiddenException("Cannot deactivate your own tenant")

        tenant.active = active
        return self.tenant_repo.update(tenant)
