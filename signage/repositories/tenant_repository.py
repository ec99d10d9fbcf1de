"""Repository for Tenant model operations."""

from sqlalchemy.orm import Session
from signage.models.tenant import Tenant
from signage.models.role import TenantRole


class TenantRepository:
    """Repository for Tenant model operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, tenant_id: int) -> Tenant | None:
        """
        Get tenant by ID.

        Args:
            tenant_id: Tenant ID

        Returns:
            Tenant object or None if not found
        """
        return self.db.query(Tenant).filter(Tenant.id == tenant_id).first()

    def get_by_subject(self, subject: str) -> Tenant | None:
        """Get tenant by the JWT 'sub' it authenticates with"""
        return self.db.query(Tenant).filter(Tenant.subject == subject).first()

    def get_or_create_by_subject(
        self,
        subject: str,
        display_name: str | None = None,
        role: TenantRole = TenantRole.USER,
    ) -> Tenant:
        """
        Get tenant by subject or create it if it doesn't exist.

        Called on every request with a verified JWT. display_name and role
        only seed a newly created tenant; afterwards the stored row is
        authoritative.

        Args:
            subject: 'sub' claim of the verified token
            display_name: Optional 'name' claim
            role: Role for a newly created tenant

        Returns:
            Tenant object (either existing or newly created)
        """
        tenant = self.get_by_subject(subject)

        if not tenant:
            tenant = Tenant(subject=subject, display_name=display_name or subject, role=role)
            self.db.add(tenant)
            self.db.commit()
            self.db.refresh(tenant)

        return tenant

    def get_all(self) -> list[Tenant]:
        """
        Get all tenants.

        Returns:
            List of all Tenant objects
        """
        return self.db.query(Tenant).order_by(Tenant.id).all()

    def update(self, tenant: Tenant) -> Tenant:
        """
        Update an existing tenant.

        Args:
            tenant: Tenant object with updated fields

        Returns:
            Updated Tenant object
        """
        self.db.commit()
        self.db.refresh(tenant)
        return tenant
