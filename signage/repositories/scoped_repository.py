"""Base repository for rows that belong to a tenant."""

from typing import Generic, TypeVar

from sqlalchemy.orm import Session

from signage.models.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class TenantScopedRepository(Generic[ModelT]):
    """
    CRUD for a tenant-owned model.

    Every read takes tenant_id and filters on it; create stamps it. There
    is no method that reads the table without a tenant filter.
    """

    model: type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    def _query(self, tenant_id: int):
        return self.db.query(self.model).filter(self.model.tenant_id == tenant_id)

    def get_all(self, tenant_id: int) -> list[ModelT]:
        """Get all rows owned by a tenant"""
        return self._query(tenant_id).order_by(self.model.id).all()

    def get_by_id_and_tenant(self, row_id: int, tenant_id: int) -> ModelT | None:
        """
        Get row ensuring it belongs to tenant (multi-tenant safety).

        Returns None if the row doesn't exist or belongs to another tenant.
        """
        return self._query(tenant_id).filter(self.model.id == row_id).first()

    def create(self, row: ModelT, tenant_id: int) -> ModelT:
        """Create new row stamped with the owning tenant"""
        row.tenant_id = tenant_id
        self.db.add(row)
        self.db.commit()
        self.db.refresh(row)
        return row

    def update(self, row: ModelT) -> ModelT:
        """Update existing row"""
        self.db.commit()
        self.db.refresh(row)
        return row

    def delete(self, row: ModelT) -> None:
        """Hard-delete row"""
        self.db.delete(row)
        self.db.commit()
