"""Tenant model for multi-tenant isolation."""

from sqlalchemy import String, Integer, Boolean, Enum
from sqlalchemy.orm import Mapped, mapped_column

from signage.models.base import Base, TimestampMixin
from signage.models.role import TenantRole


class Tenant(Base, TimestampMixin):
    """
    Multi-tenant isolation boundary.

    A tenant is the acting principal behind every request. All content,
    playlists, screens, settings and integration credentials belong to
    exactly one tenant and are never visible to another.

    Tenants are auto-created on the first request carrying a verified JWT
    for an unknown subject. They are never deleted, only deactivated; a
    deactivated tenant can no longer be resolved for any request.
    """

    __tablename__ = "tenants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    subject: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    # subject is the 'sub' claim from the auth service JWT
    display_name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    role: Mapped[TenantRole] = mapped_column(
        Enum(TenantRole, native_enum=False, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=TenantRole.USER,
    )
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    def __repr__(self) -> str:
        return f"<Tenant(id={self.id}, subject='{self.subject}', role={self.role.value})>"
