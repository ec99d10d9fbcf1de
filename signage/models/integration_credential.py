"""Per-tenant OAuth credential for an external integration."""

from sqlalchemy import String, Integer, Text, ForeignKey, JSON, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from signage.models.base import Base, TimestampMixin

CLIQ_INTEGRATION = "cliq"


class IntegrationCredential(Base, TimestampMixin):
    """
    Stored OAuth tokens for one (tenant, integration) pair.

    access_token is short-lived and rotated by the token refresher;
    refresh_token is long-lived and only replaced when the token endpoint
    hands out a new one. channel_ids optionally restricts which upstream
    channels the tenant works with (empty list = no restriction).
    """

    __tablename__ = "integration_credentials"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tenant_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("tenants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    integration_name: Mapped[str] = mapped_column(String(50), nullable=False)
    access_token: Mapped[str] = mapped_column(Text, nullable=False)
    refresh_token: Mapped[str | None] = mapped_column(Text, nullable=True)
    channel_ids: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    __table_args__ = (
        UniqueConstraint("tenant_id", "integration_name", name="uq_tenant_integration"),
    )

    def __repr__(self) -> str:
        # tokens omitted
        return (
            f"<IntegrationCredential(tenant_id={self.tenant_id}, "
            f"integration='{self.integration_name}', channels={len(self.channel_ids or [])})>"
        )
