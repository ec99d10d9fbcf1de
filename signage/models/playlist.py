from sqlalchemy import String, Integer, Text, Boolean, ForeignKey, JSON
from sqlalchemy.orm import Mapped, mapped_column
from signage.models.base import Base, TimestampMixin


class Playlist(Base, TimestampMixin):
    """Ordered list of content ids played on a screen"""

    __tablename__ = "playlists"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tenant_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("tenants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    items: Mapped[list[int]] = mapped_column(JSON, nullable=False, default=list)
    # items only ever reference content rows of the same tenant
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
