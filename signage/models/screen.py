from datetime import datetime
from enum import Enum as PyEnum
from sqlalchemy import String, Integer, Boolean, ForeignKey, DateTime, Enum
from sqlalchemy.orm import Mapped, mapped_column
from signage.models.base import Base, TimestampMixin


class ScreenStatus(str, PyEnum):
    ONLINE = "online"
    OFFLINE = "offline"
    ERROR = "error"


class Screen(Base, TimestampMixin):
    """
    A registered playback device.

    The device authenticates with the token issued at registration; only
    its sha256 digest is stored. Deactivating the screen revokes the token.
    """

    __tablename__ = "screens"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tenant_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("tenants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    resolution: Mapped[str | None] = mapped_column(String(50), nullable=True)
    status: Mapped[ScreenStatus] = mapped_column(
        Enum(ScreenStatus, native_enum=False, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=ScreenStatus.OFFLINE,
    )
    current_playlist_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("playlists.id", ondelete="SET NULL"), nullable=True
    )
    device_token_hash: Mapped[str] = mapped_column(
        String(64), unique=True, nullable=False, index=True
    )
    last_seen_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
