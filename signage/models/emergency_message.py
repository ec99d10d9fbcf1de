from enum import Enum as PyEnum
from sqlalchemy import String, Integer, Text, Boolean, ForeignKey, Enum
from sqlalchemy.orm import Mapped, mapped_column
from signage.models.base import Base, TimestampMixin


class Importance(str, PyEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class EmergencyMessage(Base, TimestampMixin):
    """Overlay message that pre-empts regular content while active"""

    __tablename__ = "emergency_messages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tenant_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("tenants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    importance: Mapped[Importance] = mapped_column(
        Enum(Importance, native_enum=False, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=Importance.MEDIUM,
    )
    background_color: Mapped[str] = mapped_column(String(20), nullable=False, default="#FFA500")
    text_color: Mapped[str] = mapped_column(String(20), nullable=False, default="#000000")
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
