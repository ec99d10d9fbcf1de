from enum import Enum as PyEnum
from sqlalchemy import String, Integer, Text, Boolean, ForeignKey, Enum, JSON, Index
from sqlalchemy.orm import Mapped, mapped_column
from signage.models.base import Base, TimestampMixin


class ContentType(str, PyEnum):
    """Content type enumeration"""

    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    LINK = "link"
    CLIQ_MESSAGE = "cliq_message"


class Content(Base, TimestampMixin):
    """
    A single item shown on screens.

    Media bytes live in object storage; media_url is whatever the upload
    step returned. external_id holds the source system's id for imported
    chat messages so repeated imports do not duplicate rows.
    """

    __tablename__ = "content"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tenant_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("tenants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,  # Critical for multi-tenant queries
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    content_type: Mapped[ContentType] = mapped_column(
        Enum(ContentType, native_enum=False, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=ContentType.TEXT,
    )
    media_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    source: Mapped[str | None] = mapped_column(String(100), nullable=True)
    channel: Mapped[str | None] = mapped_column(String(255), nullable=True)
    external_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    duration: Mapped[int] = mapped_column(Integer, nullable=False, default=10)
    priority_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    __table_args__ = (
        Index("ix_content_tenant_external", "tenant_id", "external_id"),
    )
