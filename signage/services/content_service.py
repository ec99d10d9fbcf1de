from sqlalchemy.orm import Session
from signage.models.content import Content
from signage.models.tenant_context import TenantContext
from signage.repositories.content_repository import ContentRepository
from signage.schemas.content_schemas import ContentCreate, ContentUpdate
from signage.core.exceptions import NotFoundException


class ContentService:
    """Service for content business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ContentRepository(db)

    def list_content(self, context: TenantContext, include_inactive: bool = False) -> list[Content]:
        """Content in play order; devices never see inactive items"""
        if context.is_device():
            include_inactive = False
        return self.repo.get_for_display(context.tenant_id, include_inactive)

    def get_content(self, content_id: int, context: TenantContext) -> Content:
        """
        Get specific content item ensuring tenant ownership.

        Raises:
            NotFoundException: If item not found, belongs to another tenant,
                or is inactive and the caller is a device
        """
        content = self.repo.get_by_id_and_tenant(content_id, context.tenant_id)
        if not content or (context.is_device() and not content.is_active):
            raise NotFoundException("Content not found")
        return content

    def add_content(self, data: ContentCreate, context: TenantContext) -> Content:
        """Create new content item for tenant"""
        content = Content(
            title=data.title,
            body=data.body,
            content_type=data.content_type,
            media_url=data.media_url,
            source=data.source or "manual",
            channel=data.channel,
            duration=data.duration,
            priority_order=data.priority_order,
            tags=data.tags,
        )
        return self.repo.create(content, context.tenant_id)

    def update_content(self, data: ContentUpdate, context: TenantContext) -> Content:
        """Update content fields that were provided"""
        content = self.get_content(data.content_id, context)

        if data.title is not None:
            content.title = data.title
        if data.body is not None:
            content.body = data.body
        if data.content_type is not None:
            content.content_type = data.content_type
        if data.media_url is not None:
            content.media_url = data.media_url
        if data.channel is not None:
            content.channel = data.channel
        if data.duration is not None:
            content.duration = data.duration
        if data.priority_order is not None:
            content.priority_order = data.priority_order
        if data.tags is not None:
            content.tags = data.tags
        if data.is_active is not None:
            content.is_active = data.is_active

        return self.repo.update(content)

    def delete_content(self, content_id: int, context: TenantContext) -> None:
        """Delete content item"""
        content = self.get_content(content_id, context)
        self.repo.delete(content)
