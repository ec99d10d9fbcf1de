from sqlalchemy.orm import Session
from signage.models.emergency_message import EmergencyMessage
from signage.models.tenant_context import TenantContext
from signage.repositories.emergency_repository import EmergencyRepository
from signage.schemas.emergency_schemas import EmergencyCreate
from signage.core.exceptions import NotFoundException


class EmergencyService:
    """Service layer for emergency overlays"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = EmergencyRepository(db)

    def get_active(self, context: TenantContext) -> list[EmergencyMessage]:
        return self.repo.get_active(context.tenant_id)

    def create_message(self, data: EmergencyCreate, context: TenantContext) -> EmergencyMessage:
        message = EmergencyMessage(
            title=data.title,
            message=data.message,
            importance=data.importance,
            background_color=data.background_color,
            text_color=data.text_color,
        )
        return self.repo.create(message, context.tenant_id)

    def clear(self, context: TenantContext) -> int:
        """Deactivate all of the tenant's active messages"""
        return self.repo.deactivate_all(context.tenant_id)

    def delete_message(self, emergency_id: int, context: TenantContext) -> None:
        message = self.repo.get_by_id_and_tenant(emergency_id, context.tenant_id)
        if not message:
            raise NotFoundException("Emergency message not found")
        self.repo.delete(message)
