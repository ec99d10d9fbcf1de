from signage.models.emergency_message import EmergencyMessage
from signage.repositories.scoped_repository import TenantScopedRepository


class EmergencyRepository(TenantScopedRepository[EmergencyMessage]):
    """Repository for EmergencyMessage model operations"""

    model = EmergencyMessage

    def get_active(self, tenant_id: int) -> list[EmergencyMessage]:
        """Active messages, newest first"""
        return (
            self._query(tenant_id)
            .filter(EmergencyMessage.is_active.is_(True))
            .order_by(EmergencyMessage.created_at.desc(), EmergencyMessage.id.desc())
            .all()
        )

    def deactivate_all(self, tenant_id: int) -> int:
        """Deactivate every active message of a tenant, returning how many changed"""
        messages = self.get_active(tenant_id)
        for message in messages:
            message.is_active = False
        self.db.commit()
        return len(messages)
