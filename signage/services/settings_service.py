from sqlalchemy.orm import Session
from signage.models.tenant_context import TenantContext
from signage.repositories.setting_repository import SettingRepository
from signage.schemas.setting_schemas import DisplaySettings, DisplaySettingsUpdate


class SettingsService:
    """Display settings: stored per-tenant values layered over defaults"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = SettingRepository(db)

    def get_settings(self, context: TenantContext) -> DisplaySettings:
        stored = self.repo.get_values(context.tenant_id)
        # keys dropped from DisplaySettings since they were stored are ignored
        known = {key: value for key, value in stored.items() if key in DisplaySettings.model_fields}
        return DisplaySettings(**known)

    def update_settings(self, data: DisplaySettingsUpdate, context: TenantContext) -> DisplaySettings:
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        if changes:
            self.repo.upsert_values(context.tenant_id, changes)
        return self.get_settings(context)
