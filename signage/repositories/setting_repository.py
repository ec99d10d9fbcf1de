from typing import Any

from sqlalchemy.orm import Session
from signage.models.setting import Setting


class SettingRepository:
    """Repository for per-tenant key/value settings"""

    def __init__(self, db: Session):
        self.db = db

    def get_values(self, tenant_id: int) -> dict[str, Any]:
        """Stored setting values of a tenant as a dict"""
        rows = self.db.query(Setting).filter(Setting.tenant_id == tenant_id).all()
        return {row.setting_key: row.setting_value for row in rows}

    def upsert_values(self, tenant_id: int, values: dict[str, Any]) -> None:
        """Insert or replace each key for the tenant in a single commit"""
        existing = {
            row.setting_key: row
            for row in self.db.query(Setting)
            .filter(Setting.tenant_id == tenant_id, Setting.setting_key.in_(list(values)))
            .all()
        }
        for key, value in values.items():
            row = existing.get(key)
            if row is None:
                self.db.add(Setting(tenant_id=tenant_id, setting_key=key, setting_value=value))
            else:
                row.setting_value = value
        self.db.commit()
