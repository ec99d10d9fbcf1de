from signage.models.content import Content
from signage.repositories.scoped_repository import TenantScopedRepository


class ContentRepository(TenantScopedRepository[Content]):
    """Repository for Content model operations with multi-tenant support"""

    model = Content

    def get_for_display(self, tenant_id: int, include_inactive: bool = False) -> list[Content]:
        """Content in play order: priority ascending, newest first within a priority"""
        query = self._query(tenant_id)
        if not include_inactive:
            query = query.filter(Content.is_active.is_(True))
        return query.order_by(Content.priority_order.asc(), Content.created_at.desc()).all()

    def get_existing_ids(self, tenant_id: int, content_ids: list[int]) -> set[int]:
        """Subset of content_ids that exist and belong to the tenant"""
        if not content_ids:
            return set()
        rows = (
            self.db.query(Content.id)
            .filter(Content.tenant_id == tenant_id, Content.id.in_(content_ids))
            .all()
        )
        return {row.id for row in rows}

    def get_imported_external_ids(self, tenant_id: int, source: str) -> set[str]:
        """External ids already imported from a source for this tenant"""
        rows = (
            self.db.query(Content.external_id)
            .filter(
                Content.tenant_id == tenant_id,
                Content.source == source,
                Content.external_id.is_not(None),
            )
            .all()
        )
        return {row.external_id for row in rows}

    def create_bulk(self, rows: list[Content], tenant_id: int) -> list[Content]:
        """Create several rows in one commit"""
        for row in rows:
            row.tenant_id = tenant_id
        self.db.add_all(rows)
        self.db.commit()
        for row in rows:
            self.db.refresh(row)
        return rows
