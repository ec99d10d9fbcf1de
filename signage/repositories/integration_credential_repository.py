"""Credential store for per-tenant integration tokens."""

from sqlalchemy.orm import Session

from signage.core.exceptions import NotConfiguredException
from signage.models.integration_credential import IntegrationCredential


def _dedupe(channel_ids: list[str] | None) -> list[str]:
    # order-preserving set semantics
    return list(dict.fromkeys(str(channel_id) for channel_id in channel_ids or []))


class IntegrationCredentialRepository:
    """
    CRUD for IntegrationCredential keyed by (tenant_id, integration_name).

    Concurrent rotations for the same key are last-writer-wins.
    """

    def __init__(self, db: Session):
        self.db = db

    def get(self, tenant_id: int, integration_name: str) -> IntegrationCredential | None:
        """
        Get the tenant's credential for an integration.

        Returns None when the tenant has not set the integration up; that is
        an expected state, not an error.
        """
        return (
            self.db.query(IntegrationCredential)
            .filter(
                IntegrationCredential.tenant_id == tenant_id,
                IntegrationCredential.integration_name == integration_name,
            )
            .first()
        )

    def put(
        self,
        tenant_id: int,
        integration_name: str,
        access_token: str,
        refresh_token: str | None = None,
        channel_ids: list[str] | None = None,
    ) -> IntegrationCredential:
        """
        Insert or replace the credential for (tenant_id, integration_name).

        A second setup overwrites every field of the existing row rather
        than adding another one.
        """
        credential = self.get(tenant_id, integration_name)
        if credential is None:
            credential = IntegrationCredential(
                tenant_id=tenant_id, integration_name=integration_name
            )
            self.db.add(credential)

        credential.access_token = access_token
        credential.refresh_token = refresh_token
        credential.channel_ids = _dedupe(channel_ids)

        self.db.commit()
        self.db.refresh(credential)
        return credential

    def rotate(
        self,
        tenant_id: int,
        integration_name: str,
        new_access_token: str,
        new_refresh_token: str | None = None,
    ) -> IntegrationCredential:
        """
        Store tokens handed out by a refresh.

        access_token is always replaced; refresh_token only when the token
        endpoint issued a new one.

        Raises:
            NotConfiguredException: If there is no credential to rotate
        """
        credential = self.get(tenant_id, integration_name)
        if credential is None:
            raise NotConfiguredException()

        credential.access_token = new_access_token
        if new_refresh_token:
            credential.refresh_token = new_refresh_token

        self.db.commit()
        self.db.refresh(credential)
        return credential
