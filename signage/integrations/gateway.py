"""Refresh-once-then-retry policy shared by every integration call."""

import logging
from typing import Any

from signage.core.exceptions import (
    AuthExpiredException,
    NoRefreshTokenException,
    NotConfiguredException,
    UpstreamException,
)
from signage.integrations.cliq_client import CliqClient, CliqEndpoint
from signage.integrations.token_refresher import ZohoTokenRefresher
from signage.models.integration_credential import CLIQ_INTEGRATION, IntegrationCredential
from signage.repositories.integration_credential_repository import (
    IntegrationCredentialRepository,
)

logger = logging.getLogger(__name__)


class IntegrationGateway:
    """
    Runs an upstream call for a tenant with at most one token refresh.

    Flow:
    1. Call upstream with the stored credential; success is returned as is
    2. AuthExpired without a stored refresh token -> NoRefreshToken
    3. Refresh failure -> RefreshDenied, no second upstream call
    4. Rotate the stored tokens and call upstream exactly once more
    5. That second result is final; a second AuthExpired becomes an
       UpstreamError(401) so AuthExpired never reaches the caller
    """

    def __init__(
        self,
        credentials: IntegrationCredentialRepository,
        client: CliqClient,
        refresher: ZohoTokenRefresher,
        integration_name: str = CLIQ_INTEGRATION,
    ):
        self.credentials = credentials
        self.client = client
        self.refresher = refresher
        self.integration_name = integration_name

    def load_credential(self, tenant_id: int) -> IntegrationCredential:
        """
        Raises:
            NotConfiguredException: If the tenant never set the integration up
        """
        credential = self.credentials.get(tenant_id, self.integration_name)
        if credential is None:
            raise NotConfiguredException(
                f"{self.integration_name.capitalize()} integration is not configured"
            )
        return credential

    async def execute(self, tenant_id: int, endpoint: CliqEndpoint) -> Any:
        credential = self.load_credential(tenant_id)
        try:
            return await self.client.call(credential, endpoint)
        except AuthExpiredException:
            pass

        if not credential.refresh_token:
            logger.info("integration_refresh_unavailable tenant_id=%s", tenant_id)
            raise NoRefreshTokenException()

        # RefreshDeniedException propagates: nothing left to retry with
        grant = await self.refresher.refresh(credential.refresh_token)
        credential = self.credentials.rotate(
            tenant_id, self.integration_name, grant.access_token, grant.refresh_token
        )
        logger.info("integration_token_rotated tenant_id=%s", tenant_id)

        try:
            return await self.client.call(credential, endpoint)
        except AuthExpiredException:
            logger.warning("integration_retry_rejected tenant_id=%s", tenant_id)
            raise UpstreamException(401, message="Upstream rejected the refreshed token")
