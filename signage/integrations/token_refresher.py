"""OAuth refresh-token exchange against the Zoho accounts server."""

import logging
from dataclasses import dataclass

import httpx

from signage.config import settings
from signage.core.exceptions import RefreshDeniedException

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenGrant:
    access_token: str
    # None when the endpoint keeps the previous refresh token valid
    refresh_token: str | None = None


class ZohoTokenRefresher:
    """Exchanges a refresh token for a new access token."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        accounts_url: str | None = None,
        client_id: str | None = None,
        client_secret: str | None = None,
        timeout: float | None = None,
    ):
        self.http_client = http_client
        self.token_url = f"{(accounts_url or settings.ZOHO_ACCOUNTS_URL).rstrip('/')}/oauth/v2/token"
        self.client_id = client_id if client_id is not None else settings.ZOHO_CLIENT_ID
        self.client_secret = (
            client_secret
            if client_secret is not None
            else settings.ZOHO_CLIENT_SECRET.get_secret_value()
        )
        self.timeout = timeout if timeout is not None else settings.UPSTREAM_TIMEOUT_SECONDS

    async def refresh(self, refresh_token: str) -> TokenGrant:
        """
        POST grant_type=refresh_token to the token endpoint.

        Raises:
            RefreshDeniedException: On any failure, including timeouts and
                a 200 response carrying an error instead of a token
        """
        form = {
            "grant_type": "refresh_token",
            "refresh_token": refresh_token,
            "client_id": self.client_id,
            "client_secret": self.client_secret,
        }
        try:
            response = await self.http_client.post(self.token_url, data=form, timeout=self.timeout)
        except httpx.TransportError as exc:
            logger.warning("token_refresh_transport_error error=%s", type(exc).__name__)
            raise RefreshDeniedException()

        if not response.is_success:
            logger.warning("token_refresh_failed status=%s", response.status_code)
            raise RefreshDeniedException()

        try:
            body = response.json()
        except ValueError:
            logger.warning("token_refresh_invalid_body status=%s", response.status_code)
            raise RefreshDeniedException()

        access_token = body.get("access_token") if isinstance(body, dict) else None
        if not access_token:
            # Zoho answers 200 {"error": "invalid_code"} for revoked tokens
            logger.warning("token_refresh_denied error=%s", body.get("error") if isinstance(body, dict) else None)
            raise RefreshDeniedException()

        return TokenGrant(access_token=access_token, refresh_token=body.get("refresh_token") or None)
