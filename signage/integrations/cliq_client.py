"""HTTP client for the Zoho Cliq REST API."""

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from signage.config import settings
from signage.core.exceptions import AuthExpiredException, UpstreamException
from signage.models.integration_credential import IntegrationCredential

logger = logging.getLogger(__name__)

# Error codes Zoho puts in the body when the bearer token is no longer valid
_EXPIRED_TOKEN_MARKERS = (
    "oauthtoken_invalid",
    "invalid_oauthtoken",
    "invalid_token",
    "token_expired",
)


@dataclass(frozen=True)
class CliqEndpoint:
    """One Cliq API call: method, path relative to the API base and query params."""

    path: str
    method: str = "GET"
    params: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def channels(cls) -> "CliqEndpoint":
        return cls(path="/channels")

    @classmethod
    def channel_messages(
        cls, channel_id: str, limit: int = 50, before: str | None = None
    ) -> "CliqEndpoint":
        params: dict[str, Any] = {"limit": limit}
        if before:
            params["before"] = before
        return cls(path=f"/channels/{channel_id}/messages", params=params)


def is_auth_expired(status_code: int, body: str) -> bool:
    """A 401, or any error body naming an invalid/expired token."""
    if status_code == 401:
        return True
    lowered = body.lower()
    return any(marker in lowered for marker in _EXPIRED_TOKEN_MARKERS)


class CliqClient:
    """
    Performs a single authenticated Cliq call and classifies the outcome.

    Never touches the credential store; refreshing and retrying is the
    gateway's job.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str | None = None,
        timeout: float | None = None,
    ):
        self.http_client = http_client
        self.base_url = (base_url or settings.CLIQ_API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.UPSTREAM_TIMEOUT_SECONDS

    async def call(self, credential: IntegrationCredential, endpoint: CliqEndpoint) -> Any:
        """
        Call a Cliq endpoint with the credential's access token.

        Returns:
            Decoded JSON payload of a 2xx response

        Raises:
            AuthExpiredException: Token rejected (eligible for one refresh)
            UpstreamException: Any other failure, including timeouts
        """
        url = f"{self.base_url}/{endpoint.path.lstrip('/')}"
        headers = {
            "Authorization": f"Zoho-oauthtoken {credential.access_token}",
            "Content-Type": "application/json",
        }
        try:
            response = await self.http_client.request(
                endpoint.method,
                url,
                params=endpoint.params,
                headers=headers,
                timeout=self.timeout,
            )
        except httpx.TimeoutException:
            logger.warning("cliq_call_timeout path=%s", endpoint.path)
            raise UpstreamException(None, message="Upstream request timed out")
        except httpx.TransportError as exc:
            logger.warning("cliq_call_transport_error path=%s error=%s", endpoint.path, type(exc).__name__)
            raise UpstreamException(None, message="Upstream request could not be sent")

        if response.is_success:
            try:
                return response.json()
            except ValueError:
                raise UpstreamException(response.status_code, message="Upstream returned a non-JSON body")

        if is_auth_expired(response.status_code, response.text):
            logger.info("cliq_call_auth_expired path=%s status=%s", endpoint.path, response.status_code)
            raise AuthExpiredException()

        logger.warning("cliq_call_failed path=%s status=%s", endpoint.path, response.status_code)
        raise UpstreamException(response.status_code, response.text)
