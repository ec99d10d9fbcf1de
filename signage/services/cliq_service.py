"""Zoho Cliq message ingestion for a tenant."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from signage.core.exceptions import NotFoundException
from signage.integrations.cliq_client import CliqEndpoint
from signage.integrations.gateway import IntegrationGateway
from signage.models.content import Content, ContentType
from signage.models.integration_credential import CLIQ_INTEGRATION, IntegrationCredential
from signage.models.tenant_context import TenantContext
from signage.repositories.content_repository import ContentRepository
from signage.repositories.integration_credential_repository import (
    IntegrationCredentialRepository,
)
from signage.schemas.cliq_schemas import (
    ChannelMessagesRequest,
    CliqMessage,
    CliqSetupRequest,
    HistoricalImportRequest,
    LatestMessagesRequest,
)

logger = logging.getLogger(__name__)

CLIQ_SOURCE = "zoho_cliq"
_STATUS_MARKERS = ("✅", "❌", "⚠️")


def _items(payload: Any, *keys: str) -> list[dict]:
    # Cliq wraps lists under different keys depending on the endpoint version
    if isinstance(payload, list):
        return [item for item in payload if isinstance(item, dict)]
    if isinstance(payload, dict):
        for key in keys:
            value = payload.get(key)
            if isinstance(value, list):
                return [item for item in value if isinstance(item, dict)]
    return []


def _channel_key(channel: dict) -> str:
    return str(channel.get("channel_id") or channel.get("id") or channel.get("unique_name") or "")


def normalize_message(raw: dict, channel_id: str) -> CliqMessage | None:
    """Flatten a Cliq message payload; None for messages without text."""
    content = raw.get("content")
    text = raw.get("text") or raw.get("message")
    if not text and isinstance(content, dict):
        text = content.get("text")
    if not isinstance(text, str) or not text.strip():
        return None

    user = raw.get("sender") or raw.get("user") or {}
    if not isinstance(user, dict):
        user = {}
    sender = user.get("name") or user.get("first_name") or raw.get("user_name") or "Unknown"
    lowered = sender.lower()
    is_bot = bool(user.get("is_bot")) or "bot" in lowered or "automation" in lowered

    channel = raw.get("channel_name")
    if not channel and isinstance(raw.get("channel"), dict):
        channel = raw["channel"].get("name")

    return CliqMessage(
        id=str(raw.get("id") or ""),
        text=text.strip(),
        sender=sender,
        channel=channel or channel_id,
        timestamp=raw.get("time"),
        is_bot=is_bot,
    )


def classify_message(message: CliqMessage) -> str:
    """Pick the display template for an imported message."""
    if "http" in message.text or "www" in message.text:
        return "link"
    if len(message.text) > 200:
        return "long_message"
    if message.is_bot:
        return "bot_message"
    if any(marker in message.text for marker in _STATUS_MARKERS):
        return "status_update"
    return "chat"


def _timestamp_key(message: CliqMessage) -> float:
    try:
        return float(message.timestamp)
    except (TypeError, ValueError):
        return 0.0


class CliqService:
    """
    Tenant-facing Cliq operations.

    Every upstream call goes through the IntegrationGateway so token
    refresh and retry behave identically for each action.
    """

    def __init__(self, db: Session, gateway: IntegrationGateway):
        self.db = db
        self.gateway = gateway
        self.credentials = IntegrationCredentialRepository(db)
        self.content_repo = ContentRepository(db)

    def _check_scope(self, credential: IntegrationCredential, channel_id: str) -> None:
        if credential.channel_ids and channel_id not in credential.channel_ids:
            raise NotFoundException("Channel not found")

    def setup(self, data: CliqSetupRequest, context: TenantContext) -> dict:
        """Store the tenant's credential, replacing any previous one"""
        credential = self.credentials.put(
            context.tenant_id,
            CLIQ_INTEGRATION,
            access_token=data.access_token,
            refresh_token=data.refresh_token,
            channel_ids=data.channel_ids,
        )
        logger.info(
            "cliq_setup tenant_id=%s channels=%s", context.tenant_id, len(credential.channel_ids)
        )
        return {
            "integration": CLIQ_INTEGRATION,
            "channel_ids": credential.channel_ids,
            "has_refresh_token": credential.refresh_token is not None,
            "updated_at": credential.updated_at,
        }

    async def list_channels(self, context: TenantContext) -> list[dict]:
        credential = self.gateway.load_credential(context.tenant_id)
        payload = await self.gateway.execute(context.tenant_id, CliqEndpoint.channels())
        channels = _items(payload, "channels", "data")
        if credential.channel_ids:
            channels = [c for c in channels if _channel_key(c) in credential.channel_ids]
        return channels

    async def test_connection(self, context: TenantContext) -> int:
        """Cheapest authenticated call; returns the visible channel count"""
        return len(await self.list_channels(context))

    async def _channel_messages(
        self,
        context: TenantContext,
        credential: IntegrationCredential,
        channel_id: str,
        limit: int,
        before: str | None = None,
    ) -> list[CliqMessage]:
        self._check_scope(credential, channel_id)

        payload = await self.gateway.execute(
            context.tenant_id, CliqEndpoint.channel_messages(channel_id, limit, before)
        )
        messages = [normalize_message(raw, channel_id) for raw in _items(payload, "data", "messages")]
        return [message for message in messages if message is not None]

    async def fetch_channel_messages(
        self, data: ChannelMessagesRequest, context: TenantContext
    ) -> list[CliqMessage]:
        credential = self.gateway.load_credential(context.tenant_id)
        return await self._channel_messages(
            context, credential, data.channel_id, data.limit, data.before
        )

    async def latest_messages(
        self, data: LatestMessagesRequest, context: TenantContext
    ) -> list[CliqMessage]:
        """
        Newest messages across the tenant's channels.

        Without a configured channel list every channel Cliq returns is read.
        """
        credential = self.gateway.load_credential(context.tenant_id)
        channel_ids = list(credential.channel_ids)
        if not channel_ids:
            channels = await self.list_channels(context)
            channel_ids = [key for key in (_channel_key(channel) for channel in channels) if key]

        collected: list[CliqMessage] = []
        for channel_id in channel_ids:
            collected.extend(await self._channel_messages(context, credential, channel_id, data.limit))
        collected.sort(key=_timestamp_key, reverse=True)
        return collected[: data.limit]

    async def import_history(self, data: HistoricalImportRequest, context: TenantContext) -> dict:
        """
        Classify a channel's recent messages and, optionally, turn each one
        not imported before into a content item.
        """
        credential = self.gateway.load_credential(context.tenant_id)
        messages = await self._channel_messages(context, credential, data.channel_id, data.limit)

        already_imported = self.content_repo.get_imported_external_ids(context.tenant_id, CLIQ_SOURCE)
        results: list[dict] = []
        new_content: list[Content] = []
        for message in messages:
            template_type = classify_message(message)
            duplicate = bool(message.id) and message.id in already_imported
            results.append(
                {
                    "message_id": message.id,
                    "template_type": template_type,
                    "sender": message.sender,
                    "duplicate": duplicate,
                }
            )
            if data.create_content and not duplicate:
                new_content.append(
                    Content(
                        title=f"{message.sender} in {message.channel}"[:255],
                        body=message.text,
                        content_type=ContentType.CLIQ_MESSAGE,
                        source=CLIQ_SOURCE,
                        channel=message.channel,
                        external_id=message.id or None,
                        tags=[template_type],
                    )
                )
                if message.id:
                    already_imported.add(message.id)

        if new_content:
            self.content_repo.create_bulk(new_content, context.tenant_id)

        logger.info(
            "cliq_history_imported tenant_id=%s channel=%s processed=%s created=%s",
            context.tenant_id,
            data.channel_id,
            len(results),
            len(new_content),
        )
        return {
            "channel_id": data.channel_id,
            "total_messages": len(messages),
            "processed_messages": len(results),
            "content_created": len(new_content),
            "results": results,
        }
