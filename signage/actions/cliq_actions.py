from signage.actions.registry import ActionRequest, OperationResult, registry
from signage.integrations.cliq_client import CliqClient
from signage.integrations.gateway import IntegrationGateway
from signage.integrations.token_refresher import ZohoTokenRefresher
from signage.repositories.integration_credential_repository import (
    IntegrationCredentialRepository,
)
from signage.schemas.cliq_schemas import (
    ChannelMessagesRequest,
    CliqSetupRequest,
    HistoricalImportRequest,
    LatestMessagesRequest,
)
from signage.schemas.common import EmptyRequest
from signage.services.cliq_service import CliqService


def _cliq_service(request: ActionRequest) -> CliqService:
    gateway = IntegrationGateway(
        credentials=IntegrationCredentialRepository(request.db),
        client=CliqClient(request.http_client),
        refresher=ZohoTokenRefresher(request.http_client),
    )
    return CliqService(request.db, gateway)


@registry.register("cliq", "setupCliqIntegration", CliqSetupRequest)
async def setup_integration(request: ActionRequest, data: CliqSetupRequest) -> OperationResult:
    summary = _cliq_service(request).setup(data, request.context)
    return OperationResult("Cliq integration setup successfully", summary)


@registry.register("cliq", "getCliqChannels", EmptyRequest)
async def get_channels(request: ActionRequest, data: EmptyRequest) -> OperationResult:
    channels = await _cliq_service(request).list_channels(request.context)
    return OperationResult(f"Retrieved {len(channels)} channels", channels)


@registry.register("cliq", "testCliqConnection", EmptyRequest)
async def test_connection(request: ActionRequest, data: EmptyRequest) -> OperationResult:
    count = await _cliq_service(request).test_connection(request.context)
    return OperationResult("Cliq connection test successful", {"channels_count": count})


@registry.register("cliq", "fetchChannelMessages", ChannelMessagesRequest)
async def fetch_channel_messages(request: ActionRequest, data: ChannelMessagesRequest) -> OperationResult:
    messages = await _cliq_service(request).fetch_channel_messages(data, request.context)
    return OperationResult(
        f"Fetched {len(messages)} messages from channel",
        [message.model_dump(mode="json") for message in messages],
    )


@registry.register("cliq", "getLatestMessages", LatestMessagesRequest)
async def get_latest_messages(request: ActionRequest, data: LatestMessagesRequest) -> OperationResult:
    messages = await _cliq_service(request).latest_messages(data, request.context)
    return OperationResult(
        f"Retrieved {len(messages)} messages from configured channels",
        [message.model_dump(mode="json") for message in messages],
    )


@registry.register("cliq", "processHistoricalMessages", HistoricalImportRequest)
async def process_historical_messages(
    request: ActionRequest, data: HistoricalImportRequest
) -> OperationResult:
    summary = await _cliq_service(request).import_history(data, request.context)
    return OperationResult(
        f"Processed {summary['processed_messages']} messages, "
        f"created {summary['content_created']} content items",
        summary,
    )
