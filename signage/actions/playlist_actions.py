from signage.actions.registry import ActionRequest, OperationResult, registry, dump, dump_all
from signage.schemas.common import EmptyRequest
from signage.schemas.playlist_schemas import (
    PlaylistCreate,
    PlaylistIdRequest,
    PlaylistResponse,
    PlaylistUpdate,
)
from signage.services.playlist_service import PlaylistService


@registry.register("playlist", "getAll", EmptyRequest, device_allowed=True)
async def list_playlists(request: ActionRequest, data: EmptyRequest) -> OperationResult:
    playlists = PlaylistService(request.db).list_playlists(request.context)
    return OperationResult("Playlists retrieved successfully", dump_all(PlaylistResponse, playlists))


@registry.register("playlist", "get", PlaylistIdRequest, device_allowed=True)
async def get_playlist(request: ActionRequest, data: PlaylistIdRequest) -> OperationResult:
    playlist = PlaylistService(request.db).get_playlist(data.playlist_id, request.context)
    return OperationResult("Playlist retrieved", dump(PlaylistResponse, playlist))


@registry.register("playlist", "create", PlaylistCreate)
async def create_playlist(request: ActionRequest, data: PlaylistCreate) -> OperationResult:
    playlist = PlaylistService(request.db).create_playlist(data, request.context)
    return OperationResult("Playlist created successfully", dump(PlaylistResponse, playlist))


@registry.register("playlist", "update", PlaylistUpdate)
async def update_playlist(request: ActionRequest, data: PlaylistUpdate) -> OperationResult:
    playlist = PlaylistService(request.db).update_playlist(data, request.context)
    return OperationResult("Playlist updated successfully", dump(PlaylistResponse, playlist))


@registry.register("playlist", "delete", PlaylistIdRequest)
async def delete_playlist(request: ActionRequest, data: PlaylistIdRequest) -> OperationResult:
    PlaylistService(request.db).delete_playlist(data.playlist_id, request.context)
    return OperationResult("Playlist deleted successfully", {"playlist_id": data.playlist_id})
