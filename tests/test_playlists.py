from tests.conftest import call_action


def _content_id(client, headers, title="Item"):
    return call_action(client, "content", "add", headers, title=title, body="b").json()["data"]["id"]


def test_create_playlist(client, auth_headers):
    first = _content_id(client, auth_headers, "One")
    second = _content_id(client, auth_headers, "Two")

    response = call_action(
        client, "playlist", "create", auth_headers, name="Morning", items=[second, first]
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["name"] == "Morning"
    assert data["items"] == [second, first]
    assert data["is_active"] is True


def test_create_playlist_with_unknown_content(client, auth_headers):
    response = call_action(client, "playlist", "create", auth_headers, name="Bad", items=[999])
    assert response.json()["error"] == "NotFound"
    assert "999" in response.json()["message"]


def test_list_and_get_playlists(client, auth_headers):
    created = call_action(client, "playlist", "create", auth_headers, name="Loop").json()["data"]

    listed = call_action(client, "playlist", "getAll", auth_headers).json()["data"]
    assert [playlist["id"] for playlist in listed] == [created["id"]]

    fetched = call_action(client, "playlist", "get", auth_headers, playlist_id=created["id"])
    assert fetched.json()["data"]["name"] == "Loop"


def test_update_playlist_items(client, auth_headers):
    item = _content_id(client, auth_headers)
    created = call_action(client, "playlist", "create", auth_headers, name="Loop").json()["data"]

    response = call_action(
        client, "playlist", "update", auth_headers, playlist_id=created["id"], items=[item, item]
    )
    assert response.json()["data"]["items"] == [item, item]


def test_device_sees_only_active_playlists(client, auth_headers, device_headers):
    kept = call_action(client, "playlist", "create", auth_headers, name="Live").json()["data"]
    paused = call_action(client, "playlist", "create", auth_headers, name="Paused").json()["data"]
    call_action(client, "playlist", "update", auth_headers, playlist_id=paused["id"], is_active=False)

    listed = call_action(client, "playlist", "getAll", device_headers).json()["data"]
    assert [playlist["id"] for playlist in listed] == [kept["id"]]


def test_device_cannot_create_playlist(client, device_headers):
    response = call_action(client, "playlist", "create", device_headers, name="Nope")
    assert response.status_code == 403


def test_delete_playlist(client, auth_headers):
    created = call_action(client, "playlist", "create", auth_headers, name="Gone").json()["data"]

    call_action(client, "playlist", "delete", auth_headers, playlist_id=created["id"])

    response = call_action(client, "playlist", "get", auth_headers, playlist_id=created["id"])
    assert response.json()["error"] == "NotFound"


def test_device_cannot_get_inactive_playlist(client, auth_headers, device_headers):
    paused = call_action(client, "playlist", "create", auth_headers, name="Paused").json()["data"]
    call_action(client, "playlist", "update", auth_headers, playlist_id=paused["id"], is_active=False)

    response = call_action(client, "playlist", "get", device_headers, playlist_id=paused["id"])
    assert response.json()["error"] == "NotFound"
