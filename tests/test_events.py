from tests.conftest import call_action

START = "2026-11-01T09:00:00Z"
END = "2026-11-01T10:00:00Z"


def _create(client, headers, **fields):
    fields.setdefault("title", "All hands")
    fields.setdefault("start_time", START)
    fields.setdefault("end_time", END)
    return call_action(client, "events", "create", headers, **fields)


def test_create_event(client, auth_headers):
    response = _create(client, auth_headers, location="Atrium")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["title"] == "All hands"
    assert data["location"] == "Atrium"
    assert data["is_active"] is True


def test_create_event_end_before_start(client, auth_headers):
    response = _create(client, auth_headers, start_time=END, end_time=START)
    assert response.status_code == 400
    assert response.json()["error"] == "MalformedInput"


def test_list_events_by_start_time(client, auth_headers):
    _create(client, auth_headers, title="Later", start_time="2026-12-01T09:00:00Z", end_time="2026-12-01T10:00:00Z")
    _create(client, auth_headers, title="Sooner")

    data = call_action(client, "events", "getAll", auth_headers).json()["data"]
    assert [event["title"] for event in data] == ["Sooner", "Later"]


def test_update_event_checks_merged_range(client, auth_headers):
    event = _create(client, auth_headers).json()["data"]

    response = call_action(
        client, "events", "update", auth_headers, event_id=event["id"], end_time="2026-11-01T08:00:00Z"
    )
    assert response.status_code == 400
    assert response.json()["error"] == "MalformedInput"


def test_update_event(client, auth_headers):
    event = _create(client, auth_headers).json()["data"]

    response = call_action(client, "events", "update", auth_headers, event_id=event["id"], title="Town hall")
    assert response.json()["data"]["title"] == "Town hall"


def test_device_sees_only_active_events(client, auth_headers, device_headers):
    event = _create(client, auth_headers).json()["data"]
    call_action(client, "events", "update", auth_headers, event_id=event["id"], is_active=False)

    assert call_action(client, "events", "getAll", device_headers).json()["data"] == []


def test_delete_event(client, auth_headers):
    event = _create(client, auth_headers).json()["data"]

    call_action(client, "events", "delete", auth_headers, event_id=event["id"])

    response = call_action(client, "events", "delete", auth_headers, event_id=event["id"])
    assert response.json()["error"] == "NotFound"
