import pytest
from sqlalchemy import event

from signage.actions import registry
from signage.actions.registry import ActionRegistry
from signage.services.content_service import ContentService
from tests.conftest import call_action


@pytest.fixture
def sql_statements(db_session):
    """Records every SQL statement sent to the test database"""
    engine = db_session.get_bind()
    statements = []

    def record(conn, cursor, statement, parameters, context, executemany):
        statements.append(statement)

    event.listen(engine, "before_cursor_execute", record)
    yield statements
    event.remove(engine, "before_cursor_execute", record)


def test_unknown_action_touches_no_storage(client, auth_headers, sql_statements):
    response = client.post("/api/content", json={"action": "explode"}, headers=auth_headers)

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "UnknownAction"
    assert "getAll" in body["message"]
    assert sql_statements == []


def test_unknown_resource(client, auth_headers):
    response = client.post("/api/widgets", json={"action": "getAll"}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["error"] == "UnknownAction"


def test_unknown_action_checked_before_authentication(client):
    """An unauthenticated unknown action reports the action, not the missing identity"""
    response = client.post("/api/content", json={"action": "explode"})
    assert response.status_code == 400
    assert response.json()["error"] == "UnknownAction"


def test_missing_action(client, auth_headers):
    response = client.post("/api/content", json={"data": {}}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["error"] == "MalformedInput"
    assert "action" in response.json()["message"].lower()


def test_empty_body(client, auth_headers):
    response = client.post("/api/content", headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["error"] == "MalformedInput"


def test_invalid_json(client, auth_headers):
    response = client.post(
        "/api/content",
        content=b"{not json",
        headers={**auth_headers, "Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "MalformedInput"


def test_non_object_body(client, auth_headers):
    response = client.post("/api/content", json=["getAll"], headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["error"] == "MalformedInput"


def test_missing_required_field(client, auth_headers, sql_statements):
    response = call_action(client, "content", "add", auth_headers, body="No title")

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "MissingField"
    assert "title" in body["message"]
    assert sql_statements == []


def test_invalid_field_value(client, auth_headers):
    response = call_action(client, "content", "get", auth_headers, content_id="abc")
    assert response.status_code == 400
    assert response.json()["error"] == "MalformedInput"
    assert "content_id" in response.json()["message"]


def test_fields_accepted_next_to_action(client, auth_headers):
    """Without a data object the remaining body keys are the input"""
    response = client.post(
        "/api/content",
        json={"action": "add", "title": "Flat", "body": "Top-level fields"},
        headers=auth_headers,
    )
    assert response.status_code == 200
    assert response.json()["data"]["title"] == "Flat"


def test_success_envelope_shape(client, auth_headers):
    response = call_action(client, "content", "add", auth_headers, title="Hello", body="World")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Content added successfully"
    assert "error" not in body
    assert body["data"]["source"] == "manual"


def test_unexpected_error_becomes_internal_error(client, auth_headers, monkeypatch):
    def broken(self, context, include_inactive=False):
        raise RuntimeError("database exploded")

    monkeypatch.setattr(ContentService, "list_content", broken)

    response = call_action(client, "content", "getAll", auth_headers)
    assert response.status_code == 500
    body = response.json()
    assert body == {"success": False, "message": "Internal server error", "error": "InternalError"}


def test_admin_only_operation_forbidden_for_users(client, auth_headers):
    response = call_action(client, "tenants", "getAll", auth_headers)
    assert response.status_code == 403
    assert response.json()["error"] == "Forbidden"


def test_registry_rejects_duplicate_registration():
    local = ActionRegistry()

    @local.register("content", "getAll")
    async def first(request, data):
        return None

    with pytest.raises(ValueError):

        @local.register("content", "getAll")
        async def second(request, data):
            return None


def test_registry_lists_every_resource():
    assert set(registry.resources()) == {
        "content",
        "playlist",
        "emergency",
        "settings",
        "events",
        "screens",
        "profile",
        "tenants",
        "cliq",
    }
