from signage.models.tenant import Tenant
from tests.conftest import call_action, create_test_token


def test_get_profile(client, auth_headers):
    response = call_action(client, "profile", "get", auth_headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["subject"] == "test-tenant-123"
    assert data["role"] == "user"
    assert data["active"] is True


def test_update_profile(client, auth_headers):
    response = call_action(client, "profile", "update", auth_headers, display_name="Reception")
    assert response.json()["data"]["display_name"] == "Reception"


def test_admin_role_from_token(client, admin_headers):
    data = call_action(client, "profile", "get", admin_headers).json()["data"]
    assert data["role"] == "admin"


def test_admin_lists_tenants(client, admin_headers, tenant_a_headers):
    call_action(client, "profile", "get", tenant_a_headers)

    data = call_action(client, "tenants", "getAll", admin_headers).json()["data"]
    assert {tenant["subject"] for tenant in data} == {"admin-tenant", "tenant-a"}


def test_user_cannot_list_tenants(client, auth_headers):
    response = call_action(client, "tenants", "getAll", auth_headers)
    assert response.status_code == 403


def test_admin_deactivates_and_reactivates_tenant(client, admin_headers, tenant_a_headers, db_session):
    call_action(client, "profile", "get", tenant_a_headers)
    tenant = db_session.query(Tenant).filter(Tenant.subject == "tenant-a").one()

    response = call_action(client, "tenants", "deactivate", admin_headers, tenant_id=tenant.id)
    assert response.json()["data"]["active"] is False
    assert call_action(client, "profile", "get", tenant_a_headers).status_code == 401

    call_action(client, "tenants", "activate", admin_headers, tenant_id=tenant.id)
    assert call_action(client, "profile", "get", tenant_a_headers).status_code == 200


def test_admin_cannot_deactivate_itself(client, admin_headers):
    own_id = call_action(client, "profile", "get", admin_headers).json()["data"]["id"]

    response = call_action(client, "tenants", "deactivate", admin_headers, tenant_id=own_id)
    assert response.status_code == 403


def test_deactivate_unknown_tenant(client, admin_headers):
    response = call_action(client, "tenants", "deactivate", admin_headers, tenant_id=9999)
    assert response.json()["error"] == "NotFound"


def test_role_claim_only_seeds_new_tenant(client, auth_headers):
    """An existing user tenant does not become admin by presenting a role claim"""
    call_action(client, "profile", "get", auth_headers)
    token = create_test_token(role="admin")

    response = call_action(client, "tenants", "getAll", {"Authorization": f"Bearer {token}"})
    assert response.status_code == 403
