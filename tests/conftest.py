import os

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import httpx
import pytest
from datetime import datetime, timedelta, UTC
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from jose import jwt

from signage.database import get_db
from signage.dependencies import get_upstream_http_client
from signage.config import settings
# Import all model classes to ensure they're registered with SQLAlchemy
from signage.models import Base
# Import FastAPI app AFTER model imports
from signage.main import app

# Test database (SQLite in-memory for speed)
# Use StaticPool to ensure all connections share the same in-memory database
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

CLIQ_API = settings.CLIQ_API_BASE_URL.rstrip("/")
TOKEN_URL = f"{settings.ZOHO_ACCOUNTS_URL.rstrip('/')}/oauth/v2/token"


class FakeUpstream:
    """
    Scripted Cliq API and Zoho token endpoint behind httpx.MockTransport.

    Queue httpx.Response objects (or httpx exception classes to raise) on
    cliq_responses / token_responses; every request is recorded.
    """

    def __init__(self):
        self.cliq_responses: list = []
        self.token_responses: list = []
        self.cliq_calls: list[httpx.Request] = []
        self.token_calls: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        if str(request.url).startswith(TOKEN_URL):
            self.token_calls.append(request)
            queue = self.token_responses
        else:
            self.cliq_calls.append(request)
            queue = self.cliq_responses

        if not queue:
            return httpx.Response(500, json={"error": "unscripted request"})
        result = queue.pop(0)
        if isinstance(result, type) and issubclass(result, httpx.TransportError):
            raise result("scripted failure", request=request)
        return result

    def http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture(scope="function")
def db_session():
    """Create fresh database for each test"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def upstream():
    return FakeUpstream()


@pytest.fixture(scope="function")
def client(db_session, upstream):
    """FastAPI test client with test database and scripted upstream"""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    async def override_http_client():
        async with upstream.http_client() as http_client:
            yield http_client

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_upstream_http_client] = override_http_client
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def create_test_token(
    subject: str = "test-tenant-123",
    role: str | None = None,
    expired: bool = False,
    name: str | None = None,
) -> str:
    """
    Generate valid JWT token for testing.

    Args:
        subject: Tenant subject to embed in 'sub' claim
        role: Optional 'role' claim ("admin" for admin tenants)
        expired: If True, create expired token
        name: Optional 'name' claim used as the display name

    Returns:
        Encoded JWT token
    """
    if expired:
        exp = datetime.now(UTC) - timedelta(minutes=5)
    else:
        exp = datetime.now(UTC) + timedelta(minutes=15)

    payload = {"sub": subject, "exp": exp, "iat": datetime.now(UTC)}
    if role is not None:
        payload["role"] = role
    if name is not None:
        payload["name"] = name

    token = jwt.encode(payload, settings.SECRET_KEY, algorithm="HS256")
    return token


def call_action(client, resource: str, action: str, headers: dict | None = None, **fields):
    """POST {action, data} to /api/{resource}"""
    return client.post(
        f"/api/{resource}", json={"action": action, "data": fields}, headers=headers or {}
    )


@pytest.fixture
def auth_headers():
    """Authorization headers for the default tenant"""
    return {"Authorization": f"Bearer {create_test_token()}"}


@pytest.fixture
def tenant_a_headers():
    """Authorization headers for tenant A"""
    token = create_test_token(subject="tenant-a")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def tenant_b_headers():
    """Authorization headers for tenant B"""
    token = create_test_token(subject="tenant-b")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers():
    """Authorization headers for an admin tenant"""
    token = create_test_token(subject="admin-tenant", role="admin")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def device_headers(client, auth_headers):
    """Device token headers for a screen registered by the default tenant"""
    response = call_action(
        client, "screens", "create", auth_headers, name="Lobby", location="Ground floor"
    )
    token = response.json()["data"]["device_token"]
    return {settings.DEVICE_TOKEN_HEADER: token}
