"""Integration tests — the live HTTP gateway talking to the demo backend server."""

import pytest
from httpx import ASGITransport, AsyncClient

from ibms.application.hooks import AuthHooks, ClientHooks, HookContext
from ibms.application.query import QueryClient
from ibms.application.services import ApiClient
from ibms.infrastructure.dependencies import get_mock_backend
from ibms.infrastructure.gateways import HttpGateway
from ibms.infrastructure.notifications import ToastNotifier
from ibms.infrastructure.storage import InMemoryStorage
from ibms.main import app


@pytest.fixture(autouse=True)
def fresh_backend():
    get_mock_backend().reset()
    yield
    get_mock_backend().reset()


def _gateway(storage: InMemoryStorage) -> HttpGateway:
    client = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
    return HttpGateway("http://test/api", storage, http_client=client)


@pytest.mark.asyncio
async def test_list_over_http_matches_envelope():
    gateway = _gateway(InMemoryStorage())

    response = await gateway.request("GET", "/clients", params={"limit": 2}, tenant="acme")

    assert response.success
    assert len(response.data) == 2
    assert response.pagination == {"total": 5, "page": 1, "limit": 2, "totalPages": 3}
    await gateway.aclose()


@pytest.mark.asyncio
async def test_not_found_over_http():
    gateway = _gateway(InMemoryStorage())

    response = await gateway.request("GET", "/clients/99")

    assert not response.success
    assert response.status_code == 404
    assert response.message == "Client with id '99' not found"
    await gateway.aclose()


@pytest.mark.asyncio
async def test_tenant_header_scopes_writes():
    gateway = _gateway(InMemoryStorage())

    await gateway.request("POST", "/clients", body={"clientName": "Acme Only"}, tenant="acme")
    acme = await gateway.request("GET", "/clients", tenant="acme")
    other = await gateway.request("GET", "/clients", tenant="globex")

    assert acme.pagination["total"] == 6
    assert other.pagination["total"] == 5
    await gateway.aclose()


@pytest.mark.asyncio
async def test_invalid_json_body_is_rejected():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.post(
            "/api/clients", content=b"{not json", headers={"Content-Type": "application/json"}
        )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_resource_hooks_over_live_gateway():
    storage = InMemoryStorage()
    api = ApiClient(_gateway(storage), storage)
    notifier = ToastNotifier()
    hooks = ClientHooks(HookContext(api=api, query_client=QueryClient(retry=0), notifier=notifier))

    created = await hooks.use_create().mutate_async({"clientName": "Wire Co", "clientContact": "9000000001"})
    listed = await hooks.use_list()

    assert not api.mock_mode
    assert created["id"] == "6"
    assert listed.data["total"] == 6
    assert [t.message for t in notifier.toasts] == ["Client created successfully"]
    await api.aclose()


@pytest.mark.asyncio
async def test_auth_hooks_over_live_gateway():
    storage = InMemoryStorage()
    api = ApiClient(_gateway(storage), storage)
    query_client = QueryClient(retry=0)
    notifier = ToastNotifier()
    hooks = AuthHooks(HookContext(api=api, query_client=query_client, notifier=notifier))

    login = await hooks.use_login().mutate({"email": "owner@acme.com", "password": "secret", "tenant": "acme"})
    user = await hooks.use_current_user()

    assert login.is_success
    assert api.token.startswith("demo-jwt-token-")
    assert user.data["email"] == "owner@acme.com"
    assert user.data["tenant"] == "acme"

    logout = await hooks.use_logout().mutate(None)

    assert logout.is_success
    assert api.token is None
    assert len(query_client) == 0
    assert [t.message for t in notifier.toasts] == ["Welcome back!", "Logged out successfully"]
    await api.aclose()
