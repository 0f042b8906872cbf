"""Unit tests for the ApiClient — session state, mode and convenience methods."""

import pytest

from ibms.application.services import ApiClient
from ibms.domain.entities import ApiResponse
from ibms.domain.exceptions import BACKEND_NOT_CONFIGURED, BackendNotConfiguredError
from ibms.infrastructure.storage import InMemoryStorage


# ── Fakes ────────────────────────────────────────────────────────────


class FakeLiveGateway:
    """Records requests and answers every call with an empty success."""

    is_mock = False

    def __init__(self):
        self.calls: list[tuple] = []

    async def request(self, method, endpoint, *, params=None, body=None, tenant=None):
        self.calls.append((method, endpoint, params, body, tenant))
        return ApiResponse(success=True, data={"endpoint": endpoint})

    async def aclose(self):
        return None


# ── Tests ──


def test_tenant_defaults_until_set(storage: InMemoryStorage, api: ApiClient):
    assert api.tenant == "easy2work"

    api.set_tenant("acme")

    assert api.tenant == "acme"
    assert storage.get_item("tenant") == "acme"


def test_mode_follows_gateway(api: ApiClient):
    live = ApiClient(FakeLiveGateway(), InMemoryStorage())

    assert api.mock_mode
    assert not live.mock_mode


@pytest.mark.asyncio
async def test_generic_verbs_carry_tenant():
    gateway = FakeLiveGateway()
    api = ApiClient(gateway, InMemoryStorage({"tenant": "acme"}))

    await api.get("/clients", {"page": 2})
    await api.patch("/notifications/1/read")

    assert gateway.calls[0] == ("GET", "/clients", {"page": 2}, None, "acme")
    assert gateway.calls[1][:2] == ("PATCH", "/notifications/1/read")


@pytest.mark.asyncio
async def test_convenience_methods_refuse_live_mode():
    gateway = FakeLiveGateway()
    api = ApiClient(gateway, InMemoryStorage())

    with pytest.raises(BackendNotConfiguredError) as exc_info:
        await api.get_clients()

    assert str(exc_info.value) == BACKEND_NOT_CONFIGURED
    assert gateway.calls == []


@pytest.mark.asyncio
async def test_login_stores_token_and_tenant(storage: InMemoryStorage, api: ApiClient):
    response = await api.login("demo@easy2work.in", "demo123", tenant="acme")

    assert response.success
    assert api.tenant == "acme"
    assert api.token == response.data["token"]
    assert storage.get_item("token") == response.data["token"]


@pytest.mark.asyncio
async def test_failed_login_stores_nothing(api: ApiClient):
    response = await api.login("demo@easy2work.in", "")

    assert not response.success
    assert api.token is None


@pytest.mark.asyncio
async def test_logout_clears_token(api: ApiClient):
    api.set_token("demo-jwt-token-1")

    await api.logout()

    assert api.token is None


@pytest.mark.asyncio
async def test_convenience_methods_in_mock_mode(api: ApiClient):
    clients = await api.get_clients(page=1, limit=2, status="active")
    order = await api.get_order("ORD-2024-001")
    marked = await api.mark_notification_as_read("1")

    assert len(clients.data) == 2
    assert clients.pagination["total"] == 3
    assert order.data["clientName"] == "Acme Corporation"
    assert marked.success
