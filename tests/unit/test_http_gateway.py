"""Unit tests for the HttpGateway — headers, envelope normalization and failures."""

import json

import httpx
import pytest

from ibms.infrastructure.gateways import HttpGateway
from ibms.infrastructure.gateways.http_gateway import NETWORK_ERROR_MESSAGE
from ibms.infrastructure.storage import InMemoryStorage


# ── Helpers ──


def _make_gateway(handler, storage: InMemoryStorage | None = None) -> HttpGateway:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HttpGateway("https://api.example.com/api/", storage or InMemoryStorage(), http_client=client)


def _respond(status_code: int = 200, json=None, seen: list | None = None):
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, json=json)

    return handler


# ── Tests ──


@pytest.mark.asyncio
async def test_request_sends_auth_tenant_and_clean_params():
    seen: list[httpx.Request] = []
    storage = InMemoryStorage({"token": "abc123"})
    gateway = _make_gateway(_respond(json={"success": True, "data": []}, seen=seen), storage)

    await gateway.request("GET", "/clients", params={"page": 1, "search": "", "status": None, "active": True},
                          tenant="acme")

    request = seen[0]
    assert request.url.path == "/api/clients"
    assert dict(request.url.params) == {"page": "1", "active": "true"}
    assert request.headers["Authorization"] == "Bearer abc123"
    assert request.headers["X-Tenant"] == "acme"
    assert request.headers["Content-Type"] == "application/json"


@pytest.mark.asyncio
async def test_request_without_token_has_no_auth_header():
    seen: list[httpx.Request] = []
    gateway = _make_gateway(_respond(json={"data": {}}, seen=seen))

    await gateway.request("GET", "/auth/me")

    assert "Authorization" not in seen[0].headers
    assert "X-Tenant" not in seen[0].headers


@pytest.mark.asyncio
async def test_post_body_is_sent_as_json():
    seen: list[httpx.Request] = []
    gateway = _make_gateway(_respond(201, json={"success": True, "data": {"id": "6"}}, seen=seen))

    response = await gateway.request("POST", "/clients", body={"clientName": "New Co"})

    assert json.loads(seen[0].content) == {"clientName": "New Co"}
    assert response.success
    assert response.data == {"id": "6"}
    assert response.status_code == 201


@pytest.mark.asyncio
async def test_envelope_fields_pass_through():
    payload = {
        "success": True,
        "data": [{"id": "1"}],
        "message": "Success",
        "pagination": {"total": 1, "page": 1, "limit": 10, "totalPages": 1},
    }
    gateway = _make_gateway(_respond(json=payload))

    response = await gateway.request("GET", "/clients")

    assert response.data == [{"id": "1"}]
    assert response.pagination["total"] == 1
    assert response.message == "Success"


@pytest.mark.asyncio
async def test_payload_without_data_is_wrapped():
    gateway = _make_gateway(_respond(json={"status": "healthy"}))

    response = await gateway.request("GET", "/v1/health")

    assert response.success
    assert response.data == {"status": "healthy"}


@pytest.mark.asyncio
async def test_non_2xx_becomes_failure_envelope():
    gateway = _make_gateway(_respond(404, json={"success": False, "error": "Not Found", "message": "Client missing"}))

    response = await gateway.request("GET", "/clients/99")

    assert not response.success
    assert response.status_code == 404
    assert response.message == "Client missing"
    assert response.error == "Not Found"


@pytest.mark.asyncio
async def test_non_2xx_without_body_gets_generic_message():
    gateway = _make_gateway(_respond(500))

    response = await gateway.request("GET", "/clients")

    assert not response.success
    assert response.message == "Request failed with status 500"


@pytest.mark.asyncio
async def test_unauthorized_clears_stored_token():
    storage = InMemoryStorage({"token": "expired", "tenant": "acme"})
    gateway = _make_gateway(_respond(401, json={"message": "Token expired"}), storage)

    response = await gateway.request("GET", "/auth/me")

    assert response.status_code == 401
    assert storage.get_item("token") is None
    assert storage.get_item("tenant") == "acme"


@pytest.mark.asyncio
async def test_transport_error_becomes_network_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    gateway = _make_gateway(handler)

    response = await gateway.request("GET", "/clients")

    assert not response.success
    assert response.message == NETWORK_ERROR_MESSAGE
    assert response.status_code is None
    assert not gateway.is_mock
