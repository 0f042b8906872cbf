"""Unit tests for the demo backend and the mock gateway."""

import pytest

from ibms.infrastructure.gateways import MockGateway
from ibms.infrastructure.mock import MockBackend


@pytest.fixture
def backend() -> MockBackend:
    return MockBackend()


# ── Lists and pagination ──


def test_list_returns_first_page_with_pagination(backend: MockBackend):
    response = backend.dispatch("GET", "/clients")

    assert response.success
    assert len(response.data) == 5
    assert response.pagination == {"total": 5, "page": 1, "limit": 10, "totalPages": 1}


def test_list_slices_requested_page(backend: MockBackend):
    response = backend.dispatch("GET", "/clients", params={"page": "3", "limit": "2"})

    assert [c["id"] for c in response.data] == ["5"]
    assert response.pagination["totalPages"] == 3


def test_query_string_in_endpoint_is_honoured(backend: MockBackend):
    response = backend.dispatch("GET", "/clients?status=inactive")

    assert {c["status"] for c in response.data} == {"inactive"}
    assert response.pagination["total"] == 2


def test_search_is_case_insensitive(backend: MockBackend):
    response = backend.dispatch("GET", "/clients", params={"search": "ACME"})

    assert [c["clientName"] for c in response.data] == ["Acme Corporation"]


def test_client_search_endpoint(backend: MockBackend):
    response = backend.dispatch("GET", "/clients/search", params={"q": "tech"})

    assert [c["id"] for c in response.data] == ["2"]


# ── CRUD ──


def test_create_then_list(backend: MockBackend):
    created = backend.dispatch("POST", "/clients", body={"clientName": "New Co", "clientContact": "9000000000"})
    listed = backend.dispatch("GET", "/clients")

    assert created.success
    assert created.status_code == 201
    assert created.data["id"] == "6"
    assert created.data["status"] == "active"
    assert listed.pagination["total"] == 6


def test_update_merges_fields(backend: MockBackend):
    response = backend.dispatch("PUT", "/clients/3", body={"status": "active", "id": "99"})

    assert response.data["id"] == "3"
    assert response.data["status"] == "active"
    assert response.data["clientName"] == "Global Solutions Ltd"
    assert "updatedAt" in response.data


def test_delete_removes_record(backend: MockBackend):
    deleted = backend.dispatch("DELETE", "/clients/1")
    missing = backend.dispatch("GET", "/clients/1")

    assert deleted.success
    assert missing.status_code == 404
    assert not missing.success


def test_returned_records_are_copies(backend: MockBackend):
    response = backend.dispatch("GET", "/clients/1")
    response.data["clientName"] = "Changed"

    assert backend.dispatch("GET", "/clients/1").data["clientName"] == "Acme Corporation"


def test_tenants_are_isolated(backend: MockBackend):
    backend.dispatch("POST", "/clients", body={"clientName": "Tenant A only"}, tenant="tenant-a")

    assert backend.dispatch("GET", "/clients", tenant="tenant-a").pagination["total"] == 6
    assert backend.dispatch("GET", "/clients", tenant="tenant-b").pagination["total"] == 5


def test_reset_reseeds_tenant(backend: MockBackend):
    backend.dispatch("DELETE", "/clients/1")
    backend.reset()

    assert backend.dispatch("GET", "/clients").pagination["total"] == 5


# ── Custom routes ──


def test_unknown_route_echoes_body(backend: MockBackend):
    response = backend.dispatch("POST", "/reports/custom", body={"name": "weekly"})

    assert response.success
    assert response.data == {"message": "Mock POST response for /reports/custom", "data": {"name": "weekly"}}


def test_login_requires_credentials(backend: MockBackend):
    response = backend.dispatch("POST", "/auth/login", body={"email": "demo@easy2work.in"})

    assert not response.success
    assert response.status_code == 422


def test_login_returns_token_and_user(backend: MockBackend):
    response = backend.dispatch(
        "POST", "/auth/login", body={"email": "owner@acme.com", "password": "secret"}, tenant="acme"
    )

    assert response.data["token"].startswith("demo-jwt-token-")
    assert response.data["user"]["email"] == "owner@acme.com"
    assert response.data["user"]["tenant"] == "acme"


def test_create_order_prices_items(backend: MockBackend):
    response = backend.dispatch("POST", "/orders", body={
        "clientId": "1",
        "items": [{"quantity": 2, "ratePerUnit": 1000, "gstPercentage": "18"}],
    })

    order = response.data
    assert order["orderNumber"] == "ORD-2024-006"
    assert order["clientName"] == "Acme Corporation"
    assert order["totalAmount"] == 2000.0
    assert order["gstAmount"] == 360.0
    assert order["netAmount"] == 2360.0
    assert order["balanceAmount"] == 2360.0
    assert order["paymentStatus"] == "unpaid"
    assert order["status"] == "pending"


def test_payment_updates_balance_and_records_transaction(backend: MockBackend):
    response = backend.dispatch("POST", "/orders/ORD-2024-003/payments", body={"amount": 1000})
    transactions = backend.dispatch("GET", "/finance/transactions", params={"limit": "50"})

    assert response.data["paidAmount"] == 1000.0
    assert response.data["balanceAmount"] == 2776.0
    assert response.data["paymentStatus"] == "partial"
    assert transactions.pagination["total"] == 4


def test_payment_must_be_positive(backend: MockBackend):
    response = backend.dispatch("POST", "/orders/ORD-2024-003/payments", body={"amount": 0})

    assert response.status_code == 422


def test_unknown_finance_report_is_rejected(backend: MockBackend):
    assert backend.dispatch("GET", "/finance/reports/summary").success
    assert backend.dispatch("GET", "/finance/reports/forecast").status_code == 422


def test_lead_status_change(backend: MockBackend):
    response = backend.dispatch("PATCH", "/leads/1/status", body={"status": "ready_for_quote"})

    assert response.data["status"] == "ready_for_quote"
    assert "lastActivity" in response.data


def test_mark_notifications_read(backend: MockBackend):
    backend.dispatch("POST", "/notifications/mark-read", body={"ids": ["1", "3"]})
    unread = backend.dispatch("GET", "/notifications", params={"status": "unread"})

    assert unread.pagination["total"] == 0


# ── Gateway ──


@pytest.mark.asyncio
async def test_mock_gateway_dispatches_with_tenant(backend: MockBackend):
    gateway = MockGateway(backend, delay_range=(0, 0))
    await gateway.request("post", "/clients", body={"clientName": "Gateway Co"}, tenant="acme")

    response = await gateway.request("GET", "/clients", tenant="acme")

    assert gateway.is_mock
    assert response.pagination["total"] == 6
    assert backend.dispatch("GET", "/clients").pagination["total"] == 5
