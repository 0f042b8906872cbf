"""Application service — the single entry point from hooks to the backend.

The generic verbs work in both modes. The convenience methods below them
are implemented for the demo backend only and raise
``BackendNotConfiguredError`` when the client talks to a live server.
"""

import functools
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from ibms.application.interfaces import BackendGateway, KeyValueStorage
from ibms.domain.entities import ApiResponse
from ibms.domain.exceptions import BackendNotConfiguredError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[ApiResponse]])


def mock_only(method: F) -> F:
    """Restrict a convenience method to mock mode."""

    @functools.wraps(method)
    async def wrapper(self: "ApiClient", *args: Any, **kwargs: Any) -> ApiResponse:
        if not self.mock_mode:
            raise BackendNotConfiguredError()
        return await method(self, *args, **kwargs)

    return wrapper  # type: ignore[return-value]


class ApiClient:
    """Tenant-aware request facade over a ``BackendGateway`` (DI)."""

    def __init__(
        self,
        gateway: BackendGateway,
        storage: KeyValueStorage,
        *,
        default_tenant: str = "easy2work",
        tenant_key: str = "tenant",
        token_key: str = "token",
    ):
        self._gateway = gateway
        self._storage = storage
        self._default_tenant = default_tenant
        self._tenant_key = tenant_key
        self._token_key = token_key
        logger.info("API client running in %s mode", "DEMO" if gateway.is_mock else "LIVE")

    @property
    def mock_mode(self) -> bool:
        return self._gateway.is_mock

    # ── Session state ────────────────────────────────────────────────

    @property
    def tenant(self) -> str:
        return self._storage.get_item(self._tenant_key) or self._default_tenant

    def set_tenant(self, tenant: str) -> None:
        self._storage.set_item(self._tenant_key, tenant)

    @property
    def token(self) -> str | None:
        return self._storage.get_item(self._token_key)

    def set_token(self, token: str) -> None:
        self._storage.set_item(self._token_key, token)

    def clear_token(self) -> None:
        self._storage.remove_item(self._token_key)

    # ── Generic verbs ────────────────────────────────────────────────

    async def request(
        self, method: str, endpoint: str, *, params: dict[str, Any] | None = None, body: Any = None
    ) -> ApiResponse:
        return await self._gateway.request(method, endpoint, params=params, body=body, tenant=self.tenant)

    async def get(self, endpoint: str, params: dict[str, Any] | None = None) -> ApiResponse:
        return await self.request("GET", endpoint, params=params)

    async def post(self, endpoint: str, body: Any = None) -> ApiResponse:
        return await self.request("POST", endpoint, body=body)

    async def put(self, endpoint: str, body: Any = None) -> ApiResponse:
        return await self.request("PUT", endpoint, body=body)

    async def patch(self, endpoint: str, body: Any = None) -> ApiResponse:
        return await self.request("PATCH", endpoint, body=body)

    async def delete(self, endpoint: str) -> ApiResponse:
        return await self.request("DELETE", endpoint)

    async def aclose(self) -> None:
        await self._gateway.aclose()

    # ── Auth ─────────────────────────────────────────────────────────

    @mock_only
    async def login(self, email: str, password: str, tenant: str | None = None) -> ApiResponse:
        if tenant:
            self.set_tenant(tenant)
        response = await self.post("/auth/login", {"email": email, "password": password, "tenant": self.tenant})
        if response.success and isinstance(response.data, dict) and response.data.get("token"):
            self.set_token(response.data["token"])
        return response

    @mock_only
    async def logout(self) -> ApiResponse:
        try:
            return await self.post("/auth/logout")
        finally:
            self.clear_token()

    # ── Clients ──────────────────────────────────────────────────────

    @mock_only
    async def get_clients(
        self, page: int = 1, limit: int = 10, search: str | None = None, status: str | None = None
    ) -> ApiResponse:
        return await self.get("/clients", {"page": page, "limit": limit, "search": search, "status": status})

    @mock_only
    async def get_client(self, client_id: str | int) -> ApiResponse:
        return await self.get(f"/clients/{client_id}")

    @mock_only
    async def create_client(self, data: dict[str, Any]) -> ApiResponse:
        return await self.post("/clients", data)

    @mock_only
    async def update_client(self, client_id: str | int, data: dict[str, Any]) -> ApiResponse:
        return await self.put(f"/clients/{client_id}", data)

    @mock_only
    async def delete_client(self, client_id: str | int) -> ApiResponse:
        return await self.delete(f"/clients/{client_id}")

    # ── Orders ───────────────────────────────────────────────────────

    @mock_only
    async def get_orders(self, page: int = 1, limit: int = 10, status: str | None = None) -> ApiResponse:
        return await self.get("/orders", {"page": page, "limit": limit, "status": status})

    @mock_only
    async def get_order(self, order_number: str) -> ApiResponse:
        return await self.get(f"/orders/{order_number}")

    @mock_only
    async def create_order(self, data: dict[str, Any]) -> ApiResponse:
        return await self.post("/orders", data)

    @mock_only
    async def update_order(self, order_number: str, data: dict[str, Any]) -> ApiResponse:
        return await self.put(f"/orders/{order_number}", data)

    @mock_only
    async def delete_order(self, order_number: str) -> ApiResponse:
        return await self.delete(f"/orders/{order_number}")

    # ── Finance / analytics / dashboard ──────────────────────────────

    @mock_only
    async def get_finance_overview(self) -> ApiResponse:
        return await self.get("/finance/overview")

    @mock_only
    async def get_invoices(self, page: int = 1, limit: int = 10, status: str | None = None) -> ApiResponse:
        return await self.get("/finance/invoices", {"page": page, "limit": limit, "status": status})

    @mock_only
    async def get_analytics(self) -> ApiResponse:
        return await self.get("/analytics")

    @mock_only
    async def get_dashboard_stats(self) -> ApiResponse:
        return await self.get("/dashboard/stats")

    # ── People / notifications ───────────────────────────────────────

    @mock_only
    async def get_employees(self, page: int = 1, limit: int = 10, search: str | None = None) -> ApiResponse:
        return await self.get("/employees", {"page": page, "limit": limit, "search": search})

    @mock_only
    async def get_notifications(self, page: int = 1, limit: int = 10) -> ApiResponse:
        return await self.get("/notifications", {"page": page, "limit": limit})

    @mock_only
    async def mark_notification_as_read(self, notification_id: str | int) -> ApiResponse:
        return await self.patch(f"/notifications/{notification_id}/read")
