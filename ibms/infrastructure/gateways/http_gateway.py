"""Live backend gateway — implements the BackendGateway interface over HTTP.

Sends JSON requests to ``{base_url}{endpoint}`` using httpx and folds every
outcome (2xx, non-2xx, transport failure) into an ``ApiResponse`` envelope.
"""

import logging
from typing import Any

import httpx

from ibms.application.interfaces import BackendGateway, KeyValueStorage
from ibms.domain.entities import ApiResponse
from ibms.infrastructure.logging.colored_logger import Channel, RequestLogger

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "Network error. Please check your connection."


class HttpGateway(BackendGateway):
    """Infrastructure adapter — connects to the live REST backend.

    The bearer token is read from storage on every request so that a
    login or logout takes effect immediately.
    """

    def __init__(
        self,
        base_url: str,
        storage: KeyValueStorage,
        *,
        token_key: str = "token",
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._storage = storage
        self._token_key = token_key
        self._timeout = timeout
        self._http_client = http_client
        self._log = RequestLogger(__name__)

    @property
    def is_mock(self) -> bool:
        return False

    def _get_headers(self, tenant: str | None) -> dict[str, str]:
        """Fixed header set plus auth and tenant when available."""
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        token = self._storage.get_item(self._token_key)
        if token:
            headers["Authorization"] = f"Bearer {token}"
        if tenant:
            headers["X-Tenant"] = tenant
        return headers

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        params: dict[str, Any] | None = None,
        body: Any = None,
        tenant: str | None = None,
    ) -> ApiResponse:
        method = method.upper()
        url = f"{self._base_url}{endpoint}"
        query = _clean_params(params)

        client = await self._get_client()
        should_close = self._http_client is None

        try:
            try:
                with self._log.timed_request(Channel.HTTP, method, endpoint) as extra:
                    response = await client.request(
                        method,
                        url,
                        params=query or None,
                        json=body if method in ("POST", "PUT", "PATCH") else None,
                        headers=self._get_headers(tenant),
                    )
                    extra["status"] = response.status_code
            except httpx.HTTPError as exc:
                return ApiResponse.fail(
                    error=str(exc) or type(exc).__name__,
                    message=NETWORK_ERROR_MESSAGE,
                )
            return self._normalize(response)
        finally:
            if should_close:
                await client.aclose()

    async def aclose(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()

    def _normalize(self, response: httpx.Response) -> ApiResponse:
        """Fold an HTTP response into the envelope."""
        try:
            payload = response.json() if response.content else None
        except ValueError:
            payload = response.text or None

        if not response.is_success:
            if response.status_code == 401:
                self._storage.remove_item(self._token_key)
                logger.warning("Session expired, stored token cleared")
            message = None
            if isinstance(payload, dict):
                message = payload.get("message") or payload.get("error")
            message = message or f"Request failed with status {response.status_code}"
            return ApiResponse.fail(
                error=str(payload.get("error") or message) if isinstance(payload, dict) else message,
                message=message,
                status_code=response.status_code,
            )

        if isinstance(payload, dict) and "data" in payload:
            return ApiResponse(
                success=bool(payload.get("success", True)),
                data=payload.get("data"),
                message=payload.get("message"),
                error=payload.get("error"),
                pagination=payload.get("pagination"),
                status_code=response.status_code,
            )
        # Any shape lacking ``data`` is the payload itself
        return ApiResponse(success=True, data=payload, status_code=response.status_code)


def _clean_params(params: dict[str, Any] | None) -> dict[str, str]:
    """Drop empty filter values and stringify the rest."""
    if not params:
        return {}
    cleaned: dict[str, str] = {}
    for key, value in params.items():
        if value is None or value == "":
            continue
        if isinstance(value, bool):
            cleaned[key] = "true" if value else "false"
        else:
            cleaned[key] = str(value)
    return cleaned
