"""Mock backend gateway — answers requests from the in-process demo backend."""

import asyncio
import random
from typing import Any

from ibms.application.interfaces import BackendGateway
from ibms.domain.entities import ApiResponse
from ibms.infrastructure.logging.colored_logger import Channel, RequestLogger
from ibms.infrastructure.mock import MockBackend


class MockGateway(BackendGateway):
    """Infrastructure adapter — simulated latency in front of ``MockBackend``.

    Every call waits a random delay drawn from ``delay_range`` (seconds)
    before the backend is consulted; pass ``(0, 0)`` for instant replies.
    """

    def __init__(self, backend: MockBackend | None = None, delay_range: tuple[float, float] = (0.3, 1.2)):
        self._backend = backend or MockBackend()
        self._delay_range = delay_range
        self._log = RequestLogger(__name__)

    @property
    def is_mock(self) -> bool:
        return True

    @property
    def backend(self) -> MockBackend:
        return self._backend

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
        with self._log.timed_request(Channel.MOCK, method, endpoint, tenant=tenant) as extra:
            low, high = self._delay_range
            if high > 0:
                await asyncio.sleep(random.uniform(low, high))
            response = self._backend.dispatch(method, endpoint, params=params, body=body, tenant=tenant)
            extra["success"] = response.success
        return response
