"""Abstract interface (port) for the transport between the API client and a backend."""

from abc import ABC, abstractmethod
from typing import Any

from ibms.domain.entities import ApiResponse


class BackendGateway(ABC):
    """Port for backend requests — implemented by the mock and HTTP gateways.

    Implementations never raise for expected failures: every outcome is
    returned as an ``ApiResponse`` envelope.
    """

    @property
    @abstractmethod
    def is_mock(self) -> bool:
        """True when responses are synthesized in-process."""
        ...

    @abstractmethod
    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        params: dict[str, Any] | None = None,
        body: Any = None,
        tenant: str | None = None,
    ) -> ApiResponse:
        """Send one request and return the normalized envelope."""
        ...

    async def aclose(self) -> None:
        """Release transport resources. No-op by default."""
        return None
