"""Response envelope returned by every API client call, whatever the transport."""

from dataclasses import dataclass, field
from typing import Any

from ibms.domain.calculations import total_pages as count_pages


@dataclass
class ApiResponse:
    """Normalized ``{success, data, message, error, pagination}`` wrapper.

    Callers check ``success``; expected failures (auth errors, 4xx,
    unreachable backend) arrive here rather than as exceptions.
    """

    success: bool
    data: Any = None
    message: str | None = None
    error: str | None = None
    pagination: dict[str, int] | None = None
    status_code: int | None = None

    @classmethod
    def ok(cls, data: Any = None, message: str | None = "Success", **kwargs: Any) -> "ApiResponse":
        return cls(success=True, data=data, message=message, **kwargs)

    @classmethod
    def fail(cls, error: str, message: str | None = None, status_code: int | None = None) -> "ApiResponse":
        return cls(success=False, error=error, message=message or error, status_code=status_code)

    def to_dict(self) -> dict[str, Any]:
        """Wire form; unset optional fields are omitted."""
        result: dict[str, Any] = {"success": self.success}
        for key in ("data", "message", "error", "pagination"):
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        return result

    @property
    def failure_message(self) -> str | None:
        """Human-readable failure text, preferring the server's ``message``."""
        if self.success:
            return None
        return self.message or self.error


@dataclass
class PaginatedResponse:
    """One page of a list query."""

    data: list[Any] = field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 10
    total_pages: int = 0

    @classmethod
    def from_envelope(cls, response: ApiResponse) -> "PaginatedResponse":
        """Build a page from an envelope.

        Accepts both ``data=[...]`` with a ``pagination`` block and a
        ``data`` that is itself a ``{data, total, page, limit, totalPages}`` page.
        """
        payload = response.data
        if isinstance(payload, dict) and isinstance(payload.get("data"), list):
            meta = payload
            items = payload["data"]
        else:
            items = list(payload or [])
            meta = response.pagination or {}
        total = int(meta.get("total", meta.get("totalItems", len(items))))
        limit = int(meta.get("limit", meta.get("itemsPerPage", len(items) or 10)))
        return cls(
            data=items,
            total=total,
            page=int(meta.get("page", meta.get("currentPage", 1))),
            limit=limit,
            total_pages=int(meta.get("totalPages", count_pages(total, limit))),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "data": self.data,
            "total": self.total,
            "page": self.page,
            "limit": self.limit,
            "totalPages": self.total_pages,
        }
