"""In-process demo backend — routes ``(method, endpoint)`` pairs to fixture handlers.

Each tenant gets an independent store seeded from the fixtures, so writes in
one tenant are never visible in another. Requests that match no route fall
through to a generic echo response.
"""

import copy
import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from urllib.parse import parse_qsl, urlsplit

from ibms.domain.calculations import paginate
from ibms.domain.entities import ApiResponse
from ibms.domain.exceptions import EntityNotFoundError
from ibms.infrastructure.mock.fixtures import seed_collections, seed_singletons

logger = logging.getLogger(__name__)


class MockValidationError(Exception):
    """Raised by a handler when the request body is unusable (→ 422)."""


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


# ── Store ────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Collection:
    """A CRUD-able list in the store, exposed under ``path``."""

    name: str
    path: str
    label: str
    id_field: str = "id"
    id_prefix: str = ""
    search_fields: tuple[str, ...] = ()
    filter_fields: tuple[str, ...] = ("status",)
    create_defaults: dict[str, Any] = field(default_factory=dict)


class TenantStore:
    """Mutable fixture data for one tenant."""

    def __init__(self, tenant: str):
        self.tenant = tenant
        self.collections: dict[str, list[dict[str, Any]]] = seed_collections()
        self.singletons: dict[str, Any] = seed_singletons()
        self._counters: dict[str, int] = {}

    def records(self, name: str) -> list[dict[str, Any]]:
        return self.collections.setdefault(name, [])

    def find(self, collection: Collection, entity_id: str) -> dict[str, Any]:
        for record in self.records(collection.name):
            if str(record.get(collection.id_field)) == str(entity_id):
                return record
        raise EntityNotFoundError(collection.label, entity_id)

    def next_id(self, collection: Collection) -> str:
        """Next id after the highest numeric suffix ever seen in the collection."""
        if collection.name not in self._counters:
            highest = 0
            for record in self.records(collection.name):
                match = re.search(r"(\d+)$", str(record.get(collection.id_field, "")))
                if match:
                    highest = max(highest, int(match.group(1)))
            self._counters[collection.name] = highest
        self._counters[collection.name] += 1
        number = self._counters[collection.name]
        if collection.id_prefix:
            return f"{collection.id_prefix}{number:03d}"
        return str(number)


# ── Routing ──────────────────────────────────────────────────────────

@dataclass
class MockRequest:
    method: str
    path: str
    params: dict[str, Any]
    body: Any
    store: TenantStore
    path_params: dict[str, str] = field(default_factory=dict)

    @property
    def json(self) -> dict[str, Any]:
        """Body as a dict; non-dict bodies are treated as empty."""
        return self.body if isinstance(self.body, dict) else {}

    def param(self, name: str, default: Any = None) -> Any:
        value = self.params.get(name)
        return default if value in (None, "") else value

    def int_param(self, name: str, default: int) -> int:
        try:
            return int(self.param(name, default))
        except (TypeError, ValueError):
            return default


Handler = Callable[[MockRequest], ApiResponse]


@dataclass
class Route:
    method: str
    pattern: re.Pattern[str]
    handler: Handler


def _compile(path: str) -> re.Pattern[str]:
    """``/orders/{id}/status`` → ``^/orders/(?P<id>[^/]+)/status$``."""
    regex = re.sub(r"\{(\w+)\}", r"(?P<\1>[^/]+)", path)
    return re.compile(f"^{regex}$")


class MockRouter:
    """First-match route table. Register specific paths before parameterised ones."""

    def __init__(self) -> None:
        self._routes: list[Route] = []

    def add(self, method: str, path: str, handler: Handler) -> None:
        self._routes.append(Route(method.upper(), _compile(path), handler))

    def match(self, method: str, path: str) -> tuple[Handler, dict[str, str]] | None:
        for route in self._routes:
            if route.method != method:
                continue
            found = route.pattern.match(path)
            if found:
                return route.handler, found.groupdict()
        return None

    def __len__(self) -> int:
        return len(self._routes)


# ── Generic collection handlers ──────────────────────────────────────

def filter_records(
    records: list[dict[str, Any]], collection: Collection, request: MockRequest
) -> list[dict[str, Any]]:
    """Case-insensitive substring search plus exact-match field filters."""
    result = list(records)
    search = request.param("search") or request.param("q")
    if search and collection.search_fields:
        needle = str(search).lower()
        result = [
            r for r in result
            if any(needle in str(r.get(f) or "").lower() for f in collection.search_fields)
        ]
    for name in collection.filter_fields:
        wanted = request.param(name)
        if wanted is not None:
            result = [r for r in result if str(r.get(name)) == str(wanted)]

    sort_by = request.param("sortBy")
    if sort_by:
        reverse = request.param("sortOrder", "asc") == "desc"
        result.sort(key=lambda r: (r.get(sort_by) is None, str(r.get(sort_by) or "")), reverse=reverse)
    return result


def list_response(records: list[dict[str, Any]], request: MockRequest) -> ApiResponse:
    """Paginate ``records`` by the request's ``page``/``limit`` (defaults 1/10)."""
    page = paginate(records, request.int_param("page", 1), request.int_param("limit", 10))
    return ApiResponse.ok(
        data=page["data"],
        pagination={k: page[k] for k in ("total", "page", "limit", "totalPages")},
    )


def register_collection(router: MockRouter, collection: Collection, *, read_only: bool = False) -> None:
    """Wire list/detail/create/update/delete for ``collection``."""
    path = collection.path
    item_path = f"{path}/{{entity_id}}"

    def list_handler(request: MockRequest) -> ApiResponse:
        records = filter_records(request.store.records(collection.name), collection, request)
        return list_response(records, request)

    def detail_handler(request: MockRequest) -> ApiResponse:
        record = request.store.find(collection, request.path_params["entity_id"])
        return ApiResponse.ok(record)

    def create_handler(request: MockRequest) -> ApiResponse:
        now = utc_now_iso()
        record = {**copy.deepcopy(collection.create_defaults), **request.json}
        record[collection.id_field] = request.store.next_id(collection)
        record.setdefault("createdAt", now)
        request.store.records(collection.name).append(record)
        return ApiResponse.ok(record, message=f"{collection.label} created successfully", status_code=201)

    def update_handler(request: MockRequest) -> ApiResponse:
        record = request.store.find(collection, request.path_params["entity_id"])
        updates = {k: v for k, v in request.json.items() if k != collection.id_field}
        record.update(updates)
        record["updatedAt"] = utc_now_iso()
        return ApiResponse.ok(record, message=f"{collection.label} updated successfully")

    def delete_handler(request: MockRequest) -> ApiResponse:
        record = request.store.find(collection, request.path_params["entity_id"])
        request.store.records(collection.name).remove(record)
        return ApiResponse.ok(
            {"id": str(record.get(collection.id_field)), "message": f"{collection.label} deleted successfully"},
            message=f"{collection.label} deleted successfully",
        )

    router.add("GET", path, list_handler)
    router.add("GET", item_path, detail_handler)
    if read_only:
        return
    router.add("POST", path, create_handler)
    router.add("PUT", item_path, update_handler)
    router.add("PATCH", item_path, update_handler)
    router.add("DELETE", item_path, delete_handler)


# ── Backend ──────────────────────────────────────────────────────────

class MockBackend:
    """Fixture-backed request dispatcher shared by the mock gateway and the demo server."""

    def __init__(self, default_tenant: str = "easy2work"):
        from ibms.infrastructure.mock.routes import build_router

        self._default_tenant = default_tenant
        self._stores: dict[str, TenantStore] = {}
        self._router = build_router()

    def store_for(self, tenant: str | None) -> TenantStore:
        key = tenant or self._default_tenant
        if key not in self._stores:
            logger.debug("Seeding mock store for tenant '%s'", key)
            self._stores[key] = TenantStore(key)
        return self._stores[key]

    def reset(self, tenant: str | None = None) -> None:
        """Drop one tenant's store (or all of them); the next request reseeds it."""
        if tenant is None:
            self._stores.clear()
        else:
            self._stores.pop(tenant, None)

    def dispatch(
        self,
        method: str,
        endpoint: str,
        *,
        params: dict[str, Any] | None = None,
        body: Any = None,
        tenant: str | None = None,
    ) -> ApiResponse:
        method = method.upper()
        split = urlsplit(endpoint)
        path = split.path.rstrip("/") or "/"
        merged: dict[str, Any] = dict(parse_qsl(split.query))
        merged.update(params or {})

        matched = self._router.match(method, path)
        if matched is None:
            return ApiResponse(
                success=True,
                data={
                    "message": f"Mock {method} response for {endpoint}",
                    "data": body if body is not None else {},
                },
            )

        handler, path_params = matched
        request = MockRequest(
            method=method,
            path=path,
            params=merged,
            body=body,
            store=self.store_for(tenant),
            path_params=path_params,
        )
        try:
            response = handler(request)
        except EntityNotFoundError as exc:
            return ApiResponse.fail(error="Not Found", message=str(exc), status_code=404)
        except MockValidationError as exc:
            return ApiResponse.fail(error="Validation failed", message=str(exc), status_code=422)
        # Callers get their own copy, as they would off the wire
        response.data = copy.deepcopy(response.data)
        return response
