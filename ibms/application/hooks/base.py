"""Resource hook factory — the list/detail/create/update/delete contract shared by every entity.

Reads go through the shared ``QueryClient`` and never toast; writes go
through a ``Mutation`` that produces exactly one toast and adjusts the
cache only after the server has confirmed the change:

    create  → lists invalidated, new record cached as its detail
    update  → detail replaced by the server's record, lists invalidated
    delete  → detail evicted, lists invalidated
"""

import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from ibms.application.interfaces import Notifier
from ibms.application.query import (
    Mutation,
    QueryClient,
    QueryKey,
    QueryKeys,
    QueryOptions,
    QueryResult,
    QueryStatus,
)
from ibms.application.schemas import to_payload
from ibms.application.services.api_client import ApiClient
from ibms.domain.entities import ApiResponse, PaginatedResponse
from ibms.domain.exceptions import ApiError

logger = logging.getLogger(__name__)

MINUTE = 60.0
LIST_STALE_TIME = 2 * MINUTE
DETAIL_STALE_TIME = 5 * MINUTE

Payload = BaseModel | Mapping[str, Any]
Reducer = Callable[[dict[str, Any]], dict[str, Any]]


def unwrap(response: ApiResponse) -> Any:
    """Envelope data, or ``ApiError`` when the envelope reports a failure."""
    if not response.success:
        raise ApiError(response.failure_message or "", status_code=response.status_code, error=response.error)
    return response.data


def unwrap_page(response: ApiResponse) -> dict[str, Any]:
    """List envelope → ``{data, total, page, limit, totalPages}``."""
    unwrap(response)
    return PaginatedResponse.from_envelope(response).to_dict()


def error_message(exc: Exception, fallback: str) -> str:
    return getattr(exc, "message", None) or fallback


def clean_filters(filters: Payload | None) -> dict[str, Any]:
    """Filter object as used in cache keys and query strings."""
    return {k: v for k, v in to_payload(filters).items() if v is not None and v != ""}


@dataclass
class HookContext:
    """Collaborators every hook needs."""

    api: ApiClient
    query_client: QueryClient
    notifier: Notifier


@dataclass
class ResourceApi:
    """The five backend calls behind a resource."""

    list: Callable[[dict[str, Any]], Awaitable[ApiResponse]]
    detail: Callable[[str], Awaitable[ApiResponse]]
    create: Callable[[dict[str, Any]], Awaitable[ApiResponse]]
    update: Callable[[str, dict[str, Any]], Awaitable[ApiResponse]]
    delete: Callable[[str], Awaitable[ApiResponse]]

    @classmethod
    def rest(cls, api: ApiClient, path: str, *, update_method: str = "PUT") -> "ResourceApi":
        """Conventional REST routes under ``path``."""

        async def update(entity_id: str, body: dict[str, Any]) -> ApiResponse:
            return await api.request(update_method, f"{path}/{entity_id}", body=body)

        return cls(
            list=lambda params: api.get(path, params),
            detail=lambda entity_id: api.get(f"{path}/{entity_id}"),
            create=lambda body: api.post(path, body),
            update=update,
            delete=lambda entity_id: api.delete(f"{path}/{entity_id}"),
        )


class HookBase:
    """Query/mutation helpers bound to one ``HookContext``."""

    def __init__(self, ctx: HookContext, keys: QueryKeys):
        self._ctx = ctx
        self.keys = keys

    @property
    def api(self) -> ApiClient:
        return self._ctx.api

    @property
    def query_client(self) -> QueryClient:
        return self._ctx.query_client

    async def query(
        self,
        key: QueryKey,
        call: Callable[[], Awaitable[ApiResponse]],
        *,
        stale_time: float = LIST_STALE_TIME,
        enabled: bool = True,
        select: Callable[[Any], Any] | None = None,
        paginated: bool = False,
    ) -> QueryResult:
        async def fetch() -> Any:
            response = await call()
            return unwrap_page(response) if paginated else unwrap(response)

        options = QueryOptions(enabled=enabled, stale_time=stale_time, select=select)
        return await self.query_client.fetch_query(key, fetch, options)

    def mutation(
        self,
        call: Callable[[Any], Awaitable[ApiResponse]],
        *,
        success: str | Callable[[Any], str] | None,
        failure: str,
        after: Callable[[Any, Any], None] | None = None,
        invalidate: tuple[QueryKey, ...] = (),
    ) -> Mutation:
        """A mutation that unwraps the envelope, updates the cache and toasts once."""
        notifier = self._ctx.notifier

        async def run(variables: Any) -> Any:
            return unwrap(await call(variables))

        def on_success(data: Any, variables: Any) -> None:
            for key in invalidate:
                self.query_client.invalidate_queries(key)
            if after is not None:
                after(data, variables)
            message = success(data) if callable(success) else success
            if message:
                notifier.success(message)

        def on_error(exc: Exception, variables: Any) -> None:
            logger.warning("%s: %s", failure, exc)
            notifier.error(error_message(exc, failure))

        return Mutation(run, on_success=on_success, on_error=on_error)

    def channel_test(self, call: Callable[[Any], Awaitable[ApiResponse]]) -> Mutation:
        """Delivery-channel test; the ``{success, message}`` result picks the toast."""
        notifier = self._ctx.notifier

        def report(result: Any, _channel_id: Any) -> None:
            result = result if isinstance(result, dict) else {}
            if result.get("success"):
                notifier.success(result.get("message") or "Channel test completed")
            else:
                notifier.error(result.get("message") or "Channel test failed")

        return self.mutation(call, success=None, failure="Failed to test channel", after=report)


class ResourceHooks(HookBase):
    """Standard hooks for one entity: list, detail, create, update, delete and stats.

    ``use_update`` takes ``{"id": ..., "data": ...}``; ``use_delete`` takes the id.
    """

    def __init__(
        self,
        ctx: HookContext,
        *,
        entity: str,
        label: str,
        resource: ResourceApi,
        id_field: str = "id",
        list_stale_time: float = LIST_STALE_TIME,
        detail_stale_time: float = DETAIL_STALE_TIME,
        item_select: Callable[[dict[str, Any]], Any] | None = None,
        stats: Reducer | None = None,
    ):
        super().__init__(ctx, QueryKeys(entity))
        self.label = label
        self.resource = resource
        self.id_field = id_field
        self.list_stale_time = list_stale_time
        self.detail_stale_time = detail_stale_time
        self._item_select = item_select
        self._stats = stats

    # ── Reads ────────────────────────────────────────────────────────

    def _select_page(self, page: dict[str, Any]) -> dict[str, Any]:
        if self._item_select is None:
            return page
        return {**page, "data": [self._item_select(item) for item in page["data"]]}

    async def use_list(self, filters: Payload | None = None, *, enabled: bool = True) -> QueryResult:
        params = clean_filters(filters)
        return await self.query(
            self.keys.list(params),
            lambda: self.resource.list(params),
            stale_time=self.list_stale_time,
            enabled=enabled,
            select=self._select_page if self._item_select else None,
            paginated=True,
        )

    async def use_detail(self, entity_id: str | int | None) -> QueryResult:
        return await self.query(
            self.keys.detail(entity_id),
            lambda: self.resource.detail(str(entity_id)),
            stale_time=self.detail_stale_time,
            enabled=bool(entity_id),
            select=self._item_select,
        )

    async def use_stats(self, filters: Payload | None = None) -> QueryResult:
        """Reduce the list query's page; no request of its own beyond the list."""
        if self._stats is None:
            return QueryResult(QueryStatus.ERROR, error=ApiError(f"{self.label} has no statistics"))
        result = await self.use_list(filters)
        if not result.is_success:
            return result
        return QueryResult(result.status, self._stats(result.data), None, result.updated_at)

    # ── Writes ───────────────────────────────────────────────────────

    def invalidate_lists(self) -> None:
        self.query_client.invalidate_queries(self.keys.lists())
        self.query_client.invalidate_queries(self.keys.scoped("stats"))

    def _record_id(self, record: Any) -> str | None:
        if isinstance(record, dict) and record.get(self.id_field) is not None:
            return str(record[self.id_field])
        return None

    def use_create(self) -> Mutation:
        def after(record: Any, _payload: Any) -> None:
            self.invalidate_lists()
            record_id = self._record_id(record)
            if record_id is not None:
                self.query_client.set_query_data(self.keys.detail(record_id), record)

        return self.mutation(
            lambda payload: self.resource.create(to_payload(payload)),
            success=f"{self.label} created successfully",
            failure=f"Failed to create {self.label.lower()}",
            after=after,
        )

    def use_update(self) -> Mutation:
        def after(record: Any, variables: dict[str, Any]) -> None:
            self.query_client.set_query_data(self.keys.detail(variables["id"]), record)
            self.invalidate_lists()

        return self.mutation(
            lambda v: self.resource.update(str(v["id"]), to_payload(v["data"], partial=True)),
            success=f"{self.label} updated successfully",
            failure=f"Failed to update {self.label.lower()}",
            after=after,
        )

    def use_delete(self) -> Mutation:
        def after(_data: Any, entity_id: Any) -> None:
            self.query_client.remove_queries(self.keys.detail(entity_id))
            self.invalidate_lists()

        return self.mutation(
            lambda entity_id: self.resource.delete(str(entity_id)),
            success=f"{self.label} deleted successfully",
            failure=f"Failed to delete {self.label.lower()}",
            after=after,
        )

    def record_mutation(
        self,
        call: Callable[[Any], Awaitable[ApiResponse]],
        *,
        success: str,
        failure: str,
        id_of: Callable[[Any], Any] = lambda v: v["id"],
    ) -> Mutation:
        """Mutation whose response is the updated record (status changes, assignments, ...)."""

        def after(record: Any, variables: Any) -> None:
            self.query_client.set_query_data(self.keys.detail(id_of(variables)), record)
            self.invalidate_lists()

        return self.mutation(call, success=success, failure=failure, after=after)
