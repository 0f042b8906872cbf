"""In-memory query cache — keyed results, staleness, dedup, retry and invalidation.

Every read goes through ``fetch_query``:

    disabled          → idle, fetch function never called
    fresh cache hit   → success from cache
    request in flight → await the same task
    otherwise         → fetch (with retry) and store the outcome

Writes are last-write-wins unless ``reject_stale_writes`` is set, in which
case a fetch that started before a newer write to the same key is dropped.
"""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ibms.application.query.keys import QueryKey, key_matches, normalize_key

logger = logging.getLogger(__name__)

QueryFn = Callable[[], Awaitable[Any]]


class QueryStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class QueryOptions:
    enabled: bool = True
    stale_time: float = 0.0
    retry: int | None = None
    retry_delay: float | None = None
    select: Callable[[Any], Any] | None = None


@dataclass
class QueryResult:
    """What a read hook hands to the UI: ``{data, is_loading, is_error, error}``."""

    status: QueryStatus
    data: Any = None
    error: Exception | None = None
    updated_at: float | None = None

    @property
    def is_idle(self) -> bool:
        return self.status == QueryStatus.IDLE

    @property
    def is_loading(self) -> bool:
        return self.status == QueryStatus.LOADING

    @property
    def is_success(self) -> bool:
        return self.status == QueryStatus.SUCCESS

    @property
    def is_error(self) -> bool:
        return self.status == QueryStatus.ERROR


@dataclass
class _Entry:
    key: QueryKey
    status: QueryStatus = QueryStatus.IDLE
    data: Any = None
    error: Exception | None = None
    updated_at: float | None = None
    last_used: float = 0.0
    invalidated: bool = False
    version: int = 0
    task: asyncio.Task | None = field(default=None, repr=False)


class QueryClient:
    """Shared cache for every hook in the process."""

    def __init__(
        self,
        *,
        retry: int = 3,
        retry_delay: float = 1.0,
        gc_time: float = 300.0,
        reject_stale_writes: bool = False,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._retry = retry
        self._retry_delay = retry_delay
        self._gc_time = gc_time
        self._reject_stale_writes = reject_stale_writes
        self._clock = clock
        self._entries: dict[QueryKey, _Entry] = {}

    # ── Reads ────────────────────────────────────────────────────────

    async def fetch_query(self, key: QueryKey, fn: QueryFn, options: QueryOptions | None = None) -> QueryResult:
        options = options or QueryOptions()
        normalized = normalize_key(key)
        entry = self._entries.get(normalized)

        if not options.enabled:
            if entry is None:
                return QueryResult(QueryStatus.IDLE)
            return self._result(entry, options, status=QueryStatus.IDLE)

        if entry is None:
            entry = self._entries[normalized] = _Entry(key=normalized)
        entry.last_used = self._clock()

        if self._is_fresh(entry, options.stale_time):
            logger.debug("Cache hit %s", key)
            return self._result(entry, options)

        if entry.task is None or entry.task.done():
            logger.debug("Fetching %s", key)
            entry.status = QueryStatus.LOADING
            entry.task = asyncio.ensure_future(self._run(entry, fn, options))
        else:
            logger.debug("Joining in-flight fetch %s", key)
        task = entry.task
        try:
            await asyncio.shield(task)
        finally:
            if entry.task is task and task.done():
                entry.task = None
        return self._result(entry, options)

    def get_query_data(self, key: QueryKey) -> Any:
        entry = self._entries.get(normalize_key(key))
        return entry.data if entry else None

    def get_query_state(self, key: QueryKey) -> QueryResult | None:
        entry = self._entries.get(normalize_key(key))
        if entry is None:
            return None
        return QueryResult(entry.status, entry.data, entry.error, entry.updated_at)

    def is_invalidated(self, key: QueryKey) -> bool:
        entry = self._entries.get(normalize_key(key))
        return entry is not None and entry.invalidated

    def keys(self, prefix: QueryKey = ()) -> list[QueryKey]:
        """Normalized keys under ``prefix``."""
        normalized = normalize_key(prefix)
        return [k for k in self._entries if key_matches(k, normalized)]

    # ── Writes ───────────────────────────────────────────────────────

    def set_query_data(self, key: QueryKey, data: Any) -> None:
        """Store ``data`` as fresh. A callable receives the current data and returns the new value."""
        normalized = normalize_key(key)
        entry = self._entries.setdefault(normalized, _Entry(key=normalized))
        entry.data = data(entry.data) if callable(data) else data
        entry.status = QueryStatus.SUCCESS
        entry.error = None
        entry.updated_at = self._clock()
        entry.last_used = entry.updated_at
        entry.invalidated = False
        entry.version += 1

    def invalidate_queries(self, prefix: QueryKey = ()) -> int:
        """Mark matching entries stale so their next read refetches."""
        matched = 0
        for key in self.keys(prefix):
            self._entries[key].invalidated = True
            matched += 1
        logger.debug("Invalidated %d queries under %s", matched, prefix)
        return matched

    def remove_queries(self, prefix: QueryKey = ()) -> int:
        """Drop matching entries entirely."""
        keys = self.keys(prefix)
        for key in keys:
            del self._entries[key]
        logger.debug("Removed %d queries under %s", len(keys), prefix)
        return len(keys)

    def clear(self) -> None:
        self._entries.clear()

    def garbage_collect(self) -> int:
        """Evict idle entries not read for ``gc_time`` seconds."""
        cutoff = self._clock() - self._gc_time
        stale = [k for k, e in self._entries.items() if (e.task is None or e.task.done()) and e.last_used < cutoff]
        for key in stale:
            del self._entries[key]
        if stale:
            logger.debug("Garbage-collected %d queries", len(stale))
        return len(stale)

    def __len__(self) -> int:
        return len(self._entries)

    # ── Internals ────────────────────────────────────────────────────

    def _is_fresh(self, entry: _Entry, stale_time: float) -> bool:
        if entry.status != QueryStatus.SUCCESS or entry.invalidated or entry.updated_at is None:
            return False
        return self._clock() - entry.updated_at < stale_time

    def _result(self, entry: _Entry, options: QueryOptions, status: QueryStatus | None = None) -> QueryResult:
        data = entry.data
        if data is not None and options.select is not None:
            data = options.select(data)
        return QueryResult(status or entry.status, data, entry.error, entry.updated_at)

    async def _run(self, entry: _Entry, fn: QueryFn, options: QueryOptions) -> None:
        retries = self._retry if options.retry is None else options.retry
        delay = self._retry_delay if options.retry_delay is None else options.retry_delay
        started_at = entry.version
        attempt = 0
        while True:
            try:
                data = await fn()
            except Exception as exc:
                retryable = getattr(exc, "retryable", True)
                if attempt >= retries or not retryable:
                    logger.debug("Query %s failed after %d attempt(s): %s", entry.key, attempt + 1, exc)
                    entry.status = QueryStatus.ERROR
                    entry.error = exc
                    return
                wait = delay * (2 ** attempt)
                attempt += 1
                logger.debug("Retrying %s in %.2fs (attempt %d)", entry.key, wait, attempt + 1)
                await asyncio.sleep(wait)
                continue
            break

        if self._reject_stale_writes and entry.version != started_at:
            logger.info("Discarding stale fetch result for %s", entry.key)
            entry.status = QueryStatus.SUCCESS if entry.updated_at is not None else QueryStatus.IDLE
            return
        entry.data = data
        entry.status = QueryStatus.SUCCESS
        entry.error = None
        entry.updated_at = self._clock()
        entry.invalidated = False
        entry.version += 1
