"""Unit tests for the QueryClient — caching, dedup, retry and invalidation."""

import asyncio

import pytest

from ibms.application.query import QueryClient, QueryKeys, QueryOptions, QueryStatus
from ibms.domain.exceptions import ApiError, BackendNotConfiguredError


# ── Helpers ──


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class CountingFetch:
    """Fetch function that returns successive values and records calls."""

    def __init__(self, *outcomes):
        self._outcomes = list(outcomes)
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        outcome = self._outcomes[min(self.calls, len(self._outcomes)) - 1]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


keys = QueryKeys("clients")


# ── Tests ──


@pytest.mark.asyncio
async def test_fresh_entry_is_served_from_cache():
    clock = FakeClock()
    client = QueryClient(clock=clock)
    fetch = CountingFetch("first", "second")

    first = await client.fetch_query(keys.list(), fetch, QueryOptions(stale_time=60))
    clock.now += 30
    second = await client.fetch_query(keys.list(), fetch, QueryOptions(stale_time=60))

    assert first.is_success and first.data == "first"
    assert second.data == "first"
    assert fetch.calls == 1


@pytest.mark.asyncio
async def test_stale_entry_is_refetched():
    clock = FakeClock()
    client = QueryClient(clock=clock)
    fetch = CountingFetch("first", "second")

    await client.fetch_query(keys.list(), fetch, QueryOptions(stale_time=60))
    clock.now += 61
    result = await client.fetch_query(keys.list(), fetch, QueryOptions(stale_time=60))

    assert result.data == "second"
    assert fetch.calls == 2


@pytest.mark.asyncio
async def test_disabled_query_never_fetches():
    client = QueryClient()
    fetch = CountingFetch("data")

    result = await client.fetch_query(keys.detail(""), fetch, QueryOptions(enabled=False))

    assert result.is_idle
    assert result.data is None
    assert fetch.calls == 0


@pytest.mark.asyncio
async def test_equal_filters_share_one_entry():
    client = QueryClient()
    fetch = CountingFetch("page")

    await client.fetch_query(keys.list({"page": 1, "status": "active"}), fetch, QueryOptions(stale_time=60))
    await client.fetch_query(keys.list({"status": "active", "page": 1}), fetch, QueryOptions(stale_time=60))

    assert fetch.calls == 1
    assert len(client) == 1


@pytest.mark.asyncio
async def test_concurrent_reads_share_one_request():
    client = QueryClient()
    release = asyncio.Event()
    calls = 0

    async def fetch():
        nonlocal calls
        calls += 1
        await release.wait()
        return "shared"

    pending = asyncio.gather(
        client.fetch_query(keys.list(), fetch),
        client.fetch_query(keys.list(), fetch),
    )
    await asyncio.sleep(0)
    release.set()
    first, second = await pending

    assert calls == 1
    assert first.data == second.data == "shared"


@pytest.mark.asyncio
async def test_retryable_errors_are_retried():
    client = QueryClient(retry=2, retry_delay=0)
    fetch = CountingFetch(ApiError("down", status_code=503), ApiError("down", status_code=503), "ok")

    result = await client.fetch_query(keys.list(), fetch)

    assert result.is_success
    assert result.data == "ok"
    assert fetch.calls == 3


@pytest.mark.asyncio
async def test_client_errors_are_not_retried():
    client = QueryClient(retry=3, retry_delay=0)
    fetch = CountingFetch(ApiError("Client with id '9' not found", status_code=404))

    result = await client.fetch_query(keys.detail("9"), fetch)

    assert result.is_error
    assert result.error.status_code == 404
    assert fetch.calls == 1


@pytest.mark.asyncio
async def test_backend_not_configured_is_not_retried():
    client = QueryClient(retry=3, retry_delay=0)
    fetch = CountingFetch(BackendNotConfiguredError())

    result = await client.fetch_query(keys.list(), fetch)

    assert result.is_error
    assert fetch.calls == 1


@pytest.mark.asyncio
async def test_error_after_retries_exhausted():
    client = QueryClient(retry=1, retry_delay=0)
    fetch = CountingFetch(ApiError("Network error", status_code=None))

    result = await client.fetch_query(keys.list(), fetch)

    assert result.status == QueryStatus.ERROR
    assert fetch.calls == 2


@pytest.mark.asyncio
async def test_invalidate_by_prefix_only_touches_matching_keys():
    client = QueryClient()
    client.set_query_data(keys.list({"page": 1}), "page-1")
    client.set_query_data(keys.list({"page": 2}), "page-2")
    client.set_query_data(keys.detail("1"), "client-1")
    client.set_query_data(("orders", "list", {}), "orders")

    matched = client.invalidate_queries(keys.lists())

    assert matched == 2
    assert client.is_invalidated(keys.list({"page": 1}))
    assert client.is_invalidated(keys.list({"page": 2}))
    assert not client.is_invalidated(keys.detail("1"))
    assert not client.is_invalidated(("orders", "list", {}))


@pytest.mark.asyncio
async def test_invalidated_entry_refetches_despite_stale_time():
    client = QueryClient()
    fetch = CountingFetch("v1", "v2")

    await client.fetch_query(keys.list(), fetch, QueryOptions(stale_time=600))
    client.invalidate_queries(keys.all)
    result = await client.fetch_query(keys.list(), fetch, QueryOptions(stale_time=600))

    assert result.data == "v2"
    assert not client.is_invalidated(keys.list())


def test_set_query_data_with_updater():
    client = QueryClient()
    client.set_query_data(keys.detail("1"), {"id": "1", "status": "active"})

    client.set_query_data(keys.detail("1"), lambda old: {**old, "status": "inactive"})

    assert client.get_query_data(keys.detail("1")) == {"id": "1", "status": "inactive"}


def test_remove_queries():
    client = QueryClient()
    client.set_query_data(keys.detail("1"), "a")
    client.set_query_data(keys.detail("2"), "b")

    assert client.remove_queries(keys.detail("1")) == 1
    assert client.get_query_data(keys.detail("1")) is None
    assert client.get_query_state(keys.detail("1")) is None
    assert client.get_query_data(keys.detail("2")) == "b"


def test_garbage_collect_evicts_unused_entries():
    clock = FakeClock()
    client = QueryClient(gc_time=300, clock=clock)
    client.set_query_data(keys.detail("1"), "old")
    clock.now += 200
    client.set_query_data(keys.detail("2"), "recent")
    clock.now += 150

    assert client.garbage_collect() == 1
    assert client.keys() == [("clients", "detail", "2")]


@pytest.mark.asyncio
async def test_select_is_applied_on_read():
    client = QueryClient()
    fetch = CountingFetch({"data": [1, 2, 3]})

    result = await client.fetch_query(
        keys.list(), fetch, QueryOptions(select=lambda page: len(page["data"]))
    )

    assert result.data == 3
    assert client.get_query_data(keys.list()) == {"data": [1, 2, 3]}


@pytest.mark.asyncio
async def test_last_write_wins_by_default():
    client = QueryClient()
    started, release = asyncio.Event(), asyncio.Event()

    async def slow_fetch():
        started.set()
        await release.wait()
        return "fetched"

    task = asyncio.ensure_future(client.fetch_query(keys.detail("1"), slow_fetch))
    await started.wait()
    client.set_query_data(keys.detail("1"), "written")
    release.set()
    await task

    assert client.get_query_data(keys.detail("1")) == "fetched"


@pytest.mark.asyncio
async def test_stale_fetch_is_dropped_when_guard_enabled():
    client = QueryClient(reject_stale_writes=True)
    started, release = asyncio.Event(), asyncio.Event()

    async def slow_fetch():
        started.set()
        await release.wait()
        return "fetched"

    task = asyncio.ensure_future(client.fetch_query(keys.detail("1"), slow_fetch))
    await started.wait()
    client.set_query_data(keys.detail("1"), "written")
    release.set()
    result = await task

    assert client.get_query_data(keys.detail("1")) == "written"
    assert result.data == "written"
