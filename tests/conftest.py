"""Shared fixtures — an in-process demo stack with no latency."""

import pytest

from ibms.application.hooks import HookContext
from ibms.application.query import QueryClient
from ibms.application.services import ApiClient
from ibms.infrastructure.gateways import MockGateway
from ibms.infrastructure.mock import MockBackend
from ibms.infrastructure.notifications import ToastNotifier
from ibms.infrastructure.storage import InMemoryStorage


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def backend() -> MockBackend:
    return MockBackend()


@pytest.fixture
def api(backend: MockBackend, storage: InMemoryStorage) -> ApiClient:
    return ApiClient(MockGateway(backend, delay_range=(0, 0)), storage)


@pytest.fixture
def notifier() -> ToastNotifier:
    return ToastNotifier()


@pytest.fixture
def query_client() -> QueryClient:
    return QueryClient(retry=0)


@pytest.fixture
def ctx(api: ApiClient, query_client: QueryClient, notifier: ToastNotifier) -> HookContext:
    return HookContext(api=api, query_client=query_client, notifier=notifier)
