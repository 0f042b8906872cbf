"""Composition root — wires infrastructure adapters to the application layer.

``build_app_context`` assembles one process-wide context (gateway, API
client, query cache, notifier, settings manager and every entity hook).
The FastAPI dependencies at the bottom serve the demo backend.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache

import httpx

from ibms.application.hooks import (
    AnalyticsHooks,
    AuthHooks,
    ClientHooks,
    CommunicationHooks,
    ConsultantHooks,
    DashboardHooks,
    DocumentHooks,
    EmployeeHooks,
    FinanceHooks,
    HookContext,
    LeadHooks,
    NotificationHooks,
    OrderHooks,
    SecurityHooks,
)
from ibms.application.interfaces import BackendGateway, KeyValueStorage, Notifier
from ibms.application.query import QueryClient
from ibms.application.services import ApiClient, SettingsManager
from ibms.config import Settings, get_settings
from ibms.infrastructure.gateways import HttpGateway, MockGateway
from ibms.infrastructure.mock import MockBackend
from ibms.infrastructure.notifications import ToastNotifier
from ibms.infrastructure.storage import JsonFileStorage, LocalStorageSettingsStorage

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Everything the UI layer talks to."""

    settings: Settings
    api: ApiClient
    query_client: QueryClient
    notifier: Notifier
    settings_manager: SettingsManager
    auth: AuthHooks
    clients: ClientHooks
    orders: OrderHooks
    leads: LeadHooks
    employees: EmployeeHooks
    consultants: ConsultantHooks
    documents: DocumentHooks
    communications: CommunicationHooks
    notifications: NotificationHooks
    security: SecurityHooks
    analytics: AnalyticsHooks
    finance: FinanceHooks
    dashboard: DashboardHooks

    async def aclose(self) -> None:
        await self.api.aclose()


def build_gateway(
    settings: Settings,
    storage: KeyValueStorage,
    *,
    backend: MockBackend | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> BackendGateway:
    """Mock gateway when no backend is configured (or in development), HTTP otherwise."""
    if settings.mock_mode:
        logger.info("🎭 Running in DEMO mode with mock data")
        return MockGateway(backend or MockBackend(settings.default_tenant), delay_range=settings.mock_delay_range)
    logger.info("🔗 Connected to backend API at %s", settings.api_base_url)
    return HttpGateway(
        settings.api_base_url,
        storage,
        token_key=settings.token_storage_key,
        timeout=settings.http_timeout_seconds,
        http_client=http_client,
    )


def build_app_context(
    settings: Settings | None = None,
    *,
    storage: KeyValueStorage | None = None,
    gateway: BackendGateway | None = None,
    notifier: Notifier | None = None,
    query_client: QueryClient | None = None,
) -> AppContext:
    settings = settings or get_settings()
    storage = storage or JsonFileStorage(settings.storage_file)
    gateway = gateway or build_gateway(settings, storage)
    notifier = notifier or ToastNotifier()
    query_client = query_client or QueryClient(
        retry=settings.query_retry,
        retry_delay=settings.query_retry_delay_seconds,
        gc_time=settings.query_gc_seconds,
    )

    api = ApiClient(
        gateway,
        storage,
        default_tenant=settings.default_tenant,
        tenant_key=settings.tenant_storage_key,
        token_key=settings.token_storage_key,
    )
    settings_manager = SettingsManager(LocalStorageSettingsStorage(storage, settings.settings_storage_key))
    ctx = HookContext(api=api, query_client=query_client, notifier=notifier)

    return AppContext(
        settings=settings,
        api=api,
        query_client=query_client,
        notifier=notifier,
        settings_manager=settings_manager,
        auth=AuthHooks(ctx),
        clients=ClientHooks(ctx),
        orders=OrderHooks(ctx),
        leads=LeadHooks(ctx),
        employees=EmployeeHooks(ctx),
        consultants=ConsultantHooks(ctx),
        documents=DocumentHooks(ctx),
        communications=CommunicationHooks(ctx),
        notifications=NotificationHooks(ctx),
        security=SecurityHooks(ctx),
        analytics=AnalyticsHooks(ctx),
        finance=FinanceHooks(ctx),
        dashboard=DashboardHooks(ctx),
    )


# ── FastAPI dependencies (demo backend server) ───────────────────────

@lru_cache
def get_mock_backend() -> MockBackend:
    """Process-wide demo backend shared by all requests."""
    return MockBackend(get_settings().default_tenant)
