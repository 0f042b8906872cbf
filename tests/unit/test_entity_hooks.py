"""Unit tests for the entity-specific hooks layered on the resource contract."""

import pytest

from ibms.application.hooks import (
    AuthHooks,
    CommunicationHooks,
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
from ibms.application.query import QueryClient
from ibms.application.schemas import PaymentCreate
from ibms.application.services import ApiClient
from ibms.domain.entities import ApiResponse
from ibms.infrastructure.notifications import ToastNotifier
from ibms.infrastructure.storage import InMemoryStorage


def _messages(notifier: ToastNotifier) -> list[tuple[str, str]]:
    return [(t.kind, t.message) for t in notifier.toasts]


# ── Fakes ────────────────────────────────────────────────────────────


class ScriptedLiveGateway:
    """Live-mode gateway answering each endpoint with a canned envelope."""

    is_mock = False

    def __init__(self, responses: dict[str, ApiResponse]):
        self.responses = responses
        self.calls: list[tuple[str, str]] = []

    async def request(self, method, endpoint, *, params=None, body=None, tenant=None):
        self.calls.append((method, endpoint))
        return self.responses[endpoint]

    async def aclose(self):
        return None


def _live_context(gateway: ScriptedLiveGateway, storage: InMemoryStorage, notifier: ToastNotifier) -> HookContext:
    return HookContext(api=ApiClient(gateway, storage), query_client=QueryClient(retry=0), notifier=notifier)


# ── Orders ──


@pytest.mark.asyncio
async def test_order_stats_from_list(ctx: HookContext):
    stats = (await OrderHooks(ctx).use_stats()).data

    assert stats["total"] == 5
    assert (stats["pending"], stats["processing"], stats["completed"], stats["cancelled"]) == (1, 2, 1, 1)
    assert stats["paidAmount"] == 17030.0
    assert stats["balanceAmount"] == 47280.0


@pytest.mark.asyncio
async def test_order_detail_keyed_by_order_number(ctx: HookContext, query_client: QueryClient):
    hooks = OrderHooks(ctx)

    created = await hooks.use_create().mutate_async({"clientId": "2", "items": []})

    assert created["orderNumber"] == "ORD-2024-006"
    assert query_client.get_query_data(hooks.keys.detail("ORD-2024-006")) == created


@pytest.mark.asyncio
async def test_add_payment_refreshes_order_and_finance(
    ctx: HookContext, query_client: QueryClient, notifier: ToastNotifier
):
    orders, finance = OrderHooks(ctx), FinanceHooks(ctx)
    await finance.use_list()
    await orders.use_list()

    order = await orders.use_add_payment().mutate_async(
        {"id": "ORD-2024-003", "payment": PaymentCreate(amount=776, method="UPI")}
    )

    assert order["paidAmount"] == 776.0
    assert query_client.get_query_data(orders.keys.detail("ORD-2024-003"))["balanceAmount"] == 3000.0
    assert query_client.is_invalidated(orders.keys.list())
    assert query_client.is_invalidated(finance.keys.list())
    assert _messages(notifier) == [("success", "Payment added successfully")]


@pytest.mark.asyncio
async def test_order_status_update(ctx: HookContext, query_client: QueryClient):
    hooks = OrderHooks(ctx)

    await hooks.use_update_status().mutate_async({"id": "ORD-2024-003", "status": "processing"})

    assert query_client.get_query_data(hooks.keys.detail("ORD-2024-003"))["status"] == "processing"


# ── Leads ──


@pytest.mark.asyncio
async def test_lead_status_change_invalidates_server_stats(ctx: HookContext, query_client: QueryClient):
    hooks = LeadHooks(ctx)
    before = await hooks.use_stats()

    await hooks.use_update_status().mutate_async({"id": "1", "status": "ready_for_quote"})

    assert query_client.is_invalidated(hooks.keys.scoped("stats", {}))
    after = await hooks.use_stats()
    assert after.data["byStatus"].get("ready_for_quote", 0) == before.data["byStatus"].get("ready_for_quote", 0) + 1


@pytest.mark.asyncio
async def test_lead_activity_round_trip(ctx: HookContext):
    hooks = LeadHooks(ctx)
    assert (await hooks.use_activities("1")).data == []

    await hooks.use_add_activity().mutate_async({"id": "1", "activity": {"type": "call", "description": "Intro call"}})

    activities = (await hooks.use_activities("1")).data
    assert [a["description"] for a in activities] == ["Intro call"]


# ── Auth ──


@pytest.mark.asyncio
async def test_login_caches_user_and_logout_clears_cache(
    ctx: HookContext, api: ApiClient, query_client: QueryClient, notifier: ToastNotifier
):
    hooks = AuthHooks(ctx)
    assert (await hooks.use_current_user()).is_idle

    await hooks.use_login().mutate_async({"email": "owner@acme.com", "password": "secret"})
    user = await hooks.use_current_user()

    assert api.token is not None
    assert user.data["email"] == "owner@acme.com"

    await hooks.use_logout().mutate_async(None)

    assert api.token is None
    assert len(query_client) == 0
    assert _messages(notifier) == [("success", "Welcome back!"), ("success", "Logged out successfully")]


@pytest.mark.asyncio
async def test_failed_login_toasts_error(ctx: HookContext, notifier: ToastNotifier):
    result = await AuthHooks(ctx).use_login().mutate({"email": "owner@acme.com", "password": ""})

    assert result.is_error
    assert _messages(notifier) == [("error", "Missing required field(s): password")]


@pytest.mark.asyncio
async def test_live_login_stores_token_from_response():
    storage = InMemoryStorage()
    gateway = ScriptedLiveGateway({
        "/auth/login": ApiResponse.ok({"user": {"email": "owner@acme.com"}, "token": "live-token"}),
    })
    ctx = _live_context(gateway, storage, ToastNotifier())

    result = await AuthHooks(ctx).use_login().mutate(
        {"email": "owner@acme.com", "password": "secret", "tenant": "acme"}
    )

    assert result.is_success
    assert gateway.calls == [("POST", "/auth/login")]
    assert storage.get_item("token") == "live-token"
    assert storage.get_item("tenant") == "acme"
    assert ctx.query_client.get_query_data(("auth", "user")) == {"email": "owner@acme.com"}


@pytest.mark.asyncio
async def test_live_logout_clears_token_even_when_server_fails():
    storage = InMemoryStorage({"token": "abc"})
    notifier = ToastNotifier()
    gateway = ScriptedLiveGateway({
        "/auth/logout": ApiResponse.fail(error="Internal Server Error", message="Logout unavailable", status_code=500),
    })
    ctx = _live_context(gateway, storage, notifier)
    ctx.query_client.set_query_data(("auth", "user"), {"email": "owner@acme.com"})

    result = await AuthHooks(ctx).use_logout().mutate(None)

    assert result.is_error
    assert storage.get_item("token") is None
    assert len(ctx.query_client) == 0
    assert _messages(notifier) == [("error", "Logout unavailable")]


# ── Dashboard ──


@pytest.mark.asyncio
async def test_dashboard_data_combines_panels(ctx: HookContext):
    data = await DashboardHooks(ctx).use_dashboard_data()

    assert data["stats"]["clients"]["total"] == 5
    assert data["activity"] is not None
    assert data["revenueChart"] is not None
    assert data["topClients"] is not None
    assert not data["is_loading"]
    assert not data["is_error"]
    assert data["errors"] == []


# ── Notifications and communications ──


@pytest.mark.asyncio
async def test_mark_as_read_refreshes_inbox(ctx: HookContext, query_client: QueryClient):
    hooks = NotificationHooks(ctx)
    await hooks.use_list({"status": "unread"})

    await hooks.use_mark_as_read().mutate_async(["1", "3"])

    assert query_client.is_invalidated(hooks.keys.list({"status": "unread"}))
    assert (await hooks.use_list({"status": "unread"})).data["total"] == 0


@pytest.mark.asyncio
async def test_channel_test_toast_follows_outcome(ctx: HookContext, notifier: ToastNotifier):
    hooks = CommunicationHooks(ctx)

    await hooks.use_test_channel().mutate_async("email")
    await hooks.use_test_channel().mutate_async("sms")

    assert _messages(notifier) == [
        ("success", "Email channel test successful"),
        ("error", "SMS channel is disabled"),
    ]


@pytest.mark.asyncio
async def test_templates_live_in_their_own_namespace(ctx: HookContext, query_client: QueryClient):
    hooks = NotificationHooks(ctx)
    await hooks.use_list()
    await hooks.templates.use_list()

    await hooks.templates.use_create().mutate_async({"name": "Welcome", "type": "system"})

    assert query_client.is_invalidated(hooks.templates.keys.list())
    assert not query_client.is_invalidated(hooks.keys.list())


# ── Documents, employees, security, finance ──


@pytest.mark.asyncio
async def test_document_upload_uses_document_toasts(ctx: HookContext, notifier: ToastNotifier):
    await DocumentHooks(ctx).use_upload().mutate_async({"name": "Brief.pdf", "type": "proposal"})

    assert _messages(notifier) == [("success", "Document created successfully")]


@pytest.mark.asyncio
async def test_employee_departments(ctx: HookContext):
    departments = await EmployeeHooks(ctx).use_departments()

    assert "Finance" in departments.data


@pytest.mark.asyncio
async def test_audit_log_is_recorded_silently(ctx: HookContext, notifier: ToastNotifier):
    hooks = SecurityHooks(ctx)

    await hooks.use_create_audit_log().mutate_async({"action": "EXPORT", "resource": "Report", "details": "PDF"})

    assert notifier.toasts == []
    logs = await hooks.use_audit_logs({"search": "EXPORT"})
    assert logs.data["total"] == 1


@pytest.mark.asyncio
async def test_generate_invoice_refreshes_invoices(ctx: HookContext, query_client: QueryClient):
    hooks = FinanceHooks(ctx)
    before = await hooks.use_invoices()

    await hooks.use_generate_invoice().mutate_async("ORD-2024-003")

    assert query_client.is_invalidated(hooks.keys.scoped("invoices", {}))
    after = await hooks.use_invoices()
    assert after.data["total"] == before.data["total"] + 1


@pytest.mark.asyncio
async def test_compliance_check_toasts_score(ctx: HookContext, notifier: ToastNotifier):
    result = await SecurityHooks(ctx).use_run_compliance_check().mutate(None)

    assert result.is_success
    assert _messages(notifier) == [("success", f"Compliance check completed. Score: {result.data['score']}%")]


@pytest.mark.asyncio
async def test_compliance_check_without_score_still_succeeds():
    notifier = ToastNotifier()
    gateway = ScriptedLiveGateway({"/security/compliance-check": ApiResponse.ok("queued")})

    hooks = SecurityHooks(_live_context(gateway, InMemoryStorage(), notifier))

    result = await hooks.use_run_compliance_check().mutate(None)

    assert result.is_success
    assert _messages(notifier) == [("success", "Compliance check completed")]
