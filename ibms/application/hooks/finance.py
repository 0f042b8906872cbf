"""Finance hooks — transactions (CRUD), summary, reports, invoices and overview."""

from typing import Any

from ibms.application.hooks.base import LIST_STALE_TIME, MINUTE, HookContext, ResourceApi, ResourceHooks, clean_filters
from ibms.application.query import Mutation, QueryResult


class FinanceHooks(ResourceHooks):
    """Lists and details are transactions; the rest of the namespace holds reports."""

    def __init__(self, ctx: HookContext):
        super().__init__(
            ctx, entity="finance", label="Transaction", resource=ResourceApi.rest(ctx.api, "/finance/transactions")
        )

    async def use_stats(self, filters: Any = None) -> QueryResult:
        """Income/expense/GST summary."""
        return await self.query(
            self.keys.scoped("stats"),
            lambda: self.api.get("/finance/reports/summary"),
            stale_time=5 * MINUTE,
        )

    async def use_reports(self, report_type: str, params: Any = None) -> QueryResult:
        cleaned = clean_filters(params)
        return await self.query(
            self.keys.scoped("reports", report_type, cleaned),
            lambda: self.api.get(f"/finance/reports/{report_type}", cleaned),
            stale_time=5 * MINUTE,
        )

    async def use_overview(self) -> QueryResult:
        return await self.query(
            self.keys.scoped("overview"),
            lambda: self.api.get("/finance/overview"),
            stale_time=5 * MINUTE,
        )

    async def use_invoices(self, filters: Any = None) -> QueryResult:
        params = clean_filters(filters)
        return await self.query(
            self.keys.scoped("invoices", params),
            lambda: self.api.get("/finance/invoices", params),
            stale_time=LIST_STALE_TIME,
            paginated=True,
        )

    def use_generate_invoice(self) -> Mutation:
        """Variables: order number."""
        return self.mutation(
            lambda order_number: self.api.post(f"/finance/invoices/generate/{order_number}"),
            success="Invoice generated successfully",
            failure="Failed to generate invoice",
            invalidate=(self.keys.scoped("invoices"), self.keys.scoped("overview")),
        )
