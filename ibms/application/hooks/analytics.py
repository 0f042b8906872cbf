"""Analytics hooks — read-only reports plus custom report and export actions."""

from typing import Any

from ibms.application.hooks.base import MINUTE, HookBase, HookContext, clean_filters
from ibms.application.query import Mutation, QueryKeys, QueryResult
from ibms.application.schemas import to_payload

ANALYTICS_STALE_TIME = 5 * MINUTE


class AnalyticsHooks(HookBase):
    def __init__(self, ctx: HookContext):
        super().__init__(ctx, QueryKeys("analytics"))

    async def _report(
        self, name: str, endpoint: str, params: Any = None, stale_time: float = ANALYTICS_STALE_TIME
    ) -> QueryResult:
        cleaned = clean_filters(params)
        return await self.query(
            self.keys.scoped(name, cleaned),
            lambda: self.api.get(endpoint, cleaned),
            stale_time=stale_time,
        )

    async def use_overview(self) -> QueryResult:
        return await self._report("overview", "/analytics")

    async def use_dashboard_metrics(self, period: str = "30d") -> QueryResult:
        return await self._report("dashboard-metrics", "/analytics/dashboard-metrics", {"period": period}, 2 * MINUTE)

    async def use_revenue(self, period: str = "30d", group_by: str = "month") -> QueryResult:
        return await self._report("revenue", "/analytics/revenue", {"period": period, "group_by": group_by})

    async def use_clients(self, metric: str = "acquisition") -> QueryResult:
        return await self._report("clients", "/analytics/clients", {"metric": metric})

    async def use_orders(self, group_by: str = "status") -> QueryResult:
        return await self._report("orders", "/analytics/orders", {"group_by": group_by})

    async def use_performance(self, metric: str = "efficiency") -> QueryResult:
        return await self._report("performance", "/analytics/performance", {"metric": metric})

    async def use_predictive(self, prediction_type: str = "revenue_forecast") -> QueryResult:
        return await self._report("predictive", "/analytics/predictive", {"type": prediction_type}, 10 * MINUTE)

    async def use_cohorts(self, metric: str = "retention") -> QueryResult:
        return await self._report("cohorts", "/analytics/cohorts", {"metric": metric}, 10 * MINUTE)

    async def use_funnel(self, funnel_type: str = "sales") -> QueryResult:
        return await self._report("funnel", "/analytics/funnel", {"funnel_type": funnel_type})

    async def use_segments(self, segment_by: str = "value") -> QueryResult:
        return await self._report("segments", "/analytics/segments", {"segment_by": segment_by})

    def use_custom_report(self) -> Mutation:
        """Variables: ``{"name", "metrics": [...]}``."""
        return self.mutation(
            lambda request: self.api.post("/analytics/custom-report", to_payload(request)),
            success="Custom report generated successfully",
            failure="Failed to generate custom report",
        )

    def use_export(self) -> Mutation:
        """Variables: ``{"report", "format"}``."""
        return self.mutation(
            lambda request: self.api.post("/analytics/export", to_payload(request)),
            success="Report exported successfully",
            failure="Failed to export report",
        )
