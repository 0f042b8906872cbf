"""Dashboard hooks — short-lived summary queries and the combined view."""

import asyncio
from typing import Any

from ibms.application.hooks.base import MINUTE, HookBase, HookContext, clean_filters
from ibms.application.query import QueryKeys, QueryResult, QueryStatus


class DashboardHooks(HookBase):
    def __init__(self, ctx: HookContext):
        super().__init__(ctx, QueryKeys("dashboard"))

    async def use_stats(self, filters: Any = None) -> QueryResult:
        params = clean_filters(filters)
        return await self.query(
            self.keys.scoped("stats", params),
            lambda: self.api.get("/dashboard/stats", params),
            stale_time=1 * MINUTE,
        )

    async def use_recent_activity(self, limit: int = 10) -> QueryResult:
        return await self.query(
            self.keys.scoped("activity", limit),
            lambda: self.api.get("/dashboard/activity", {"limit": limit}),
            stale_time=30.0,
        )

    async def use_revenue_chart(self, filters: Any = None) -> QueryResult:
        params = clean_filters(filters)
        return await self.query(
            self.keys.scoped("revenue-chart", params),
            lambda: self.api.get("/dashboard/revenue-chart", params),
            stale_time=2 * MINUTE,
        )

    async def use_top_clients(self, filters: Any = None) -> QueryResult:
        params = clean_filters(filters)
        return await self.query(
            self.keys.scoped("top-clients", params),
            lambda: self.api.get("/dashboard/top-clients", params),
            stale_time=5 * MINUTE,
        )

    async def use_dashboard_data(self, filters: Any = None) -> dict[str, Any]:
        """All four panels fetched concurrently, with combined loading/error flags."""
        stats, activity, chart, top = await asyncio.gather(
            self.use_stats(filters),
            self.use_recent_activity(),
            self.use_revenue_chart(filters),
            self.use_top_clients(filters),
        )
        results = (stats, activity, chart, top)
        return {
            "stats": stats.data,
            "activity": activity.data,
            "revenueChart": chart.data,
            "topClients": top.data,
            "is_loading": any(r.status == QueryStatus.LOADING for r in results),
            "is_error": any(r.is_error for r in results),
            "errors": [r.error for r in results if r.error is not None],
        }
