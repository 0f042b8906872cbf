"""Employee hooks — CRUD, status and performance updates, reference data."""

from typing import Any

from ibms.application.hooks.base import MINUTE, HookContext, ResourceApi, ResourceHooks
from ibms.application.query import Mutation, QueryResult
from ibms.application.schemas import to_payload

REFERENCE_STALE_TIME = 10 * MINUTE


class EmployeeHooks(ResourceHooks):
    def __init__(self, ctx: HookContext):
        super().__init__(ctx, entity="employees", label="Employee", resource=ResourceApi.rest(ctx.api, "/employees"))

    async def use_stats(self, filters: Any = None) -> QueryResult:
        return await self.query(
            self.keys.scoped("stats"),
            lambda: self.api.get("/employees/stats"),
            stale_time=5 * MINUTE,
        )

    async def use_departments(self) -> QueryResult:
        return await self.query(
            self.keys.scoped("departments"),
            lambda: self.api.get("/employees/departments"),
            stale_time=REFERENCE_STALE_TIME,
        )

    async def use_designations(self) -> QueryResult:
        return await self.query(
            self.keys.scoped("designations"),
            lambda: self.api.get("/employees/designations"),
            stale_time=REFERENCE_STALE_TIME,
        )

    def use_update_status(self) -> Mutation:
        """Variables: ``{"id", "status"}``."""
        return self.record_mutation(
            lambda v: self.api.patch(f"/employees/{v['id']}/status", {"status": v["status"]}),
            success="Employee status updated successfully",
            failure="Failed to update employee status",
        )

    def use_update_performance(self) -> Mutation:
        """Variables: ``{"id", "performance": PerformanceUpdate | dict}``."""
        return self.record_mutation(
            lambda v: self.api.patch(f"/employees/{v['id']}/performance", to_payload(v["performance"])),
            success="Performance updated successfully",
            failure="Failed to update performance",
        )
