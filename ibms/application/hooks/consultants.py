"""Consultant hooks — CRUD, stats, performance, project assignment and availability."""

from typing import Any

from ibms.application.hooks.base import MINUTE, HookContext, ResourceApi, ResourceHooks
from ibms.application.query import Mutation, QueryResult
from ibms.application.schemas import to_payload


class ConsultantHooks(ResourceHooks):
    def __init__(self, ctx: HookContext):
        super().__init__(
            ctx, entity="consultants", label="Consultant", resource=ResourceApi.rest(ctx.api, "/consultants")
        )

    async def use_stats(self, filters: Any = None) -> QueryResult:
        return await self.query(
            self.keys.scoped("stats"),
            lambda: self.api.get("/consultants/stats"),
            stale_time=5 * MINUTE,
        )

    async def use_performance(
        self, consultant_id: str | None, start_date: str | None = None, end_date: str | None = None
    ) -> QueryResult:
        params = {"start_date": start_date, "end_date": end_date}
        return await self.query(
            self.keys.scoped("performance", str(consultant_id), params),
            lambda: self.api.get(f"/consultants/{consultant_id}/performance", params),
            stale_time=5 * MINUTE,
            enabled=bool(consultant_id),
        )

    def use_assign_project(self) -> Mutation:
        """Variables: ``{"id", "assignment": ProjectAssignment | dict}``."""
        def after(_assignment: Any, variables: dict[str, Any]) -> None:
            self.query_client.invalidate_queries(self.keys.detail(variables["id"]))
            self.invalidate_lists()

        return self.mutation(
            lambda v: self.api.post(f"/consultants/{v['id']}/assign-project", to_payload(v["assignment"])),
            success="Project assigned successfully",
            failure="Failed to assign project",
            after=after,
        )

    def use_update_availability(self) -> Mutation:
        """Variables: ``{"id", "availability": [AvailabilitySlot | dict, ...]}``."""
        return self.record_mutation(
            lambda v: self.api.put(
                f"/consultants/{v['id']}/availability",
                {"availability": [to_payload(slot) for slot in v["availability"]]},
            ),
            success="Availability updated successfully",
            failure="Failed to update availability",
        )
