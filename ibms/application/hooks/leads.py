"""Lead hooks — CRUD, pipeline moves, follow-ups, activities and server stats."""

from typing import Any

from ibms.application.hooks.base import MINUTE, HookContext, ResourceApi, ResourceHooks, clean_filters
from ibms.application.query import Mutation, QueryResult
from ibms.application.schemas import to_payload


class LeadHooks(ResourceHooks):
    def __init__(self, ctx: HookContext):
        super().__init__(ctx, entity="leads", label="Lead", resource=ResourceApi.rest(ctx.api, "/leads"))

    async def use_stats(self, filters: Any = None) -> QueryResult:
        """Server-side funnel statistics."""
        params = clean_filters(filters)
        return await self.query(
            self.keys.scoped("stats", params),
            lambda: self.api.get("/leads/stats", params),
            stale_time=5 * MINUTE,
        )

    async def use_activities(self, lead_id: str | None) -> QueryResult:
        return await self.query(
            self.keys.scoped("activities", str(lead_id)),
            lambda: self.api.get(f"/leads/{lead_id}/activities"),
            stale_time=1 * MINUTE,
            enabled=bool(lead_id),
        )

    def use_update_status(self) -> Mutation:
        """Variables: ``{"id", "status"}``."""
        return self.record_mutation(
            lambda v: self.api.patch(f"/leads/{v['id']}/status", {"status": v["status"]}),
            success="Lead status updated successfully",
            failure="Failed to update lead status",
        )

    def use_assign(self) -> Mutation:
        """Variables: ``{"id", "consultantId"}``."""
        return self.record_mutation(
            lambda v: self.api.patch(f"/leads/{v['id']}/assign", {"consultantId": v["consultantId"]}),
            success="Lead assigned successfully",
            failure="Failed to assign lead",
        )

    def use_schedule_followup(self) -> Mutation:
        """Variables: ``{"id", "followup": LeadFollowup | dict}``."""
        return self.record_mutation(
            lambda v: self.api.patch(f"/leads/{v['id']}/followup", to_payload(v["followup"])),
            success="Follow-up scheduled successfully",
            failure="Failed to schedule follow-up",
        )

    def use_add_activity(self) -> Mutation:
        """Variables: ``{"id", "activity": LeadActivityCreate | dict}``."""
        def after(_activity: Any, variables: dict[str, Any]) -> None:
            self.query_client.invalidate_queries(self.keys.scoped("activities", str(variables["id"])))
            self.query_client.invalidate_queries(self.keys.detail(variables["id"]))

        return self.mutation(
            lambda v: self.api.post(f"/leads/{v['id']}/activities", to_payload(v["activity"])),
            success="Activity added successfully",
            failure="Failed to add activity",
            after=after,
        )
