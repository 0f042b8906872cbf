"""Security hooks — audit trail, alerts, compliance and encryption status."""

from typing import Any

from ibms.application.hooks.base import MINUTE, HookBase, HookContext, clean_filters
from ibms.application.query import Mutation, QueryKeys, QueryResult
from ibms.application.schemas import to_payload


def _compliance_message(result: Any) -> str:
    if isinstance(result, dict) and result.get("score") is not None:
        return f"Compliance check completed. Score: {result['score']}%"
    return "Compliance check completed"


class SecurityHooks(HookBase):
    def __init__(self, ctx: HookContext):
        super().__init__(ctx, QueryKeys("security"))

    async def use_audit_logs(self, filters: Any = None) -> QueryResult:
        params = clean_filters(filters)
        return await self.query(
            self.keys.scoped("audit-logs", params),
            lambda: self.api.get("/security/audit-logs", params),
            stale_time=1 * MINUTE,
            paginated=True,
        )

    async def use_alerts(self, filters: Any = None) -> QueryResult:
        params = clean_filters(filters)
        return await self.query(
            self.keys.scoped("alerts", params),
            lambda: self.api.get("/security/alerts", params),
            stale_time=30.0,
            paginated=True,
        )

    async def use_compliance_reports(self) -> QueryResult:
        return await self.query(
            self.keys.scoped("compliance"),
            lambda: self.api.get("/security/compliance-reports"),
            stale_time=5 * MINUTE,
            paginated=True,
        )

    async def use_stats(self) -> QueryResult:
        return await self.query(
            self.keys.scoped("stats"),
            lambda: self.api.get("/security/stats"),
            stale_time=1 * MINUTE,
        )

    async def use_encryption_status(self) -> QueryResult:
        return await self.query(
            self.keys.scoped("encryption"),
            lambda: self.api.get("/security/encryption-status"),
            stale_time=10 * MINUTE,
        )

    def use_create_audit_log(self) -> Mutation:
        """Variables: ``AuditLogCreate | dict``. Recorded silently."""
        return self.mutation(
            lambda entry: self.api.post("/security/audit-logs", to_payload(entry)),
            success=None,
            failure="Failed to record audit log",
            invalidate=(self.keys.scoped("audit-logs"), self.keys.scoped("stats")),
        )

    def use_update_alert_status(self) -> Mutation:
        """Variables: ``{"id", "status"}``."""
        return self.mutation(
            lambda v: self.api.patch(f"/security/alerts/{v['id']}/status", {"status": v["status"]}),
            success="Alert status updated",
            failure="Failed to update alert status",
            invalidate=(self.keys.scoped("alerts"), self.keys.scoped("stats")),
        )

    def use_run_compliance_check(self) -> Mutation:
        """Variables: ignored."""
        return self.mutation(
            lambda _v: self.api.post("/security/compliance-check"),
            success=_compliance_message,
            failure="Compliance check failed",
            invalidate=(self.keys.scoped("compliance"), self.keys.scoped("stats")),
        )

    def use_export_report(self) -> Mutation:
        """Variables: ``SecurityExportRequest | dict``."""
        return self.mutation(
            lambda request: self.api.post("/security/export", to_payload(request)),
            success="Security report exported successfully",
            failure="Failed to export security report",
        )
