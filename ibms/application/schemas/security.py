"""Pydantic DTOs for the Security feature."""

from typing import Literal

from pydantic import Field

from ibms.application.schemas.common import CamelModel

Severity = Literal["low", "medium", "high", "critical"]


class AuditLogCreate(CamelModel):
    action: str = Field(..., examples=["LOGIN"])
    resource: str
    details: str | None = None
    severity: Severity = "low"
    user_name: str | None = None
    ip_address: str | None = None


class AlertStatusUpdate(CamelModel):
    status: Literal["open", "investigating", "resolved"]


class SecurityExportRequest(CamelModel):
    type: str = "full"
    format: Literal["pdf", "csv", "json"] = "pdf"
    date_range: str = "30d"
