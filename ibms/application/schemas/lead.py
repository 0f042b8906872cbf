"""Pydantic DTOs for the Lead feature."""

from typing import Literal

from pydantic import Field, field_validator

from ibms.application.schemas.common import CamelModel
from ibms.domain.validators import validate_email

LeadStatus = Literal["new", "call_followup", "unreachable", "unqualified", "convert", "ready_for_quote"]
LeadPriority = Literal["low", "medium", "high"]


class LeadCreate(CamelModel):
    prospect: str = Field(..., min_length=1, examples=["Sunrise Traders"])
    contact_person: str | None = None
    contact_number: str | None = None
    email: str | None = None
    source: str | None = None
    consultant: str | None = None
    priority: LeadPriority = "medium"
    territory: str | None = None
    notes: str | None = None

    @field_validator("email")
    @classmethod
    def _email(cls, value: str | None) -> str | None:
        if value and not validate_email(value):
            raise ValueError("Invalid email address")
        return value


class LeadUpdate(CamelModel):
    prospect: str | None = Field(None, min_length=1)
    status: LeadStatus | None = None
    priority: LeadPriority | None = None
    lead_score: int | None = Field(None, ge=0, le=100)
    conversion_probability: int | None = Field(None, ge=0, le=100)
    notes: str | None = None


class LeadFollowup(CamelModel):
    followup_date: str
    followup_time: str | None = None


class LeadActivityCreate(CamelModel):
    type: str = Field(..., examples=["call"])
    description: str
    outcome: str | None = None
