"""Pydantic DTOs for the Finance feature."""

from typing import Literal

from pydantic import Field

from ibms.application.schemas.common import CamelModel


class TransactionCreate(CamelModel):
    type: Literal["income", "expense"]
    amount: float = Field(..., gt=0)
    amount_excluding_gst: float | None = None
    gst_amount: float | None = None
    bill_number: str | None = None
    bill_date: str | None = None
    order_number: str | None = None
    category: str | None = Field(None, examples=["Sales"])
    remarks: str | None = None


class TransactionUpdate(CamelModel):
    amount: float | None = Field(None, gt=0)
    category: str | None = None
    status: Literal["active", "cancelled"] | None = None
    remarks: str | None = None
