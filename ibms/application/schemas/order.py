"""Pydantic DTOs for the Order feature."""

from typing import Literal

from pydantic import Field

from ibms.application.schemas.common import CamelModel

OrderStatus = Literal["pending", "processing", "completed", "cancelled"]
PaymentStatus = Literal["unpaid", "partial", "paid"]


class OrderItemCreate(CamelModel):
    ad_medium: str | None = None
    ad_type: str | None = None
    ad_category: str | None = None
    ad_size: str | None = None
    publish_date: str | None = None
    quantity: float = Field(1, gt=0)
    rate_per_unit: float = Field(..., ge=0)
    discount_amount: float = Field(0, ge=0)
    gst_percentage: float = Field(18, ge=0, le=100)


class OrderCreate(CamelModel):
    client_id: str = Field(..., examples=["1"])
    order_type: str = "advertisement"
    items: list[OrderItemCreate] = Field(default_factory=list)
    discount: float = Field(0, ge=0)
    remarks: str | None = None


class OrderUpdate(CamelModel):
    """Edit form, all fields optional."""

    status: OrderStatus | None = None
    remarks: str | None = None
    discount: float | None = Field(None, ge=0)


class OrderStatusUpdate(CamelModel):
    status: OrderStatus


class PaymentCreate(CamelModel):
    amount: float = Field(..., gt=0)
    method: str | None = Field(None, examples=["UPI"])
    reference: str | None = None
