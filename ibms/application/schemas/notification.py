"""Pydantic DTOs for the Notification and Communication features."""

from typing import Literal

from pydantic import BaseModel, Field

from ibms.application.schemas.common import CamelModel

Priority = Literal["low", "medium", "high"]


class NotificationSend(BaseModel):
    channel: str | list[str]
    recipients: list[str] = Field(..., min_length=1)
    message: str = Field(..., min_length=1)
    subject: str | None = None
    type: str = "system"
    priority: Priority = "medium"


class TemplateCreate(CamelModel):
    name: str = Field(..., min_length=1)
    type: str
    subject: str | None = None
    content: str = ""
    channels: list[str] = Field(default_factory=list)
    variables: list[str] = Field(default_factory=list)
    is_active: bool = True


class MessageSend(BaseModel):
    channel: str = Field(..., examples=["email"])
    recipient: str
    message: str = Field(..., min_length=1)
    subject: str | None = None
