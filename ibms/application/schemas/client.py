"""Pydantic DTOs for the Client feature."""

from typing import Literal

from pydantic import ConfigDict, Field, computed_field, field_validator

from ibms.application.schemas.common import CamelModel
from ibms.domain.validators import validate_email, validate_gst, validate_pan, validate_phone

ClientStatus = Literal["active", "inactive"]


def _check_optional(value: str | None, validator, label: str) -> str | None:
    if value in (None, ""):
        return value
    if not validator(value):
        raise ValueError(f"Invalid {label}")
    return value


class ClientCreate(CamelModel):
    """Onboarding form."""

    client_name: str = Field(..., min_length=1, max_length=255, examples=["Acme Corporation"])
    client_contact: str = Field(..., examples=["9876543210"])
    client_email: str | None = Field(None, examples=["contact@acme.com"])
    address: str | None = None
    gst: str | None = Field(None, examples=["29ABCDE1234F1Z5"])
    pan: str | None = Field(None, examples=["ABCDE1234F"])
    source: str | None = None
    consultant_id: int | None = None
    status: ClientStatus = "active"

    @field_validator("client_contact")
    @classmethod
    def _phone(cls, value: str) -> str:
        if not validate_phone(value):
            raise ValueError("Invalid phone number")
        return value

    @field_validator("client_email")
    @classmethod
    def _email(cls, value: str | None) -> str | None:
        return _check_optional(value, validate_email, "email address")

    @field_validator("gst")
    @classmethod
    def _gst(cls, value: str | None) -> str | None:
        return _check_optional(value, validate_gst, "GST number")

    @field_validator("pan")
    @classmethod
    def _pan(cls, value: str | None) -> str | None:
        return _check_optional(value, validate_pan, "PAN number")


class ClientUpdate(ClientCreate):
    """Edit form, all fields optional."""

    client_name: str | None = Field(None, min_length=1, max_length=255)
    client_contact: str | None = None
    status: ClientStatus | None = None

    @field_validator("client_contact")
    @classmethod
    def _phone(cls, value: str | None) -> str | None:
        return _check_optional(value, validate_phone, "phone number")


class Client(CamelModel):
    """Client as shown in the UI: backend fields plus read-only aliases."""

    model_config = ConfigDict(extra="ignore")

    id: str
    client_name: str = ""
    client_contact: str = ""
    client_email: str = ""
    address: str = ""
    gst: str = ""
    pan: str = ""
    source: str | None = None
    consultant_id: int | None = None
    status: str = "active"
    entry_date: str | None = None
    entry_user: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, value: object) -> str:
        return str(value)

    @computed_field
    @property
    def name(self) -> str:
        return self.client_name

    @computed_field
    @property
    def phone(self) -> str:
        return self.client_contact

    @computed_field
    @property
    def email(self) -> str:
        return self.client_email

    @computed_field(alias="createdAt")
    @property
    def created_at(self) -> str | None:
        return self.entry_date
