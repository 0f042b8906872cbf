"""Shared base models and list filters."""

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake-case attributes, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class ListFilters(CamelModel):
    """Filters accepted by every list endpoint; entity filters ride along as extras."""

    search: str | None = None
    status: str | None = None
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1, le=100)
    sort_by: str | None = None
    sort_order: Literal["asc", "desc"] | None = None


def to_payload(value: BaseModel | Mapping[str, Any] | None, *, partial: bool = False) -> dict[str, Any]:
    """Wire dict for a form model or a plain mapping."""
    if value is None:
        return {}
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, exclude_none=True, exclude_unset=partial)
    return dict(value)
