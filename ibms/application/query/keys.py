"""Cache-key hierarchy shared by every entity.

    (entity,)                        everything for the entity
    (entity, "list", {filters})      one list per filter combination
    (entity, "detail", id)           one record
"""

import json
from typing import Any, Mapping

QueryKey = tuple[Any, ...]


def _freeze(part: Any) -> Any:
    if isinstance(part, Mapping):
        return "json:" + json.dumps(part, sort_keys=True, default=str)
    if isinstance(part, (list, tuple)):
        return tuple(_freeze(p) for p in part)
    return part


def normalize_key(key: QueryKey) -> QueryKey:
    """Hashable form of ``key``; equal filter dicts produce equal keys."""
    return tuple(_freeze(part) for part in key)


def key_matches(key: QueryKey, prefix: QueryKey) -> bool:
    """True when normalized ``key`` starts with normalized ``prefix``."""
    return key[: len(prefix)] == prefix


class QueryKeys:
    """Key factory for one entity namespace."""

    def __init__(self, entity: str):
        self.entity = entity

    @property
    def all(self) -> QueryKey:
        return (self.entity,)

    def lists(self) -> QueryKey:
        return (self.entity, "list")

    def list(self, filters: Mapping[str, Any] | None = None) -> QueryKey:
        return (self.entity, "list", dict(filters or {}))

    def details(self) -> QueryKey:
        return (self.entity, "detail")

    def detail(self, entity_id: Any) -> QueryKey:
        return (self.entity, "detail", str(entity_id))

    def scoped(self, *parts: Any) -> QueryKey:
        """Entity-specific keys such as ``("leads", "stats", {...})``."""
        return (self.entity, *parts)
