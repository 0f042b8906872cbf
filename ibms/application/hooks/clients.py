"""Client hooks — CRUD plus search and list-derived stats."""

from typing import Any

from ibms.application.hooks.base import MINUTE, HookContext, ResourceApi, ResourceHooks
from ibms.application.query import QueryResult
from ibms.application.schemas import Client


def present_client(record: dict[str, Any]) -> dict[str, Any]:
    """Backend record plus the ``name``/``phone``/``email``/``createdAt`` aliases."""
    return Client.model_validate(record).model_dump(by_alias=True)


def client_stats(page: dict[str, Any]) -> dict[str, int]:
    clients = page["data"]
    return {
        "total": page["total"],
        "active": sum(1 for c in clients if c.get("status") == "active"),
        "inactive": sum(1 for c in clients if c.get("status") == "inactive"),
    }


class ClientHooks(ResourceHooks):
    def __init__(self, ctx: HookContext):
        super().__init__(
            ctx,
            entity="clients",
            label="Client",
            resource=ResourceApi.rest(ctx.api, "/clients"),
            item_select=present_client,
            stats=client_stats,
        )

    async def use_search(self, query: str) -> QueryResult:
        """Enabled only once the query has at least two characters."""
        return await self.query(
            self.keys.scoped("search", query),
            lambda: self.api.get("/clients/search", {"q": query}),
            stale_time=1 * MINUTE,
            enabled=len(query or "") >= 2,
            select=lambda records: [present_client(r) for r in records],
        )
