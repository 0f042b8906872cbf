"""Communication hooks — channels, message history, sending and templates."""

from typing import Any

from ibms.application.hooks.base import MINUTE, HookBase, HookContext, ResourceApi, ResourceHooks, clean_filters
from ibms.application.query import Mutation, QueryKeys, QueryResult
from ibms.application.schemas import to_payload


class CommunicationHooks(HookBase):
    def __init__(self, ctx: HookContext):
        super().__init__(ctx, QueryKeys("communications"))
        self.templates = ResourceHooks(
            ctx,
            entity="communication-templates",
            label="Template",
            resource=ResourceApi.rest(ctx.api, "/communications/templates"),
            list_stale_time=5 * MINUTE,
        )

    async def use_channels(self) -> QueryResult:
        return await self.query(
            self.keys.scoped("channels"),
            lambda: self.api.get("/communications/channels"),
            stale_time=5 * MINUTE,
            paginated=True,
        )

    async def use_messages(self, filters: Any = None) -> QueryResult:
        params = clean_filters(filters)
        return await self.query(
            self.keys.scoped("messages", params),
            lambda: self.api.get("/communications/messages", params),
            stale_time=1 * MINUTE,
            paginated=True,
        )

    async def use_stats(self) -> QueryResult:
        return await self.query(
            self.keys.scoped("stats"),
            lambda: self.api.get("/communications/stats"),
            stale_time=1 * MINUTE,
        )

    def use_update_channel(self) -> Mutation:
        """Variables: ``{"id", "config": dict}``."""
        return self.mutation(
            lambda v: self.api.put(f"/communications/channels/{v['id']}", to_payload(v["config"])),
            success="Channel updated successfully",
            failure="Failed to update channel",
            invalidate=(self.keys.scoped("channels"),),
        )

    def use_test_channel(self) -> Mutation:
        """Variables: channel id. The toast reports the test outcome."""
        return self.channel_test(lambda channel_id: self.api.post(f"/communications/channels/{channel_id}/test"))

    def use_send_message(self) -> Mutation:
        """Variables: ``MessageSend | dict``."""
        return self.mutation(
            lambda message: self.api.post("/communications/messages", to_payload(message)),
            success="Message sent successfully",
            failure="Failed to send message",
            invalidate=(
                self.keys.scoped("messages"),
                self.keys.scoped("stats"),
                self.keys.scoped("channels"),
            ),
        )
