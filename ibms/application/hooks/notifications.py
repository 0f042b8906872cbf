"""Notification hooks — inbox, bulk actions, sending, templates and delivery settings."""

from typing import Any

from ibms.application.hooks.base import MINUTE, HookContext, ResourceApi, ResourceHooks
from ibms.application.query import Mutation, QueryResult
from ibms.application.schemas import to_payload

INBOX_STALE_TIME = 30.0


class NotificationHooks(ResourceHooks):
    def __init__(self, ctx: HookContext):
        super().__init__(
            ctx,
            entity="notifications",
            label="Notification",
            resource=ResourceApi.rest(ctx.api, "/notifications"),
            list_stale_time=INBOX_STALE_TIME,
            detail_stale_time=INBOX_STALE_TIME,
        )
        self.templates = ResourceHooks(
            ctx,
            entity="notification-templates",
            label="Template",
            resource=ResourceApi.rest(ctx.api, "/notifications/templates"),
            list_stale_time=5 * MINUTE,
        )

    async def use_stats(self, filters: Any = None) -> QueryResult:
        return await self.query(
            self.keys.scoped("stats"),
            lambda: self.api.get("/notifications/stats"),
            stale_time=INBOX_STALE_TIME,
        )

    async def use_channels(self) -> QueryResult:
        return await self.query(
            self.keys.scoped("channels"),
            lambda: self.api.get("/notifications/channels"),
            stale_time=5 * MINUTE,
            paginated=True,
        )

    async def use_settings(self) -> QueryResult:
        return await self.query(
            self.keys.scoped("settings"),
            lambda: self.api.get("/notifications/settings"),
            stale_time=5 * MINUTE,
        )

    def use_test_channel(self) -> Mutation:
        """Variables: channel id."""
        return self.channel_test(lambda channel_id: self.api.post(f"/notifications/channels/{channel_id}/test"))

    def use_mark_as_read(self) -> Mutation:
        """Variables: list of notification ids."""
        return self.mutation(
            lambda ids: self.api.post("/notifications/mark-read", {"ids": [str(i) for i in ids]}),
            success="Notifications marked as read",
            failure="Failed to mark notifications as read",
            after=lambda _data, _ids: self.query_client.invalidate_queries(self.keys.all),
        )

    def use_delete_many(self) -> Mutation:
        """Variables: list of notification ids."""
        def after(_data: Any, ids: list[Any]) -> None:
            for notification_id in ids:
                self.query_client.remove_queries(self.keys.detail(notification_id))
            self.invalidate_lists()

        return self.mutation(
            lambda ids: self.api.post("/notifications/delete", {"ids": [str(i) for i in ids]}),
            success="Notifications deleted successfully",
            failure="Failed to delete notifications",
            after=after,
        )

    def use_send(self) -> Mutation:
        """Variables: ``NotificationSend | dict``."""
        return self.mutation(
            lambda notification: self.api.post("/notifications/send", to_payload(notification)),
            success="Notification sent successfully",
            failure="Failed to send notification",
            after=lambda _data, _n: self.invalidate_lists(),
        )

    def use_update_settings(self) -> Mutation:
        """Variables: partial settings dict; the cache takes the server's merged settings."""
        return self.mutation(
            lambda settings: self.api.put("/notifications/settings", to_payload(settings)),
            success="Notification settings updated",
            failure="Failed to update notification settings",
            after=lambda data, _s: self.query_client.set_query_data(self.keys.scoped("settings"), data),
        )
