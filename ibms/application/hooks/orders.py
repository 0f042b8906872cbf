"""Order hooks — CRUD, status changes, payments and list-derived stats."""

from typing import Any

from ibms.application.hooks.base import HookContext, ResourceApi, ResourceHooks
from ibms.application.query import Mutation
from ibms.application.schemas import to_payload

ORDER_STATUSES = ("pending", "processing", "completed", "cancelled")


def order_stats(page: dict[str, Any]) -> dict[str, Any]:
    orders = page["data"]
    stats: dict[str, Any] = {"total": page["total"]}
    for status in ORDER_STATUSES:
        stats[status] = sum(1 for o in orders if o.get("status") == status)
    stats["totalRevenue"] = round(sum(float(o.get("totalAmount") or 0) for o in orders), 2)
    stats["paidAmount"] = round(sum(float(o.get("paidAmount") or 0) for o in orders), 2)
    stats["balanceAmount"] = round(sum(float(o.get("balanceAmount") or 0) for o in orders), 2)
    return stats


class OrderHooks(ResourceHooks):
    def __init__(self, ctx: HookContext):
        super().__init__(
            ctx,
            entity="orders",
            label="Order",
            resource=ResourceApi.rest(ctx.api, "/orders"),
            id_field="orderNumber",
            stats=order_stats,
        )

    def use_update_status(self) -> Mutation:
        """Variables: ``{"id": order_number, "status": ...}``."""
        return self.record_mutation(
            lambda v: self.api.patch(f"/orders/{v['id']}/status", {"status": v["status"]}),
            success="Order status updated successfully",
            failure="Failed to update order status",
        )

    def use_add_payment(self) -> Mutation:
        """Variables: ``{"id": order_number, "payment": PaymentCreate | dict}``."""
        def after(order: Any, variables: dict[str, Any]) -> None:
            self.query_client.set_query_data(self.keys.detail(variables["id"]), order)
            self.invalidate_lists()
            self.query_client.invalidate_queries(("finance",))

        return self.mutation(
            lambda v: self.api.post(f"/orders/{v['id']}/payments", to_payload(v["payment"])),
            success="Payment added successfully",
            failure="Failed to add payment",
            after=after,
        )
