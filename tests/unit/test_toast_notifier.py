"""Unit tests for the toast notifier."""

from ibms.infrastructure.notifications import ToastNotifier


def test_toasts_are_kept_in_order_and_drained():
    notifier = ToastNotifier()
    notifier.success("Client created successfully")
    notifier.error("Failed to delete client")

    drained = notifier.drain()

    assert [(t.kind, t.message) for t in drained] == [
        ("success", "Client created successfully"),
        ("error", "Failed to delete client"),
    ]
    assert notifier.toasts == []


def test_history_is_bounded():
    notifier = ToastNotifier(max_history=2)
    for n in range(3):
        notifier.success(f"toast {n}")

    assert [t.message for t in notifier.toasts] == ["toast 1", "toast 2"]
