"""Toast notifier — keeps recent toasts for the UI and echoes them to the console."""

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal

from ibms.application.interfaces import Notifier
from ibms.infrastructure.logging.colored_logger import Channel, RequestLogger

ToastKind = Literal["success", "error"]


@dataclass
class Toast:
    kind: ToastKind
    message: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class ToastNotifier(Notifier):
    """Infrastructure adapter — one toast per call, newest last, bounded history."""

    def __init__(self, max_history: int = 50):
        self._toasts: deque[Toast] = deque(maxlen=max_history)
        self._log = RequestLogger(__name__)

    def success(self, message: str) -> None:
        self._toasts.append(Toast("success", message))
        self._log.toast(Channel.TOAST_SUCCESS, message)

    def error(self, message: str) -> None:
        self._toasts.append(Toast("error", message))
        self._log.toast(Channel.TOAST_ERROR, message)

    @property
    def toasts(self) -> list[Toast]:
        return list(self._toasts)

    def drain(self) -> list[Toast]:
        """Return and forget all pending toasts."""
        pending = list(self._toasts)
        self._toasts.clear()
        return pending
