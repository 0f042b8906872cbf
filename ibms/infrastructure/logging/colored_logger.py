"""Colored request logger — ANSI-colored console lines for gateway traffic.

Each backend call produces a start line and a completion (or failure)
line with the elapsed time, colored by transport:

    🟣 Magenta — MOCK (in-process fixtures)
    🔵 Blue    — HTTP (live backend)
    🟢 Green   — Toast: success
    🔴 Red     — Failures / toast: error
    ⚪ Gray    — Details
"""

import logging
import time
from contextlib import contextmanager
from typing import Any, Iterator


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    GRAY = "\033[90m"


# ── Channel Definitions ──────────────────────────────────────────────

class Channel:
    """Predefined log channels with colors and icons."""

    MOCK = ("MOCK", _Colors.MAGENTA, "🎭")
    HTTP = ("HTTP", _Colors.BLUE, "🔗")
    TOAST_SUCCESS = ("TOAST", _Colors.GREEN, "✅")
    TOAST_ERROR = ("TOAST", _Colors.RED, "❌")


# ── RequestLogger ────────────────────────────────────────────────────

class RequestLogger:
    """Color-coded logger for backend requests and user notifications.

    Usage:
        log = RequestLogger(__name__)
        with log.timed_request(Channel.HTTP, "GET", "/clients"):
            response = await client.get(url)
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    def start(self, channel: tuple[str, str, str], method: str, endpoint: str, **kwargs: Any) -> None:
        label, color, icon = channel
        formatted = (
            f"{color}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{color}{method} {endpoint}{_Colors.RESET}"
        )
        if kwargs:
            details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
            formatted += f" {_Colors.GRAY}({details}){_Colors.RESET}"
        self._logger.debug(formatted)

    def complete(self, channel: tuple[str, str, str], method: str, endpoint: str, **kwargs: Any) -> None:
        label, color, icon = channel
        formatted = (
            f"{color}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.GREEN}✓ {method} {endpoint}{_Colors.RESET}"
        )
        if kwargs:
            details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
            formatted += f" {_Colors.GRAY}({details}){_Colors.RESET}"
        self._logger.info(formatted)

    def failure(self, channel: tuple[str, str, str], message: str, error: Exception | None = None) -> None:
        label, _, icon = channel
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}❌ [{label}]{_Colors.RESET} "
            f"{_Colors.RED}{message}{_Colors.RESET}"
        )
        if error:
            formatted += f" {_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET}"
        self._logger.warning(formatted)

    def toast(self, channel: tuple[str, str, str], message: str) -> None:
        label, color, icon = channel
        formatted = f"{color}{icon} [{label}] {message}{_Colors.RESET}"
        if channel is Channel.TOAST_ERROR:
            self._logger.warning(formatted)
        else:
            self._logger.info(formatted)

    @contextmanager
    def timed_request(
        self, channel: tuple[str, str, str], method: str, endpoint: str, **kwargs: Any
    ) -> Iterator[dict[str, Any]]:
        """Log start/end of a request with elapsed time.

        The yielded dict may be filled with extra fields (e.g. ``status``)
        that are appended to the completion line.
        """
        self.start(channel, method, endpoint, **kwargs)
        extra: dict[str, Any] = {}
        start = time.perf_counter()
        try:
            yield extra
        except Exception as e:
            elapsed = time.perf_counter() - start
            self.failure(channel, f"{method} {endpoint} — failed after {elapsed:.2f}s", error=e)
            raise
        else:
            elapsed = time.perf_counter() - start
            self.complete(channel, method, endpoint, elapsed=f"{elapsed:.2f}s", **extra)
