"""Centralized logging configuration.

Applies per-category log levels from Settings so that noisy loggers
(e.g. httpx/httpcore, query cache bookkeeping) can be silenced without
affecting other parts of the application.

Usage:
    from ibms.infrastructure.logging.log_config import setup_logging
    setup_logging()   # Call once at startup
"""

import logging
import sys

from ibms.config import Settings, get_settings


# ── Logger-name → Settings-field mapping ────────────────────────────
#
# Each entry maps one or more Python logger names to a Settings field.
# When setup_logging() runs, it sets the level of each listed logger
# to the value of the corresponding setting.

_CATEGORY_MAP: dict[str, list[str]] = {
    "log_level_http": [
        "httpx",
        "httpcore",
    ],
    "log_level_gateway": [
        "ibms.infrastructure.gateways",
        "ibms.infrastructure.mock",
    ],
    "log_level_cache": [
        "ibms.application.query",
    ],
    "log_level_uvicorn": [
        "uvicorn",
        "uvicorn.access",
        "uvicorn.error",
    ],
}


def setup_logging(settings: Settings | None = None) -> None:
    """Configure Python logging levels from application settings.

    Call this once during startup.
    """
    settings = settings or get_settings()
    root_level = _parse_level(settings.log_level)

    # ── Root logger ────────────────────────────────────────────────
    root = logging.getLogger()
    root.setLevel(root_level)

    # Ensure at least one handler exists (uvicorn usually adds one,
    # but when running tests or scripts it may not).
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                "%(levelname)-8s %(name)s — %(message)s",
            )
        )
        root.addHandler(handler)

    # ── Per-category loggers ───────────────────────────────────────
    for settings_field, logger_names in _CATEGORY_MAP.items():
        raw_level: str = getattr(settings, settings_field, "INFO")
        level = _parse_level(raw_level)

        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Logging configured — root=%s, http=%s, gateway=%s, cache=%s, uvicorn=%s",
        settings.log_level,
        settings.log_level_http,
        settings.log_level_gateway,
        settings.log_level_cache,
        settings.log_level_uvicorn,
    )


def _parse_level(raw: str) -> int:
    """Convert a level name string to a logging constant, defaulting to INFO."""
    numeric = getattr(logging, raw.upper(), None)
    if isinstance(numeric, int):
        return numeric
    return logging.INFO
