"""Settings persistence on top of a key/value storage under one fixed key."""

import json
import logging
from typing import Any

from ibms.application.interfaces import KeyValueStorage, SettingsStorage

logger = logging.getLogger(__name__)


class LocalStorageSettingsStorage(SettingsStorage):
    """Stores the settings blob as JSON text under ``key``.

    The stored shape is versionless; no schema version is written or checked.
    """

    def __init__(self, storage: KeyValueStorage, key: str = "ibms_settings"):
        self._storage = storage
        self._key = key

    def load(self) -> dict[str, Any] | None:
        raw = self._storage.get_item(self._key)
        if raw is None:
            return None
        try:
            blob = json.loads(raw)
        except ValueError:
            logger.error("Failed to load settings: '%s' is not valid JSON", self._key)
            return None
        return blob if isinstance(blob, dict) else None

    def save(self, blob: dict[str, Any]) -> None:
        self._storage.set_item(self._key, json.dumps(blob))
