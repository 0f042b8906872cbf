"""Local-storage emulation — a JSON file of string keys to string values.

Storage layout:
    <storage_file>   {"<key>": "<value>", ...}
"""

import json
import logging
from pathlib import Path

from ibms.application.interfaces import KeyValueStorage
from ibms.domain.exceptions import SettingsStorageError

logger = logging.getLogger(__name__)


class JsonFileStorage(KeyValueStorage):
    """Infrastructure adapter for file-backed key/value storage."""

    def __init__(self, path: str | Path):
        self._path = Path(path)

    def _read_all(self) -> dict[str, str]:
        """Read the whole file, returning {} if missing or corrupt."""
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, ValueError):
            logger.warning("Could not read %s, treating storage as empty", self._path)
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, data: dict[str, str]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        except OSError as exc:
            raise SettingsStorageError(str(self._path), str(exc)) from exc

    def get_item(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def remove_item(self, key: str) -> None:
        data = self._read_all()
        if data.pop(key, None) is not None:
            self._write_all(data)


class InMemoryStorage(KeyValueStorage):
    """Process-local storage; nothing survives the process."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)
