"""Abstract interface (port) for persisting the system settings blob."""

from abc import ABC, abstractmethod
from typing import Any


class SettingsStorage(ABC):
    """Loads and saves the single settings JSON object."""

    @abstractmethod
    def load(self) -> dict[str, Any] | None:
        """Return the persisted blob, or None when nothing usable is stored."""
        ...

    @abstractmethod
    def save(self, blob: dict[str, Any]) -> None:
        """Persist the full blob. Raises ``SettingsStorageError`` on failure."""
        ...
