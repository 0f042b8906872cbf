"""Abstract interface (port) for browser-style local storage."""

from abc import ABC, abstractmethod


class KeyValueStorage(ABC):
    """String key/value store with ``localStorage`` semantics."""

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        ...

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store ``value``. Raises ``SettingsStorageError`` if the write fails."""
        ...

    @abstractmethod
    def remove_item(self, key: str) -> None:
        ...
