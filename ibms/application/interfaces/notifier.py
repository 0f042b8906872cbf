"""Abstract interface (port) for transient user notifications (toasts)."""

from abc import ABC, abstractmethod


class Notifier(ABC):
    """Port for user-visible feedback after mutations."""

    @abstractmethod
    def success(self, message: str) -> None:
        ...

    @abstractmethod
    def error(self, message: str) -> None:
        ...
