"""Domain-specific exceptions — framework-independent."""


BACKEND_NOT_CONFIGURED = "Backend API not configured"


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ApiError(Exception):
    """Raised when an API envelope reports a failure.

    Transport-agnostic: produced from mock and live responses alike.
    ``status_code`` is None when the request never reached a server.
    """

    def __init__(self, message: str, status_code: int | None = None, error: str | None = None):
        self.message = message
        self.status_code = status_code
        self.error = error or message
        super().__init__(f"[{status_code}] {message}" if status_code else message)

    @property
    def retryable(self) -> bool:
        """Network failures, throttling and server errors may succeed on retry."""
        if self.status_code is None:
            return True
        return self.status_code == 429 or self.status_code >= 500


class BackendNotConfiguredError(Exception):
    """Raised by convenience methods that have no live-mode implementation.

    This is a permanent condition, never a transient one.
    """

    retryable = False

    def __init__(self) -> None:
        self.message = BACKEND_NOT_CONFIGURED
        super().__init__(BACKEND_NOT_CONFIGURED)


class SettingsStorageError(Exception):
    """Raised when persisted settings cannot be written."""

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Could not persist '{key}': {reason}")
