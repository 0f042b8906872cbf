from .local_storage import InMemoryStorage, JsonFileStorage
from .settings_storage import LocalStorageSettingsStorage

__all__ = ["InMemoryStorage", "JsonFileStorage", "LocalStorageSettingsStorage"]
