from .backend_gateway import BackendGateway
from .key_value_storage import KeyValueStorage
from .notifier import Notifier
from .settings_storage import SettingsStorage

__all__ = [
    "BackendGateway",
    "KeyValueStorage",
    "Notifier",
    "SettingsStorage",
]
