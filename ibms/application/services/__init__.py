from .api_client import ApiClient
from .settings_service import DEFAULT_SETTINGS, SettingsManager, merge_settings

__all__ = [
    "ApiClient",
    "DEFAULT_SETTINGS",
    "SettingsManager",
    "merge_settings",
]
