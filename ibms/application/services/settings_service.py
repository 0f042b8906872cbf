"""Application service for system settings.

The settings object has six sections (general, branding, notifications,
security, integrations, features). It is loaded once from a
``SettingsStorage`` by merging the stored blob over ``DEFAULT_SETTINGS``
and re-persisted after every change.

The stored blob carries no schema version: a renamed field in a future
release would silently fall back to its default on load.
"""

import copy
import json
import logging
from datetime import datetime, timezone
from typing import Any

from ibms.application.interfaces import SettingsStorage
from ibms.domain.exceptions import SettingsStorageError
from ibms.domain.validators import validate_email, validate_hex_color

logger = logging.getLogger(__name__)

BACKUP_VERSION = "2.0.0"

SECTIONS = ("general", "branding", "notifications", "security", "integrations", "features")

DEFAULT_SETTINGS: dict[str, Any] = {
    "general": {
        "companyName": "Your Company",
        "companyEmail": "contact@company.com",
        "companyPhone": "+91 9999999999",
        "companyAddress": "Your Address",
        "timezone": "Asia/Kolkata",
        "currency": "INR",
        "dateFormat": "DD/MM/YYYY",
        "fiscalYearStart": "04-01",
    },
    "branding": {
        "primaryColor": "#0ea5e9",
        "secondaryColor": "#64748b",
        "logo": "",
        "favicon": "",
        "loginBackground": "",
    },
    "notifications": {
        "emailEnabled": True,
        "smsEnabled": False,
        "pushEnabled": True,
        "digestFrequency": "daily",
    },
    "security": {
        "passwordPolicy": {
            "minLength": 8,
            "requireUppercase": True,
            "requireLowercase": True,
            "requireNumbers": True,
            "requireSymbols": False,
            "maxAge": 90,
        },
        "sessionTimeout": 1440,  # minutes
        "maxLoginAttempts": 5,
        "twoFactorRequired": False,
    },
    "integrations": {
        "paymentGateways": [],
        "emailProviders": [],
        "smsProviders": [],
    },
    "features": {
        "modules": {
            "clients": True,
            "orders": True,
            "finance": True,
            "reports": True,
            "leads": True,
            "queue": True,
            "appointments": True,
            "employees": True,
            "consultants": True,
            "notifications": True,
            "communications": True,
            "analytics": True,
            "documents": True,
            "security": True,
        },
        "experiments": {
            "newDashboard": False,
            "enhancedReports": False,
            "aiAssistant": False,
        },
    },
}

CURRENCY_SYMBOLS = {"INR": "₹", "USD": "$", "EUR": "€", "GBP": "£", "JPY": "¥"}


def _section(blob: dict[str, Any], name: str) -> dict[str, Any]:
    value = blob.get(name)
    return value if isinstance(value, dict) else {}


def merge_settings(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Merge ``overrides`` over ``base`` section by section.

    Sections merge one level deep; ``security.passwordPolicy`` and the two
    feature maps merge one level deeper. Integration lists (an empty one
    included) are replaced whole when present. Top-level keys outside the
    known sections are dropped.
    """
    security = _section(overrides, "security")
    integrations = _section(overrides, "integrations")
    features = _section(overrides, "features")
    base_integrations = base["integrations"]
    merged = {
        "general": {**base["general"], **_section(overrides, "general")},
        "branding": {**base["branding"], **_section(overrides, "branding")},
        "notifications": {**base["notifications"], **_section(overrides, "notifications")},
        "security": {
            **base["security"],
            **security,
            "passwordPolicy": {**base["security"]["passwordPolicy"], **_section(security, "passwordPolicy")},
        },
        "integrations": {
            name: integrations[name] if isinstance(integrations.get(name), list) else base_integrations[name]
            for name in ("paymentGateways", "emailProviders", "smsProviders")
        },
        "features": {
            "modules": {**base["features"]["modules"], **_section(features, "modules")},
            "experiments": {**base["features"]["experiments"], **_section(features, "experiments")},
        },
    }
    return copy.deepcopy(merged)


def _group_indian(whole: str) -> str:
    """``1234567`` → ``12,34,567``."""
    if len(whole) <= 3:
        return whole
    head, tail = whole[:-3], whole[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


class SettingsManager:
    """Single source of truth for system settings (constructed once, passed by reference)."""

    def __init__(self, storage: SettingsStorage):
        self._storage = storage
        self._settings = self._load()

    def _load(self) -> dict[str, Any]:
        stored = self._storage.load()
        if stored is None:
            return copy.deepcopy(DEFAULT_SETTINGS)
        return merge_settings(DEFAULT_SETTINGS, stored)

    def _save(self) -> None:
        """Persist the whole object; failures are logged and the in-memory state is kept."""
        try:
            self._storage.save(self._settings)
        except (SettingsStorageError, OSError, TypeError, ValueError) as exc:
            logger.error("Failed to save settings: %s", exc)

    # ── Accessors ────────────────────────────────────────────────────

    def get_settings(self) -> dict[str, Any]:
        """The live settings object. Change it through the update methods only."""
        return self._settings

    def get_setting(self, category: str) -> dict[str, Any]:
        if category not in SECTIONS:
            raise KeyError(f"Unknown settings category '{category}'")
        return self._settings[category]

    # ── Mutation ─────────────────────────────────────────────────────

    def update_settings(self, updates: dict[str, Any]) -> None:
        self._settings = merge_settings(self._settings, updates)
        self._save()

    def update_setting(self, category: str, updates: dict[str, Any]) -> None:
        if category not in SECTIONS:
            raise KeyError(f"Unknown settings category '{category}'")
        self.update_settings({category: updates})

    def reset_settings(self) -> None:
        self._settings = copy.deepcopy(DEFAULT_SETTINGS)
        self._save()

    def export_settings(self) -> str:
        return json.dumps(self._settings, indent=2, ensure_ascii=False)

    def import_settings(self, settings_json: str) -> bool:
        """Replace the settings with ``settings_json`` merged over the defaults."""
        try:
            parsed = json.loads(settings_json)
        except ValueError as exc:
            logger.error("Failed to import settings: %s", exc)
            return False
        if not isinstance(parsed, dict):
            logger.error("Failed to import settings: expected a JSON object")
            return False
        self._settings = merge_settings(DEFAULT_SETTINGS, parsed)
        self._save()
        return True

    # ── Validation ───────────────────────────────────────────────────

    def validate_settings(self) -> tuple[bool, list[str]]:
        """Advisory checks; never blocks an update."""
        errors: list[str] = []
        general = self._settings["general"]
        security = self._settings["security"]
        branding = self._settings["branding"]

        if not str(general.get("companyName") or "").strip():
            errors.append("Company name is required")
        if not validate_email(general.get("companyEmail") or ""):
            errors.append("Valid company email is required")
        if security["passwordPolicy"].get("minLength", 0) < 6:
            errors.append("Password minimum length should be at least 6 characters")
        if security.get("sessionTimeout", 0) < 30:
            errors.append("Session timeout should be at least 30 minutes")
        primary = branding.get("primaryColor")
        if primary and not validate_hex_color(primary):
            errors.append("Primary color should be a valid hex color")

        return not errors, errors

    # ── Feature flags ────────────────────────────────────────────────

    def is_feature_enabled(self, feature: str) -> bool:
        return self._settings["features"]["modules"].get(feature) is True

    def is_experiment_enabled(self, experiment: str) -> bool:
        return self._settings["features"]["experiments"].get(experiment) is True

    def enable_feature(self, feature: str) -> None:
        self.update_setting("features", {"modules": {feature: True}})

    def disable_feature(self, feature: str) -> None:
        self.update_setting("features", {"modules": {feature: False}})

    def set_experiment(self, experiment: str, enabled: bool) -> None:
        self.update_setting("features", {"experiments": {experiment: enabled}})

    # ── Backup ───────────────────────────────────────────────────────

    def create_backup(self) -> dict[str, Any]:
        return {
            "settings": copy.deepcopy(self._settings),
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "version": BACKUP_VERSION,
        }

    def restore_backup(self, backup: dict[str, Any]) -> bool:
        if not isinstance(backup, dict) or not all(backup.get(k) for k in ("settings", "timestamp", "version")):
            logger.error("Failed to restore backup: invalid backup format")
            return False
        if not isinstance(backup["settings"], dict):
            logger.error("Failed to restore backup: settings must be an object")
            return False
        self._settings = merge_settings(DEFAULT_SETTINGS, backup["settings"])
        self._save()
        return True

    # ── Formatting ───────────────────────────────────────────────────

    def format_currency(self, amount: float) -> str:
        """Amount in the configured currency; INR uses lakh/crore grouping."""
        currency = self._settings["general"].get("currency", "INR")
        symbol = CURRENCY_SYMBOLS.get(currency, currency)
        sign = "-" if amount < 0 else ""
        whole, fraction = f"{abs(amount):.2f}".split(".")
        if currency == "INR":
            grouped = _group_indian(whole)
        else:
            grouped = f"{int(whole):,}"
        return f"{sign}{symbol}{grouped}.{fraction}"
