"""Unit tests for local-storage emulation and settings persistence."""

import json
from pathlib import Path

import pytest

from ibms.domain.exceptions import SettingsStorageError
from ibms.infrastructure.storage import InMemoryStorage, JsonFileStorage, LocalStorageSettingsStorage


def test_json_file_storage_round_trip(tmp_path: Path):
    path = tmp_path / "storage" / "local.json"
    storage = JsonFileStorage(path)

    storage.set_item("token", "abc")
    storage.set_item("tenant", "acme")
    storage.remove_item("token")

    assert JsonFileStorage(path).get_item("tenant") == "acme"
    assert JsonFileStorage(path).get_item("token") is None
    assert json.loads(path.read_text("utf-8")) == {"tenant": "acme"}


def test_json_file_storage_treats_corrupt_file_as_empty(tmp_path: Path):
    path = tmp_path / "local.json"
    path.write_text("{not json", encoding="utf-8")

    assert JsonFileStorage(path).get_item("token") is None


def test_json_file_storage_write_failure_raises(tmp_path: Path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    storage = JsonFileStorage(blocker / "local.json")

    with pytest.raises(SettingsStorageError):
        storage.set_item("token", "abc")


def test_settings_storage_load_and_save():
    backing = InMemoryStorage()
    settings_storage = LocalStorageSettingsStorage(backing, "ibms_settings")

    assert settings_storage.load() is None
    settings_storage.save({"general": {"companyName": "Acme"}})

    assert json.loads(backing.get_item("ibms_settings")) == {"general": {"companyName": "Acme"}}
    assert settings_storage.load() == {"general": {"companyName": "Acme"}}


@pytest.mark.parametrize("raw", ["{broken", "[1, 2]", "\"text\""])
def test_settings_storage_ignores_unusable_blob(raw: str):
    settings_storage = LocalStorageSettingsStorage(InMemoryStorage({"ibms_settings": raw}))

    assert settings_storage.load() is None
