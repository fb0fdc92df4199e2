"""Tests for the JSON settings store."""

import json
import logging

import pytest

from anniversary.adapters.json_settings import JsonSettingsStore
from anniversary.ports.settings_store import StoredSettings


@pytest.fixture
def path(tmp_path):
    return tmp_path / "settings.json"


@pytest.fixture
def store(path):
    return JsonSettingsStore(path)


class TestLoad:
    def test_missing_file_gives_defaults(self, store):
        assert store.load() == StoredSettings(start_date="", type="연애 시작")

    def test_valid_envelope(self, store, path):
        path.write_text(
            json.dumps({"v": 1, "settings": {"startDate": "2024-01-01", "type": "결혼"}}),
            encoding="utf-8",
        )
        assert store.load() == StoredSettings(start_date="2024-01-01", type="결혼")

    def test_missing_fields_use_defaults(self, store, path):
        path.write_text(json.dumps({"v": 1, "settings": {}}), encoding="utf-8")
        assert store.load() == StoredSettings()

    def test_empty_type_uses_default(self, store, path):
        path.write_text(json.dumps({"v": 1, "settings": {"startDate": "2024-01-01", "type": ""}}))
        assert store.load() == StoredSettings(start_date="2024-01-01", type="연애 시작")

    def test_wrong_field_types_use_defaults(self, store, path):
        path.write_text(json.dumps({"v": 1, "settings": {"startDate": 20240101, "type": ["x"]}}))
        assert store.load() == StoredSettings()

    @pytest.mark.parametrize(
        "content",
        [
            "{not json",
            json.dumps({"v": 2, "settings": {"startDate": "2024-01-01"}}),
            json.dumps({"v": True, "settings": {"startDate": "2024-01-01"}}),
            json.dumps({"v": 1.0, "settings": {"startDate": "2024-01-01"}}),
            json.dumps({"v": "1", "settings": {"startDate": "2024-01-01"}}),
            json.dumps({"settings": {"startDate": "2024-01-01"}}),
            json.dumps({"v": 1, "settings": "2024-01-01"}),
            json.dumps({"v": 1}),
            json.dumps(["2024-01-01"]),
            "null",
        ],
    )
    def test_corrupt_payload_falls_back_to_defaults(self, store, path, content, caplog):
        path.write_text(content, encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            assert store.load() == StoredSettings()

        assert "Ignoring" in caplog.text

    def test_expands_user_path(self):
        store = JsonSettingsStore("~/settings.json")
        assert "~" not in str(store.path)


class TestSave:
    def test_writes_versioned_envelope(self, store, path):
        store.save(StoredSettings(start_date="2024-01-01", type="결혼"))

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data == {"v": 1, "settings": {"startDate": "2024-01-01", "type": "결혼"}}

    def test_keeps_korean_readable(self, store, path):
        store.save(StoredSettings(type="결혼"))
        assert "결혼" in path.read_text(encoding="utf-8")

    def test_creates_parent_directories(self, tmp_path):
        store = JsonSettingsStore(tmp_path / "nested" / "dir" / "settings.json")
        store.save(StoredSettings())
        assert store.path.exists()

    def test_round_trip(self, store):
        settings = StoredSettings(start_date="2023-05-05", type="기타")
        store.save(settings)
        assert store.load() == settings
