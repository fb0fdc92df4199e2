"""Tests for config file loading."""

import logging

import pytest

from anniversary.config import Config, load_config


@pytest.fixture
def write_config(tmp_path):
    """Write a config file and return its path."""
    def _write(content: str):
        path = tmp_path / "anniversary.conf"
        path.write_text(content, encoding="utf-8")
        return path
    return _write


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "missing.conf")
        assert config == Config()
        assert config.counts == [100, 200, 300, 500, 1000]
        assert config.years == [1, 2, 3, 5, 10]
        assert config.holidays == ["valentine", "white", "pepero", "christmas"]
        assert config.years_ahead == 5
        assert config.inclusive is True

    def test_all_keys(self, write_config):
        path = write_config(
            "# Anniversary settings\n"
            "INCLUSIVE=false\n"
            "COUNTS=100, 1000\n"
            "YEARS=1,10\n"
            'HOLIDAYS="Christmas, pepero"  # quoted\n'
            "YEARS_AHEAD=3\n"
            "NOTIFY_TIME=7:5\n"
            "NOTIFIER=desktop\n"
            "EXPORT_FILE='~/cal.ics'\n"
            "SETTINGS_FILE=/tmp/s.json # inline comment\n"
        )

        config = load_config(path)

        assert config.inclusive is False
        assert config.counts == [100, 1000]
        assert config.years == [1, 10]
        assert config.holidays == ["christmas", "pepero"]
        assert config.years_ahead == 3
        assert config.notify_time == "07:05"
        assert config.notifier == "desktop"
        assert config.export_file == "~/cal.ics"
        assert config.settings_file == "/tmp/s.json"

    def test_ignores_unknown_keys_and_junk_lines(self, write_config):
        config = load_config(write_config("NOT A SETTING\nFOO=bar\n\n"))
        assert config == Config()

    @pytest.mark.parametrize(
        "line, attr",
        [
            ("COUNTS=100,abc", "counts"),
            ("YEARS=one", "years"),
            ("INCLUSIVE=maybe", "inclusive"),
            ("YEARS_AHEAD=0", "years_ahead"),
            ("YEARS_AHEAD=soon", "years_ahead"),
            ("NOTIFY_TIME=25:00", "notify_time"),
            ("NOTIFY_TIME=noon", "notify_time"),
            ("NOTIFIER=pager", "notifier"),
        ],
    )
    def test_invalid_values_keep_default(self, write_config, line, attr, caplog):
        with caplog.at_level(logging.WARNING):
            config = load_config(write_config(line + "\n"))

        assert getattr(config, attr) == getattr(Config(), attr)
        assert caplog.records

    def test_unknown_holidays_warned(self, write_config, caplog):
        with caplog.at_level(logging.WARNING):
            config = load_config(write_config("HOLIDAYS=christmas,chuseok\n"))

        assert config.holidays == ["christmas", "chuseok"]
        assert "chuseok" in caplog.text
