"""Tests for the INI settings file loader."""

from pathlib import Path

import pytest

from cc_switch_tools.config import Settings, SettingsManager


def write_settings(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "settings.conf"
    path.write_text(text, encoding="utf-8")
    return path


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    settings = SettingsManager(tmp_path / "absent.conf").load()

    assert settings == Settings()
    assert settings.fetchers == ("aiohttp", "curl", "wget")
    assert settings.timeout_seconds == 30


def test_reads_all_values(tmp_path: Path) -> None:
    path = write_settings(
        tmp_path,
        "[logging]\n"
        "console_log_level = warning\n"
        "log_level = INFO  # keep file quieter\n"
        "[network]\n"
        "timeout_seconds = 10\n"
        "fetchers = curl, WGET\n",
    )

    settings = SettingsManager(path).load()

    assert settings == Settings(
        console_log_level="WARNING",
        log_level="INFO",
        timeout_seconds=10,
        fetchers=("curl", "wget"),
    )


def test_partial_file_keeps_other_defaults(tmp_path: Path) -> None:
    path = write_settings(tmp_path, "[network]\ntimeout_seconds = 5\n")

    settings = SettingsManager(path).load()

    assert settings.timeout_seconds == 5
    assert settings.console_log_level == "INFO"
    assert settings.fetchers == ("aiohttp", "curl", "wget")


@pytest.mark.parametrize("value", ["zero", "0", "-3"])
def test_invalid_timeout_falls_back(
    tmp_path: Path, value: str, caplog: pytest.LogCaptureFixture
) -> None:
    path = write_settings(tmp_path, f"[network]\ntimeout_seconds = {value}\n")

    settings = SettingsManager(path).load()

    assert settings.timeout_seconds == 30
    assert "Invalid timeout_seconds" in caplog.text


def test_invalid_level_falls_back(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    path = write_settings(tmp_path, "[logging]\nconsole_log_level = LOUD\n")

    settings = SettingsManager(path).load()

    assert settings.console_log_level == "INFO"
    assert "Invalid console_log_level 'LOUD'" in caplog.text


def test_empty_fetchers_use_defaults(tmp_path: Path) -> None:
    path = write_settings(tmp_path, "[network]\nfetchers =\n")

    assert SettingsManager(path).load().fetchers == (
        "aiohttp",
        "curl",
        "wget",
    )


def test_malformed_file_is_ignored(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    path = write_settings(tmp_path, "timeout_seconds = 10\n")

    assert SettingsManager(path).load() == Settings()
    assert "Ignoring unreadable settings file" in caplog.text
