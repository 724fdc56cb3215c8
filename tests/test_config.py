# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from astro_schedule.config import Settings, load_properties, normalize_log_level


def test_load_properties_parses_java_style(tmp_path: Path) -> None:
    path = tmp_path / "config.properties"
    path.write_text(
        "# comment\n"
        "! another comment\n"
        "\n"
        "log.level = FINE\n"
        "app.name: organizer\n"
        "flag\n",
        "utf-8",
    )
    assert load_properties(path) == {"log.level": "FINE", "app.name": "organizer", "flag": ""}


def test_load_properties_missing_file(tmp_path: Path) -> None:
    assert load_properties(tmp_path / "nope.properties") == {}


@pytest.mark.parametrize(
    ("name", "level"),
    [
        ("SEVERE", logging.ERROR),
        ("warning", logging.WARNING),
        ("FINE", logging.DEBUG),
        ("DEBUG", logging.DEBUG),
        (" info ", logging.INFO),
        ("bogus", logging.INFO),
        (None, logging.INFO),
    ],
)
def test_normalize_log_level(name, level: int) -> None:
    assert normalize_log_level(name) == level


def test_settings_from_env_reads_properties(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    cfg = tmp_path / "config.properties"
    cfg.write_text("log.level=warning\n", "utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ASTRO_CONFIG_FILE", str(cfg))
    monkeypatch.delenv("ASTRO_LOG_LEVEL", raising=False)
    monkeypatch.setenv("ASTRO_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("ASTRO_LOG_TO_FILE", "no")

    s = Settings.from_env()
    assert s.log_level == "WARNING"
    assert s.config_path == cfg
    assert s.data_dir == tmp_path / "data"
    assert s.log_to_file is False
    assert s.console_enabled is True


def test_env_log_level_wins_over_properties(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    cfg = tmp_path / "config.properties"
    cfg.write_text("log.level=SEVERE\n", "utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ASTRO_CONFIG_FILE", str(cfg))
    monkeypatch.setenv("ASTRO_LOG_LEVEL", "debug")

    assert Settings.from_env().log_level == "DEBUG"
