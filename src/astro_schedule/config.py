# src/astro_schedule/config.py

"""Centralized settings loaded from environment variables (+ optional .env and .properties).

Design goals:
- One Settings object for the whole app.
- Environment wins over the properties file; the properties file wins over defaults.
- A missing or broken properties file is logged, never fatal.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_PREFIX = "ASTRO"
DEFAULT_CONFIG_FILE = "config.properties"
LOG_LEVEL_KEY = "log.level"

# java.util.logging level names accepted in the properties file.
_JAVA_LEVELS = {
    "SEVERE": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "CONFIG": logging.INFO,
    "FINE": logging.DEBUG,
    "FINER": logging.DEBUG,
    "FINEST": logging.DEBUG,
    "ALL": logging.NOTSET,
    "OFF": logging.CRITICAL + 10,
}


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def load_properties(path: str | Path) -> dict[str, str]:
    """
    Read a Java-style .properties file.

    Supported: `key=value`, `key: value`, `#` and `!` comments, blank lines.
    Returns {} if the file is missing or unreadable.
    """
    path = Path(path)
    try:
        raw = path.read_text("utf-8")
    except FileNotFoundError:
        logger.debug("No properties file at %s", path)
        return {}
    except OSError:
        logger.error("Error loading configuration file %s", path, exc_info=True)
        return {}

    out: dict[str, str] = {}
    for line in raw.splitlines():
        line = line.strip()
        if not line or line[0] in "#!":
            continue
        seps = [i for i in (line.find("="), line.find(":")) if i >= 0]
        if not seps:
            out[line] = ""
            continue
        cut = min(seps)
        key = line[:cut].strip()
        if key:
            out[key] = line[cut + 1 :].strip()
    return out


def normalize_log_level(name: str | None) -> int:
    """Map a Python or java.util.logging level name to a logging level; unknown -> INFO."""
    key = (name or "").strip().upper()
    if key in _JAVA_LEVELS:
        return _JAVA_LEVELS[key]
    level = logging.getLevelName(key)
    return level if isinstance(level, int) else logging.INFO


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- Connector flags ----
    console_enabled: bool

    # ---- Local paths (ignored by git) ----
    config_path: Path
    data_dir: Path

    @staticmethod
    def from_env() -> Settings:
        load_dotenv(override=False)

        app_name = _env(_k("APP_NAME"), "astro-schedule") or "astro-schedule"
        config_path = _env_path(_k("CONFIG_FILE"), Path(DEFAULT_CONFIG_FILE))

        props = load_properties(config_path)
        log_level = _env(_k("LOG_LEVEL"), props.get(LOG_LEVEL_KEY, "INFO")) or "INFO"

        return Settings(
            app_name=app_name,
            log_level=log_level.strip().upper(),
            log_to_file=_env_bool(_k("LOG_TO_FILE"), True),
            console_enabled=_env_bool(_k("CONSOLE_ENABLED"), True),
            config_path=config_path,
            data_dir=_env_path(_k("DATA_DIR"), Path(".local/astro")),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
