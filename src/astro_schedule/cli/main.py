# src/astro_schedule/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console REPL in the main thread.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings, normalize_log_level
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    console_level = normalize_log_level(getattr(settings, "log_level", "INFO"))
    setup_logging(
        log_dir=getattr(settings, "data_dir", ".local/astro"),
        console_level=console_level,
        log_to_file=bool(getattr(settings, "log_to_file", True)),
    )

    logger.info("Starting %s...", getattr(settings, "app_name", "astro-schedule"))
    logger.debug("Config file: %s", getattr(settings, "config_path", None))

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)

    try:
        if settings.console_enabled:
            run_console_loop(state)
        else:
            logger.info("Console disabled; nothing to run.")
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
