# src/astro_schedule/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}", flush=True)


def run_console_loop(
    state: AppState,
    *,
    input_fn: InputFn = input,
    output_fn: OutputFn = _print_ts,
) -> None:
    """
    Interactive REPL over the command registry.

    Store notifications are printed as "Notification: <message>" while the loop runs.
    Listeners are delivered synchronously, so they appear before the command reply.
    """
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "astro-schedule"))
    logger.info("Console connector started.")

    def on_change(message: str) -> None:
        output_fn(f"Notification: {message}")

    state.notifier.subscribe(on_change)
    output_fn(f"[{app_name}] Astronaut daily schedule. Use /help for commands, /exit to quit.")

    try:
        while True:
            try:
                user_input = input_fn(">>> ").strip()
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt, exiting.")
                break

            if not user_input:
                continue

            if user_input.lower() in ("/exit", "/quit"):
                logger.info("Console exit command received.")
                output_fn("Exiting the application.")
                break

            try:
                reply = command_registry.handle(state, user_input)
            except Exception:
                logger.exception("Command handler crashed.")
                reply = "Internal error while handling a command."

            if reply is None:
                reply = "Commands start with '/'. Use /help to list available commands."
            output_fn(reply)
    finally:
        state.notifier.unsubscribe(on_change)
        logger.info("Console connector finished.")
