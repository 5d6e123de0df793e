# src/task_tracker/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

PROMPT = ">>> Task: "


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def handle_line(state: AppState, line: str) -> str | None:
    """
    Route one line of input.

    Commands go through the registry; any other non-empty text is a new task.
    Returns what should be printed (None for nothing).
    """
    line = line.strip()
    if not line:
        return None

    def emit(text: str) -> None:
        print(f"[{_ts_local()}] {text}", flush=True)

    try:
        cmd_response = command_registry.handle(state, line, emit=emit)
    except Exception:
        logger.exception("Command handler crashed.")
        return "Internal error while handling a command."

    if cmd_response is not None:
        return cmd_response

    if state.store.add(line) is None:
        return None
    return state.view.render(state.store)


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started.")
    _print_ts("[CONSOLE] Type a task to add it. Use /help for commands. Use /exit to quit.\n")
    print(state.view.render(state.store))

    while True:
        try:
            user_input = input(PROMPT).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        response = handle_line(state, user_input)
        if response is not None:
            print(response)

    logger.info("Console connector finished.")
