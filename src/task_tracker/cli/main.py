# src/task_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console REPL in the main thread.
"""

from __future__ import annotations

import logging
import signal

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    log_file = setup_logging(settings)
    logger.info("Starting %s (log file: %s)...", settings.app_name, log_file)

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings, log_file=log_file)

    def _handle_sigterm(signum, _frame) -> None:
        logger.info("Signal %s received, shutting down...", signum)
        raise SystemExit(0)

    try:
        signal.signal(signal.SIGTERM, _handle_sigterm)
    except (ValueError, OSError, AttributeError):
        # Not in the main thread, or the platform lacks SIGTERM.
        logger.debug("SIGTERM handler not installed.", exc_info=True)

    try:
        run_console_loop(state)
    finally:
        # Every mutation is already persisted; nothing to flush.
        logger.info("Bye. tasks=%d", state.store.count_tasks())


if __name__ == "__main__":
    main()
