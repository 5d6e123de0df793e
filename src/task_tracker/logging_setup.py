# src/task_tracker/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

PACKAGE_LOGGER = "task_tracker"
LOG_FILE_NAME = "task-tracker.log"

# The REPL prints its own timestamps; the console format stays short.
_CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"
_FILE_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"


def level_from_name(name: str, default: int = logging.INFO) -> int:
    level = logging.getLevelName(str(name).strip().upper())
    return level if isinstance(level, int) else default


class _TaskTrackerOnly(logging.Filter):
    """Console shows our own records; other libraries only from ERROR up."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == PACKAGE_LOGGER or record.name.startswith(PACKAGE_LOGGER + "."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(settings) -> Path:
    """
    Configure the root logger from settings and return the log file path.

    stderr gets settings.log_level, filtered to task_tracker records;
    <data_dir>/task-tracker.log gets everything from DEBUG up, including
    warnings.warn() output. Call once, before the store is built.
    """
    log_file = Path(settings.data_dir) / LOG_FILE_NAME
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level_from_name(getattr(settings, "log_level", "INFO")))
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    console.addFilter(_TaskTrackerOnly())
    root.addHandler(console)

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root.addHandler(file_handler)

    logging.captureWarnings(True)
    return log_file
