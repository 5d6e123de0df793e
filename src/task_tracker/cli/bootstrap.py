# src/task_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- picks the key-value backend and wires it into a TaskStore,
- writes HTML exports.
"""

from __future__ import annotations

import contextlib
import logging
import os
from pathlib import Path

from ..config import get_settings
from ..core.ports import KeyValueStore
from ..core.state import AppState
from ..storage.json_kv import JsonFileKVStore
from ..storage.memory_kv import MemoryKVStore
from ..storage.sqlite_kv import SqliteKVStore
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    if settings.storage_backend != "memory":
        settings.storage_path.parent.mkdir(parents=True, exist_ok=True)


def create_kv_store(settings) -> KeyValueStore:
    backend = str(getattr(settings, "storage_backend", "sqlite")).lower()
    if backend == "memory":
        return MemoryKVStore()
    if backend == "json":
        return JsonFileKVStore(settings.storage_path)
    if backend != "sqlite":
        logger.warning("Unknown storage backend %r; using sqlite.", backend)
    return SqliteKVStore(settings.storage_path)


def create_initial_state(*, settings=None, log_file: Path | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    kv = create_kv_store(settings)
    state = AppState(settings=settings, kv=kv, store=TaskStore(kv), log_file=log_file)
    logger.info(
        "State ready backend=%s path=%s tasks=%d",
        settings.storage_backend,
        settings.storage_path,
        state.store.count_tasks(),
    )
    return state


def export_html(state: AppState, path: str | Path | None = None) -> Path:
    """Write the current (filtered) list as a standalone HTML page. Returns the path written."""
    target = Path(path) if path else Path(state.settings.export_path)
    target.parent.mkdir(parents=True, exist_ok=True)

    title = str(getattr(state.settings, "app_name", "Tasks"))
    page = state.html_view.render_page(state.store, title=title)

    tmp = target.with_suffix(target.suffix + ".tmp")
    tmp.write_text(page, "utf-8")
    os.replace(tmp, target)
    with contextlib.suppress(OSError):
        os.chmod(target, 0o600)
    logger.info("Exported %d visible tasks to %s", len(state.store.visible_tasks()), target)
    return target
