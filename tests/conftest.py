# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_tracker.cli.bootstrap import create_initial_state
from task_tracker.core.state import AppState
from task_tracker.tasks.task_store import TaskStore

from .fakes import RecordingKVStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="test-tracker",
        log_level="DEBUG",
        storage_backend="memory",
        storage_path=tmp_path / "storage.sqlite3",
        data_dir=tmp_path,
        export_path=tmp_path / "tasks.html",
    )


@pytest.fixture()
def kv() -> RecordingKVStore:
    return RecordingKVStore()


@pytest.fixture()
def store(kv: RecordingKVStore) -> TaskStore:
    return TaskStore(kv)


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState wired through the real composition root (memory backend)."""
    return create_initial_state(settings=settings)
