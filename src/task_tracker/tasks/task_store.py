# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import json
import logging
import time
import uuid
from dataclasses import replace
from typing import Any

from ..core.ports import KeyValueStore
from .task_models import MalformedTaskData, Task, TaskFilter

logger = logging.getLogger(__name__)

STORAGE_KEY = "tasks"


def _now_ms() -> int:
    return int(time.time() * 1000)


def _new_task_id() -> str:
    return str(uuid.uuid4())


class TaskStore:
    """
    Ordered task list mirrored to a KeyValueStore.

    - tasks are kept newest-first (add prepends); only add/delete change order
    - every successful mutation rewrites the whole list under STORAGE_KEY
    - the filter lives in memory only and starts as "all" on every load
    - bad input (empty text, unknown id, unknown filter) is a silent no-op

    Persistence is best-effort: if the backend fails to write, the in-memory
    mutation still stands and the failure is logged.
    """

    def __init__(self, kv: KeyValueStore) -> None:
        self._kv = kv
        self._tasks: list[Task] = self._load()
        self._filter = TaskFilter.ALL
        logger.info("TaskStore ready total=%s", len(self._tasks))

    # ---- persistence ----

    def _load(self) -> list[Task]:
        try:
            raw = self._kv.get(STORAGE_KEY)
        except Exception:
            logger.exception("Failed to read stored tasks; starting with an empty list.")
            return []

        if raw is None:
            return []

        try:
            return self._decode(raw)
        except (ValueError, TypeError, RecursionError) as e:
            # json.JSONDecodeError and MalformedTaskData are both ValueErrors;
            # RecursionError comes from absurdly deep nesting.
            logger.warning("Stored tasks are malformed (%s); starting with an empty list.", e)
            return []

    @staticmethod
    def _decode(raw: str) -> list[Task]:
        data: Any = json.loads(raw)
        if data is None:
            return []
        if not isinstance(data, list):
            raise MalformedTaskData(f"expected a JSON array, got {type(data).__name__}")

        tasks = [Task.from_dict(item) for item in data]
        ids = {t.id for t in tasks}
        if len(ids) != len(tasks):
            raise MalformedTaskData("duplicate task ids")
        return tasks

    def _encode(self) -> str:
        return json.dumps(
            [t.to_dict() for t in self._tasks],
            # ASCII-only: lone surrogates are stored as \udcxx escapes.
            ensure_ascii=True,
            separators=(",", ":"),
        )

    def _save(self) -> None:
        try:
            self._kv.set(STORAGE_KEY, self._encode())
        except Exception:
            logger.exception("Failed to persist %d tasks; keeping in-memory state.", len(self._tasks))

    def _index_of(self, task_id: str) -> int | None:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return None

    # ---- read API ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    @property
    def filter(self) -> TaskFilter:
        return self._filter

    def get_task(self, task_id: str) -> Task | None:
        idx = self._index_of(task_id)
        return self._tasks[idx] if idx is not None else None

    def count_tasks(self, task_filter: TaskFilter | None = None) -> int:
        if task_filter is None or task_filter is TaskFilter.ALL:
            return len(self._tasks)
        return sum(1 for t in self._tasks if task_filter.matches(t))

    def visible_tasks(self) -> list[Task]:
        """Tasks matching the current filter, in list order."""
        return [t for t in self._tasks if self._filter.matches(t)]

    # ---- mutations ----

    def add(self, text: str) -> Task | None:
        text = (text or "").strip()
        if not text:
            logger.debug("Ignoring add with empty text.")
            return None

        task_id = _new_task_id()
        while self._index_of(task_id) is not None:
            task_id = _new_task_id()

        task = Task(id=task_id, text=text, completed=False, created_at=_now_ms())
        self._tasks.insert(0, task)
        self._save()
        logger.debug("Task added id=%s total=%s", task.id, len(self._tasks))
        return task

    def toggle(self, task_id: str) -> Task | None:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("Toggle ignored: unknown id=%s", task_id)
            return None

        task = replace(self._tasks[idx], completed=not self._tasks[idx].completed)
        self._tasks[idx] = task
        self._save()
        logger.debug("Task toggled id=%s completed=%s", task.id, task.completed)
        return task

    def delete(self, task_id: str) -> bool:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("Delete ignored: unknown id=%s", task_id)
            return False

        del self._tasks[idx]
        self._save()
        logger.debug("Task deleted id=%s total=%s", task_id, len(self._tasks))
        return True

    def set_filter(self, value: TaskFilter | str) -> bool:
        new_filter = TaskFilter.from_raw(value)
        if new_filter is None:
            logger.debug("Filter ignored: unknown value=%r (keeping %s)", value, self._filter)
            return False

        logger.debug("Filter changed %s -> %s", self._filter, new_filter)
        self._filter = new_filter
        return True
