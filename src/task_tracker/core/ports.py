# src/task_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The TaskStore depends on a KeyValueStore Protocol instead of a concrete
backend, and renderers depend on the read-only TaskSource view of the store.
This keeps storage and presentation swappable and makes testing easier.
"""

from typing import Protocol

from ..tasks.task_models import Task, TaskFilter


class KeyValueStore(Protocol):
    """
    String key -> string value persistence (the localStorage contract).

    get() returns None when the key is absent.
    """

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class TaskSource(Protocol):
    """What a renderer is allowed to read from the store."""

    @property
    def filter(self) -> TaskFilter: ...

    def visible_tasks(self) -> list[Task]: ...

    def count_tasks(self, task_filter: TaskFilter | None = None) -> int: ...


class TaskView(Protocol):
    def render(self, store: TaskSource) -> str: ...
