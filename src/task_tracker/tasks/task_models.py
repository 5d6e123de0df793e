# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class TaskFilter(StrEnum):
    """Which subset of tasks the view shows."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    @classmethod
    def from_raw(cls, raw: Any) -> TaskFilter | None:
        """Parse an externally supplied value; None if it is not a known filter."""
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw)
        except ValueError:
            return None

    def matches(self, task: Task) -> bool:
        if self is TaskFilter.ACTIVE:
            return not task.completed
        if self is TaskFilter.COMPLETED:
            return task.completed
        return True


class MalformedTaskData(ValueError):
    """Stored task record does not have the expected shape."""


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    text: str
    completed: bool
    created_at: int  # ms since epoch

    def to_dict(self) -> dict[str, Any]:
        # Key names match the persisted blob format (camelCase createdAt).
        return {
            "id": self.id,
            "text": self.text,
            "completed": self.completed,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Any) -> Task:
        """
        Strict inverse of to_dict().

        Raises MalformedTaskData on any shape mismatch: the caller treats a
        partially valid blob the same as a missing one.
        """
        if not isinstance(data, dict):
            raise MalformedTaskData(f"task record is not an object: {type(data).__name__}")

        task_id = data.get("id")
        text = data.get("text")
        completed = data.get("completed")
        created_at = data.get("createdAt")

        if not isinstance(task_id, str) or not task_id:
            raise MalformedTaskData("task id must be a non-empty string")
        if not isinstance(text, str) or not text.strip():
            raise MalformedTaskData(f"task {task_id}: text must be a non-empty string")
        if not isinstance(completed, bool):
            raise MalformedTaskData(f"task {task_id}: completed must be a boolean")
        # bool is a subclass of int; reject it explicitly.
        if not isinstance(created_at, int) or isinstance(created_at, bool):
            raise MalformedTaskData(f"task {task_id}: createdAt must be an integer")

        return cls(id=task_id, text=text, completed=completed, created_at=created_at)
