# tests/test_task_models.py

from __future__ import annotations

import pytest

from task_tracker.tasks.task_models import MalformedTaskData, Task, TaskFilter


def test_task_dict_uses_stored_field_names() -> None:
    task = Task(id="a1", text="read", completed=True, created_at=1700000000000)
    assert task.to_dict() == {
        "id": "a1",
        "text": "read",
        "completed": True,
        "createdAt": 1700000000000,
    }
    assert Task.from_dict(task.to_dict()) == task


@pytest.mark.parametrize(
    "record",
    [
        None,
        [],
        {"text": "x", "completed": False, "createdAt": 0},
        {"id": 1, "text": "x", "completed": False, "createdAt": 0},
        {"id": "1", "text": "   ", "completed": False, "createdAt": 0},
        {"id": "1", "text": "x", "completed": 0, "createdAt": 0},
        {"id": "1", "text": "x", "completed": False, "createdAt": 1.5},
        {"id": "1", "text": "x", "completed": False, "createdAt": False},
    ],
)
def test_from_dict_rejects_wrong_shapes(record) -> None:
    with pytest.raises(MalformedTaskData):
        Task.from_dict(record)


def test_task_filter_from_raw_is_strict() -> None:
    assert TaskFilter.from_raw("all") is TaskFilter.ALL
    assert TaskFilter.from_raw("active") is TaskFilter.ACTIVE
    assert TaskFilter.from_raw(TaskFilter.COMPLETED) is TaskFilter.COMPLETED
    assert TaskFilter.from_raw("Active") is None
    assert TaskFilter.from_raw("done") is None
    assert TaskFilter.from_raw(None) is None


def test_task_filter_matches() -> None:
    open_task = Task(id="1", text="a", completed=False, created_at=0)
    done_task = Task(id="2", text="b", completed=True, created_at=0)

    assert TaskFilter.ALL.matches(open_task) and TaskFilter.ALL.matches(done_task)
    assert TaskFilter.ACTIVE.matches(open_task) and not TaskFilter.ACTIVE.matches(done_task)
    assert TaskFilter.COMPLETED.matches(done_task) and not TaskFilter.COMPLETED.matches(open_task)
