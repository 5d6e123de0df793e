# src/task_tracker/ui/text_view.py

from __future__ import annotations

from ..core.ports import TaskSource
from ..tasks.task_models import Task, TaskFilter

ID_PREFIX_LEN = 8

_EMPTY_MESSAGES = {
    TaskFilter.ALL: "No tasks yet. Type something to add one.",
    TaskFilter.ACTIVE: "No active tasks.",
    TaskFilter.COMPLETED: "No completed tasks.",
}


def short_id(task: Task) -> str:
    return task.id[:ID_PREFIX_LEN]


class TextView:
    """Plain-text renderer for the console connector."""

    def render_filter_bar(self, store: TaskSource) -> str:
        parts = []
        for f in TaskFilter:
            label = f"{f.value}({store.count_tasks(f)})"
            parts.append(f"[{label}]" if f is store.filter else f" {label} ")
        return "Filter: " + " ".join(parts)

    @staticmethod
    def render_task(position: int, task: Task) -> str:
        mark = "x" if task.completed else " "
        return f"{position:>3}. [{mark}] {task.text}  ({short_id(task)})"

    def render(self, store: TaskSource) -> str:
        lines = [self.render_filter_bar(store)]
        visible = store.visible_tasks()
        if not visible:
            lines.append("  " + _EMPTY_MESSAGES[store.filter])
        for i, task in enumerate(visible, start=1):
            lines.append(self.render_task(i, task))
        return "\n".join(lines)
