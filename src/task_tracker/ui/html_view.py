# src/task_tracker/ui/html_view.py

from __future__ import annotations

import html

from ..core.ports import TaskSource
from ..tasks.task_models import Task, TaskFilter

_FILTER_LABELS = {
    TaskFilter.ALL: "All",
    TaskFilter.ACTIVE: "Active",
    TaskFilter.COMPLETED: "Completed",
}

_PAGE_STYLE = """
  body { font-family: sans-serif; max-width: 40rem; margin: 2rem auto; }
  #task-list { list-style: none; padding: 0; }
  #task-list li { display: flex; justify-content: space-between; padding: .25rem 0; }
  #task-list li.completed span { text-decoration: line-through; opacity: .6; }
  [data-filter].active { font-weight: bold; }
"""


def escape_html(text: str) -> str:
    """Escape &, <, >, " and ' so user text is never interpreted as markup."""
    return html.escape(text, quote=True)


class HtmlView:
    """
    Static HTML renderer.

    Markup mirrors the browser version of the app: the list carries
    data-id / data-action attributes and filter buttons carry data-filter,
    with an "active" class on the current filter.
    """

    def render_task(self, task: Task) -> str:
        li_class = "completed" if task.completed else ""
        checked = " checked" if task.completed else ""
        return (
            f'<li data-id="{escape_html(task.id)}" class="{li_class}">'
            f'<label><input type="checkbox" data-action="toggle"{checked} />'
            f"<span>{escape_html(task.text)}</span></label>"
            '<button data-action="delete" aria-label="Delete task">Delete</button>'
            "</li>"
        )

    def render_filters(self, store: TaskSource) -> str:
        buttons = []
        for f in TaskFilter:
            cls = ' class="active"' if f is store.filter else ""
            buttons.append(f'<button data-filter="{f.value}"{cls}>{_FILTER_LABELS[f]}</button>')
        return '<nav class="filters">' + "".join(buttons) + "</nav>"

    def render(self, store: TaskSource) -> str:
        items = "\n".join(self.render_task(t) for t in store.visible_tasks())
        return f'{self.render_filters(store)}\n<ul id="task-list">\n{items}\n</ul>'

    def render_page(self, store: TaskSource, title: str = "Tasks") -> str:
        safe_title = escape_html(title)
        return (
            "<!DOCTYPE html>\n"
            '<html lang="en">\n'
            '<head><meta charset="utf-8" />'
            f"<title>{safe_title}</title>"
            f"<style>{_PAGE_STYLE}</style></head>\n"
            f"<body>\n<h1>{safe_title}</h1>\n{self.render(store)}\n</body>\n"
            "</html>\n"
        )
