# src/task_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..tasks.task_store import TaskStore
from ..ui.html_view import HtmlView
from ..ui.text_view import TextView
from .ports import KeyValueStore, TaskView


@dataclass
class AppState:
    """
    Everything a connector or command handler needs, passed explicitly.

    Built once by cli.bootstrap.create_initial_state(); there is no global instance.
    """

    settings: Any
    kv: KeyValueStore
    store: TaskStore

    view: TaskView = field(default_factory=TextView)
    html_view: HtmlView = field(default_factory=HtmlView)
    log_file: Path | None = None
