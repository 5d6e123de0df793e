# src/task_tracker/cli/commands.py

from __future__ import annotations

import contextlib
import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks.task_models import TaskFilter
from ..tasks.task_store import STORAGE_KEY
from .bootstrap import export_html

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)

MIN_ID_PREFIX_LEN = 4

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        rest = parts[1] if len(parts) > 1 else ""
        args = rest.split()

        handler = self._handlers.get(name)
        if not handler:
            return (
                f"Unknown command: /{name}. Use /help to list available commands "
                "(or /add <text> to add text that starts with '/')."
            )

        # Positional arity picks the 2- or 3-param form; a keyword-only "rest"
        # parameter receives the text after the command name verbatim.
        try:
            params = inspect.signature(handler).parameters.values()
        except (TypeError, ValueError):
            params = None
        if params is None:
            nparams, wants_rest = 3, False
        else:
            nparams = sum(1 for p in params if p.kind in _POSITIONAL)
            wants_rest = any(p.name == "rest" and p.kind is p.KEYWORD_ONLY for p in params)
        extra = {"rest": rest} if wants_rest else {}

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit, **extra)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args, **extra)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        lines.append("Any line that is not a command is added as a new task.")
        lines.append("To add a task that starts with '/', use /add (e.g. /add /etc/hosts cleanup).")
        return "\n".join(lines)


registry = CommandRegistry()


def resolve_task_ref(state: AppState, ref: str) -> str:
    """
    Translate what the user typed into a task id.

    Accepts a 1-based position in the visible list or a unique id prefix
    (at least MIN_ID_PREFIX_LEN characters).
    Anything else is returned unchanged; the store treats it as an unknown id.
    """
    ref = ref.strip()
    visible = state.store.visible_tasks()
    if ref.isdigit():
        pos = int(ref)
        if 1 <= pos <= len(visible):
            return visible[pos - 1].id

    if len(ref) < MIN_ID_PREFIX_LEN:
        return ref
    matches = [t.id for t in state.store.tasks if t.id.startswith(ref)]
    if len(matches) == 1:
        return matches[0]
    return ref


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return state.view.render(state.store)


def cmd_add(state: AppState, args: list[str], *, rest: str = "") -> str:
    task = state.store.add(rest)
    if task is None:
        return "Usage: /add <text> (text must not be empty)."
    return state.view.render(state.store)


def cmd_toggle(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /toggle <number|id>."
    task = state.store.toggle(resolve_task_ref(state, args[0]))
    if task is None:
        return f"No such task: {args[0]}."
    return state.view.render(state.store)


def cmd_delete(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /delete <number|id>."
    if not state.store.delete(resolve_task_ref(state, args[0])):
        return f"No such task: {args[0]}."
    return state.view.render(state.store)


def cmd_filter(state: AppState, args: list[str]) -> str:
    """
    /filter            -> show current filter
    /filter active     -> show only active tasks
    """
    choices = " | ".join(f.value for f in TaskFilter)
    if not args:
        return f"Filter is currently '{state.store.filter}'. Use /filter {choices}."
    if not state.store.set_filter(args[0].lower()):
        return f"Unknown filter: {args[0]}. Use /filter {choices}."
    return state.view.render(state.store)


def cmd_status(state: AppState, args: list[str]) -> str:
    store = state.store
    backend = getattr(state.settings, "storage_backend", "?")
    path = getattr(state.settings, "storage_path", None)
    where = backend if backend == "memory" or path is None else f"{backend} ({path})"
    return (
        "Status:\n"
        f"  Tasks: {store.count_tasks()} total, "
        f"{store.count_tasks(TaskFilter.ACTIVE)} active, "
        f"{store.count_tasks(TaskFilter.COMPLETED)} completed\n"
        f"  Filter: {store.filter}\n"
        f"  Storage: {where}\n"
        f"  Log file: {state.log_file or '(not configured)'}"
    )


def cmd_raw(state: AppState, args: list[str]) -> str:
    """Show the persisted string exactly as the backend holds it."""
    key = args[0] if args else STORAGE_KEY
    raw = state.kv.get(key)
    if raw is not None:
        return raw

    keys_fn = getattr(state.kv, "keys", None)
    known = sorted(keys_fn()) if callable(keys_fn) else []
    if not known:
        return f"Nothing stored under '{key}' (storage is empty)."
    return f"Nothing stored under '{key}'. Stored keys: {', '.join(known)}."


def cmd_export(
    state: AppState,
    args: list[str],
    emit: CommandEmitter | None = None,
) -> str:
    if emit:
        with contextlib.suppress(Exception):
            emit("[EXPORT] Writing HTML...")
    try:
        path = export_html(state, args[0] if args else None)
    except OSError as e:
        logger.exception("HTML export failed.")
        return f"Export failed: {e}"
    return f"Exported {len(state.store.visible_tasks())} tasks to {path}."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show tasks for the current filter.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add <text>.")
registry.register(
    "toggle", cmd_toggle, help_text="Toggle completed: /toggle <number|id>.", aliases=["done"]
)
registry.register(
    "delete", cmd_delete, help_text="Delete a task: /delete <number|id>.", aliases=["rm", "del"]
)
registry.register("filter", cmd_filter, help_text="Filter: /filter all | active | completed.")
registry.register("status", cmd_status, help_text="Show counts, filter and storage backend.")
registry.register("raw", cmd_raw, help_text="Show the raw stored value: /raw [key].")
registry.register("export", cmd_export, help_text="Write an HTML snapshot: /export [path].")
