# tests/test_commands.py

from __future__ import annotations

import json
from pathlib import Path

from task_tracker.cli.commands import CommandRegistry, registry, resolve_task_ref
from task_tracker.core.state import AppState
from task_tracker.tasks.task_models import TaskFilter


def test_command_registry_routes_2_and_3_params(state) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}
    notes: list[str] = []

    def h2(state, args):
        called["h2"] += 1
        return "h2:" + ",".join(args)

    def h3(state, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a", aliases=["aa"])
    reg.register("b", h3, "b")

    assert reg.handle(state, "/a x y") == "h2:x,y"
    assert reg.handle(state, "/AA") == "h2:"
    assert reg.handle(state, "/b", emit=notes.append) == "h3"
    assert called == {"h2": 2, "h3": 1}
    assert notes == ["note"]


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_help_lists_commands(state: AppState) -> None:
    out = registry.handle(state, "/help") or ""
    for name in ("/add", "/toggle", "/delete", "/filter", "/list", "/status", "/raw", "/export"):
        assert name in out


def test_add_toggle_delete_by_position(state: AppState) -> None:
    registry.handle(state, "/add buy milk")
    registry.handle(state, "/add call mom")
    assert [t.text for t in state.store.tasks] == ["call mom", "buy milk"]

    out = registry.handle(state, "/toggle 2") or ""
    assert "[x] buy milk" in out
    assert state.store.tasks[1].completed is True

    out = registry.handle(state, "/done 2") or ""
    assert "[ ] buy milk" in out

    registry.handle(state, "/rm 1")
    assert [t.text for t in state.store.tasks] == ["buy milk"]


def test_add_without_text_is_rejected(state: AppState) -> None:
    assert "Usage" in (registry.handle(state, "/add") or "")
    assert state.store.tasks == ()


def test_position_refers_to_visible_list(state: AppState) -> None:
    registry.handle(state, "/add one")
    registry.handle(state, "/add two")
    registry.handle(state, "/toggle 1")  # "two" is done
    registry.handle(state, "/filter active")

    registry.handle(state, "/delete 1")  # first visible = "one"
    assert [t.text for t in state.store.tasks] == ["two"]


def test_unknown_refs_report_and_change_nothing(state: AppState) -> None:
    registry.handle(state, "/add one")
    snapshot = state.store.tasks

    assert "No such task" in (registry.handle(state, "/toggle 5") or "")
    assert "No such task" in (registry.handle(state, "/delete zzz") or "")
    assert "Usage" in (registry.handle(state, "/toggle") or "")
    assert state.store.tasks == snapshot


def test_resolve_task_ref_by_prefix(state: AppState) -> None:
    task = state.store.add("prefixed")
    assert task is not None

    assert resolve_task_ref(state, task.id[:8]) == task.id
    assert resolve_task_ref(state, task.id) == task.id
    assert resolve_task_ref(state, "1") == task.id
    assert resolve_task_ref(state, "not-an-id") == "not-an-id"


def test_filter_command(state: AppState) -> None:
    assert "currently 'all'" in (registry.handle(state, "/filter") or "")

    registry.handle(state, "/filter COMPLETED")
    assert state.store.filter is TaskFilter.COMPLETED

    out = registry.handle(state, "/filter later") or ""
    assert "Unknown filter" in out
    assert state.store.filter is TaskFilter.COMPLETED


def test_status_and_raw(state: AppState) -> None:
    registry.handle(state, "/add alpha")
    registry.handle(state, "/add beta")
    registry.handle(state, "/toggle 1")

    status = registry.handle(state, "/status") or ""
    assert "2 total, 1 active, 1 completed" in status
    assert "Filter: all" in status
    assert "Storage: memory" in status

    raw = registry.handle(state, "/raw") or ""
    assert [t["text"] for t in json.loads(raw)] == ["beta", "alpha"]
    assert "Nothing stored" in (registry.handle(state, "/raw other") or "")


def test_export_writes_html(state: AppState, tmp_path: Path) -> None:
    registry.handle(state, "/add <b>bold</b>")
    notes: list[str] = []

    target = tmp_path / "out" / "snapshot.html"
    out = registry.handle(state, f"/export {target}", emit=notes.append) or ""

    assert "Exported 1 tasks" in out
    assert notes and "EXPORT" in notes[0]
    html = target.read_text("utf-8")
    assert "&lt;b&gt;bold&lt;/b&gt;" in html
    assert "<title>test-tracker</title>" in html


def test_export_defaults_to_settings_path(state: AppState) -> None:
    registry.handle(state, "/export")
    assert Path(state.settings.export_path).exists()


def test_command_registry_passes_rest_verbatim(state) -> None:
    reg = CommandRegistry()
    seen: list[tuple[list[str], str]] = []

    def h(state, args, *, rest=""):
        seen.append((args, rest))
        return "ok"

    reg.register("echo", h, "echo")

    assert reg.handle(state, "/echo  a   b  ") == "ok"
    assert seen == [(["a", "b"], "a   b  ")]


def test_add_keeps_internal_spacing(state: AppState) -> None:
    registry.handle(state, "/add a   b")
    registry.handle(state, "/add   padded\ttabs  ")
    assert [t.text for t in state.store.tasks] == ["padded\ttabs", "a   b"]


def test_add_accepts_text_starting_with_slash(state: AppState) -> None:
    registry.handle(state, "/add /etc/hosts cleanup")
    assert [t.text for t in state.store.tasks] == ["/etc/hosts cleanup"]

    out = registry.handle(state, "/etc/hosts") or ""
    assert "Unknown command" in out
    assert "/add" in out
    assert "/add" in (registry.handle(state, "/help") or "")


def test_status_shows_log_file(state: AppState, tmp_path: Path) -> None:
    assert "Log file: (not configured)" in (registry.handle(state, "/status") or "")

    state.log_file = tmp_path / "task-tracker.log"
    assert f"Log file: {state.log_file}" in (registry.handle(state, "/status") or "")


def test_raw_lists_stored_keys_when_key_missing(state: AppState) -> None:
    assert "storage is empty" in (registry.handle(state, "/raw") or "")

    registry.handle(state, "/add alpha")
    out = registry.handle(state, "/raw other") or ""
    assert "Nothing stored under 'other'" in out
    assert "Stored keys: tasks." in out
