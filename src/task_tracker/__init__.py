"""
task_tracker: a small task list persisted to a key-value string store.

Subpackages:
- tasks/: Task model and the TaskStore (the state owner)
- storage/: key-value store backends (memory, JSON file, SQLite)
- ui/: text and HTML renderers
- cli/, connectors/: composition root, slash commands, console REPL
"""

__version__ = "0.1.0"
