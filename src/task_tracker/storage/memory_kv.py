# src/task_tracker/storage/memory_kv.py

from __future__ import annotations

from collections.abc import Iterable, Mapping


class MemoryKVStore:
    """Dict-backed KeyValueStore. Nothing survives the process."""

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = str(value)

    def keys(self) -> Iterable[str]:
        return list(self._data)
