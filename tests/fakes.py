# tests/fakes.py

from __future__ import annotations

from task_tracker.storage.memory_kv import MemoryKVStore


class RecordingKVStore(MemoryKVStore):
    """MemoryKVStore that remembers every write, in order."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        super().__init__(initial)
        self.writes: list[tuple[str, str]] = []

    def set(self, key: str, value: str) -> None:
        self.writes.append((key, value))
        super().set(key, value)


class FailingWriteKVStore(MemoryKVStore):
    """Reads work, every write fails (think: storage quota exceeded)."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        super().__init__(initial)
        self.attempts = 0

    def set(self, key: str, value: str) -> None:
        self.attempts += 1
        raise OSError("quota exceeded")


class FailingReadKVStore(MemoryKVStore):
    def get(self, key: str) -> str | None:
        raise OSError("storage unavailable")
