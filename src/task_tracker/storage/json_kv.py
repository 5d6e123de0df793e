# src/task_tracker/storage/json_kv.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


class JsonFileKVStore:
    """
    KeyValueStore backed by one JSON object file ({key: string_value}).

    - the file is re-read on every call, so external edits are picked up
    - writes go to <file>.tmp first and are moved into place with os.replace
    - an unreadable / non-object file reads as empty (keys are absent)
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, ValueError):
            logger.warning("Storage file %s is unreadable; treating it as empty.", self._path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Storage file %s is not a JSON object; treating it as empty.", self._path)
            return {}
        return {k: v for k, v in data.items() if isinstance(k, str) and isinstance(v, str)}

    def _write_all(self, data: dict[str, str]) -> None:
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(json.dumps(data, indent=2), "utf-8")
        os.replace(tmp, self._path)
        with contextlib.suppress(OSError):
            # Task text is user content; keep the file private on disk.
            os.chmod(self._path, 0o600)

    def get(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = str(value)
        self._write_all(data)
        logger.debug("Stored key=%s bytes=%d in %s", key, len(value), self._path)

    def keys(self) -> Iterable[str]:
        return list(self._read_all())
