"""Shared file helpers for the JSON-backed repositories."""

from __future__ import annotations

import json
import os
from pathlib import Path

from filelock import FileLock


class JsonFile:
    """A JSON document on disk, created on first use.

    Writes go to a sibling temp file that replaces the target, so a reader
    never sees a half-written document.  Repositories wrap every
    load-modify-persist sequence in ``locked()``, which excludes other
    threads and other processes writing the same file.
    """

    def __init__(self, file_path: Path, empty: str = "[]") -> None:
        self._file_path = file_path
        self._empty = empty
        self._lock_path = file_path.with_suffix(file_path.suffix + ".lock")
        self._ensure_file()

    def locked(self) -> FileLock:
        return FileLock(str(self._lock_path))

    def load(self):
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def persist(self, data) -> None:
        tmp = self._file_path.with_suffix(self._file_path.suffix + ".tmp")
        tmp.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
        os.replace(tmp, self._file_path)

    def _ensure_file(self) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        with self.locked():
            if not self._file_path.exists():
                self._file_path.write_text(self._empty, encoding="utf-8")
