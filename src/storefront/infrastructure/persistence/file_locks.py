"""Keyed locks shared by every process working on the same data directory.

Each CLI invocation is its own process, so the in-process LockRegistry
alone cannot keep two concurrent ``order confirm`` runs apart.  Keys are
hashed onto a fixed set of lock files; two keys that share a file simply
serialize with each other.
"""

from __future__ import annotations

import zlib
from collections.abc import Iterable, Iterator
from contextlib import ExitStack, contextmanager
from pathlib import Path

from filelock import FileLock

from storefront.domain.service.locking import LockRegistry

DEFAULT_SLOTS = 64


class FileLockRegistry(LockRegistry):

    def __init__(self, lock_dir: Path, slots: int = DEFAULT_SLOTS) -> None:
        super().__init__()
        self._lock_dir = lock_dir
        self._slots = slots
        self._lock_dir.mkdir(parents=True, exist_ok=True)

    def lock_file_for(self, key: str) -> Path:
        slot = zlib.crc32(key.encode("utf-8")) % self._slots
        return self._lock_dir / f"{slot:02d}.lock"

    @contextmanager
    def hold(self, keys: Iterable[str]) -> Iterator[None]:
        """Hold the file lock of every key, in sorted lock-file order."""
        paths = sorted({self.lock_file_for(key) for key in keys})
        with ExitStack() as stack:
            for path in paths:
                # a fresh FileLock opens its own descriptor, so threads of
                # one process exclude each other as well
                stack.enter_context(FileLock(str(path)))
            yield
