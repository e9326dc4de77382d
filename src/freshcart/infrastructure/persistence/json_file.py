"""A JSON document on disk, shared by the JSON-backed repositories.

Every read-modify-write cycle runs under an exclusive ``flock`` on a
sidecar ``<file>.lock``, so separate CLI processes pointing at the same
file never interleave.  Inside one process a per-path re-entrant lock
serializes threads and lets a locked cycle call ``load``/``persist``
without locking the file twice.  Writes go to a sibling temp file that
is then renamed over the original, so readers see either the old or the
new document and never a half-written one.
"""

from __future__ import annotations

import copy
import fcntl
import json
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator

from freshcart.domain.exceptions import StorageError


class _PathLock:
    """Thread lock plus OS file lock for one resolved path."""

    def __init__(self, lock_path: Path) -> None:
        self._lock_path = lock_path
        self._thread_lock = threading.RLock()
        self._depth = 0
        self._fd: int | None = None

    @contextmanager
    def hold(self) -> Iterator[None]:
        with self._thread_lock:
            if self._depth == 0:
                self._acquire_file_lock()
            self._depth += 1
            try:
                yield
            finally:
                self._depth -= 1
                if self._depth == 0:
                    self._release_file_lock()

    def _acquire_file_lock(self) -> None:
        try:
            self._lock_path.parent.mkdir(parents=True, exist_ok=True)
            fd = os.open(self._lock_path, os.O_RDWR | os.O_CREAT, 0o644)
        except OSError as exc:
            raise StorageError(f"Cannot open lock file {self._lock_path}: {exc}") from exc
        try:
            fcntl.flock(fd, fcntl.LOCK_EX)
        except OSError as exc:
            os.close(fd)
            raise StorageError(f"Cannot lock {self._lock_path}: {exc}") from exc
        self._fd = fd

    def _release_file_lock(self) -> None:
        fd, self._fd = self._fd, None
        if fd is not None:
            fcntl.flock(fd, fcntl.LOCK_UN)
            os.close(fd)


_locks: dict[Path, _PathLock] = {}
_locks_guard = threading.Lock()


def _lock_for(path: Path) -> _PathLock:
    with _locks_guard:
        lock = _locks.get(path)
        if lock is None:
            lock = _locks[path] = _PathLock(path.with_name(path.name + ".lock"))
        return lock


def _reset_locks_in_child() -> None:
    # A forked child must not inherit locks held by the parent's threads.
    global _locks_guard
    _locks.clear()
    _locks_guard = threading.Lock()


os.register_at_fork(after_in_child=_reset_locks_in_child)


class JsonFile:

    def __init__(self, file_path: Path, empty: Any) -> None:
        self._file_path = file_path.resolve()
        self._empty = empty
        self._lock = _lock_for(self._file_path)

    @contextmanager
    def locked(self) -> Iterator[None]:
        with self._lock.hold():
            yield

    def load(self) -> Any:
        with self._lock.hold():
            if not self._file_path.exists():
                return copy.deepcopy(self._empty)
            try:
                return json.loads(self._file_path.read_text(encoding="utf-8"))
            except (OSError, ValueError) as exc:
                raise StorageError(f"Cannot read {self._file_path}: {exc}") from exc

    def persist(self, data: Any) -> None:
        with self._lock.hold():
            try:
                text = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
            except (TypeError, ValueError) as exc:
                raise StorageError(f"Cannot serialize {self._file_path}: {exc}") from exc
            tmp_name = None
            try:
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
                fd, tmp_name = tempfile.mkstemp(
                    dir=self._file_path.parent, prefix=self._file_path.name, suffix=".tmp"
                )
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(text)
                os.replace(tmp_name, self._file_path)
            except OSError as exc:
                if tmp_name is not None:
                    Path(tmp_name).unlink(missing_ok=True)
                raise StorageError(f"Cannot write {self._file_path}: {exc}") from exc

    def remove(self) -> None:
        with self._lock.hold():
            try:
                self._file_path.unlink(missing_ok=True)
            except OSError as exc:
                raise StorageError(f"Cannot remove {self._file_path}: {exc}") from exc
