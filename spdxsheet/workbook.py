"""
RESPONSIBILITIES
- Load and save workbooks that hold bound sheets via openpyxl.
- Provide lightweight locking to guard against concurrent writers.
PROCESS OVERVIEW
1. open_workbook() loads an existing file or starts an empty workbook.
2. Callers bind sheets, populate and verify them in memory.
3. save_workbook() writes under workbook_lock() using a temporary file swap.
"""

from __future__ import annotations

import os
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from openpyxl import Workbook, load_workbook

from .errors import WorkbookLockedError
from .utils.log import get_logger

logger = get_logger("workbook")

_IN_PROCESS_LOCKS: dict[Path, threading.RLock] = {}
_LOCK_REGISTRY_GUARD = threading.Lock()


def _acquire_inprocess_lock(path: Path) -> threading.RLock:
    with _LOCK_REGISTRY_GUARD:
        lock = _IN_PROCESS_LOCKS.get(path)
        if lock is None:
            lock = threading.RLock()
            _IN_PROCESS_LOCKS[path] = lock
        return lock


def _lock_path(path: Path) -> Path:
    return path.with_suffix(path.suffix + ".lock")


@contextmanager
def workbook_lock(path: Path) -> Iterator[None]:
    """Acquire a cooperative file lock guarding the given workbook."""

    path = path.resolve()
    inproc = _acquire_inprocess_lock(path)
    if not inproc.acquire(timeout=10):
        raise WorkbookLockedError(f"Timeout acquiring in-process lock for {path}")
    lock_path = _lock_path(path)
    fd: int | None = None
    try:
        try:
            fd = os.open(lock_path, os.O_CREAT | os.O_EXCL | os.O_WRONLY)
        except FileExistsError as exc:
            raise WorkbookLockedError(f"Workbook appears locked: {lock_path}") from exc
        os.write(fd, str(os.getpid()).encode("ascii"))
        yield
    finally:
        if fd is not None:
            os.close(fd)
            lock_path.unlink(missing_ok=True)
        inproc.release()


def open_workbook(path: Path) -> Workbook:
    """Load ``path``, or return an empty workbook when the file does not exist."""

    if not path.exists():
        workbook = Workbook()
        workbook.remove(workbook.active)
        logger.info("Starting new workbook", extra={"path": str(path)})
        return workbook
    logger.info("Reading workbook", extra={"path": str(path)})
    return load_workbook(path)


def save_workbook(workbook: Workbook, path: Path) -> Path:
    """Save ``workbook`` to ``path`` atomically and return the path."""

    path.parent.mkdir(parents=True, exist_ok=True)
    with workbook_lock(path):
        tmp_path = path.with_name(path.name + ".tmp")
        workbook.save(tmp_path)
        os.replace(tmp_path, path)
    logger.info(
        "Workbook saved", extra={"path": str(path), "sheets": workbook.sheetnames}
    )
    return path
