"""
Module: core.utils.file_locking

Purpose:
    Cross-platform file locking for the CSV store, so a second process
    never reads a half-written file. Uses portalocker for Mac, Windows,
    and Linux compatibility.

Key Functions:
    - locked_file: Context manager for locked file access
    - locked_read_text: Read a whole file under a shared lock
    - locked_replace_text: Write a sibling temp file under an exclusive
      lock, then atomically replace the target

Dependencies:
    - portalocker: Cross-platform file locking

Used By:
    - core.storage.CsvStorage
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, IO

import portalocker

logger = logging.getLogger(__name__)


@contextmanager
def locked_file(
    path: Path,
    mode: str = 'r',
    lock_type: int = portalocker.LOCK_EX,
) -> Generator[IO[str], None, None]:
    """
    Context manager for cross-platform locked file access.

    Unlike plain open(), read modes never create the file; a missing file
    raises FileNotFoundError.

    Args:
        path: Path to file.
        mode: File open mode ('r', 'w', 'a', etc.).
        lock_type: Lock type (LOCK_EX for exclusive, LOCK_SH for shared).

    Yields:
        Open file handle with lock held.

    Example:
        >>> with locked_file(path, 'w') as f:
        ...     f.write('data')
    """
    if 'r' not in mode:
        path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, mode, encoding='utf-8', newline='') as f:
        portalocker.lock(f, lock_type)
        try:
            yield f
        finally:
            portalocker.unlock(f)


def locked_read_text(path: Path) -> str:
    """Read a UTF-8 text file while holding a shared lock."""
    with locked_file(path, 'r', portalocker.LOCK_SH) as f:
        return f.read()


def locked_replace_text(path: Path, text: str) -> None:
    """
    Replace a file's contents atomically.

    The text is written and flushed to `<name>.tmp` under an exclusive
    lock, then renamed over the target. If writing fails the target is
    left as it was and the temp file is removed.
    """
    temp_path = path.with_name(path.name + ".tmp")
    try:
        with locked_file(temp_path, 'w', portalocker.LOCK_EX) as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        temp_path.replace(path)
    except OSError:
        try:
            if temp_path.exists():
                temp_path.unlink()
        except OSError:
            pass
        raise

    logger.debug(f"Wrote {len(text)} chars to {path.name}")
