"""
Module: storage

Purpose:
    Read and write the CSV file that persists the record store.

Key Classes:
    - CsvStorage: Load/save records at one path

Behavior:
    - Missing file loads as an empty record set (not an error)
    - Header-only file loads as an empty record set
    - Saves are atomic: the old file survives a failed write

Dependencies:
    - core.utils.csv_codec: Text format
    - core.utils.file_locking: portalocker-backed file access
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence, Tuple, Union

from .errors import StorageError
from .models.profile import RecordProfile
from .models.student import Student
from .utils.csv_codec import deserialize_rows, serialize
from .utils.file_locking import locked_read_text, locked_replace_text

logger = logging.getLogger(__name__)

DEFAULT_CSV_NAME = "students.csv"


class CsvStorage:
    """CSV persistence for one record file."""

    def __init__(
        self,
        path: Union[str, Path] = DEFAULT_CSV_NAME,
        profile: RecordProfile = RecordProfile.FULL,
    ) -> None:
        self.path = Path(path)
        self.profile = profile

    def exists(self) -> bool:
        return self.path.is_file()

    def load_rows(self) -> List[Tuple[int, Student]]:
        """
        Load records paired with the CSV line each came from.

        Raises:
            StorageError: If the file exists but cannot be read
            ParseError: If a row is malformed
        """
        if not self.exists():
            logger.info(f"No CSV at {self.path}, starting empty")
            return []

        try:
            text = locked_read_text(self.path)
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Failed to read {self.path}: {e}", path=str(self.path)) from e

        rows = deserialize_rows(text, self.profile)
        logger.info(f"Read {len(rows)} records from {self.path}")
        return rows

    def load(self) -> List[Student]:
        """
        Load all records from the file.

        Raises:
            StorageError: If the file exists but cannot be read
            ParseError: If a row is malformed
        """
        return [student for _, student in self.load_rows()]

    def save(self, students: Sequence[Student]) -> None:
        """
        Write all records, replacing the file atomically.

        Raises:
            StorageError: If the file cannot be written
        """
        text = serialize(students, self.profile)
        try:
            locked_replace_text(self.path, text)
        except OSError as e:
            raise StorageError(f"Failed to write {self.path}: {e}", path=str(self.path)) from e
        logger.info(f"Saved {len(students)} records to {self.path}")
