"""
Error types raised by the record store and its persistence layer.

Every error subclasses RecordError so the GUI can report any core failure
with a single except clause. ValidationError lives in
core.schemas.validator and ParseError in core.utils.csv_codec, next to the
code that raises them.
"""

from __future__ import annotations


class RecordError(Exception):
    """Base class for recoverable record store errors."""
    pass


class DuplicateIdError(RecordError):
    """Raised when a roll number is already taken."""

    def __init__(self, student_id: int):
        super().__init__(f"Roll No already exists: {student_id}")
        self.student_id = student_id


class NotFoundError(RecordError):
    """Raised when updating a roll number that is not stored."""

    def __init__(self, student_id: int):
        super().__init__(f"Roll No not found: {student_id}")
        self.student_id = student_id


class StorageError(RecordError):
    """Raised when the CSV file cannot be read or written."""

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path
