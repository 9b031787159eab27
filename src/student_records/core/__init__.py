"""
Student Records Core Package

Records, validation, the in-memory repository, statistics and CSV
persistence. Nothing in this package imports a GUI toolkit.

Records are frozen dataclasses: the repository is the only place a stored
record is replaced, and it validates before every change.
"""

from .errors import RecordError, DuplicateIdError, NotFoundError, StorageError
from .models import RecordProfile, Student
from .schemas import ValidationError, ValidationReason, validate_student
from .utils import ParseError
from .repository import StudentRepository
from .storage import CsvStorage
from .config import AppConfig, DEFAULT_PASS_THRESHOLD
from .service import StudentService

__all__ = [
    "RecordError",
    "DuplicateIdError",
    "NotFoundError",
    "StorageError",
    "ValidationError",
    "ValidationReason",
    "ParseError",
    "RecordProfile",
    "Student",
    "validate_student",
    "StudentRepository",
    "CsvStorage",
    "AppConfig",
    "DEFAULT_PASS_THRESHOLD",
    "StudentService",
]
