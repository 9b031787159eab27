"""
Module: core.service

Purpose:
    The API the GUI calls: record CRUD, CSV load/save, search and
    statistics, all synchronous. Errors are raised to the caller, which
    reports them and lets the user retry.

Key Classes:
    - StudentService: Facade over StudentRepository and CsvStorage

Dependencies:
    - core.repository: In-memory store
    - core.storage: CSV file access
    - core.statistics: Aggregates
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from . import statistics
from .config import AppConfig
from .errors import DuplicateIdError
from .models.student import Student
from .repository import StudentRepository
from .schemas.validator import ValidationError, validate_student
from .statistics import StatsSummary
from .storage import CsvStorage
from .utils.csv_codec import ParseError

logger = logging.getLogger(__name__)


SAMPLE_STUDENTS = (
    Student(101, "Gayatri", "10-A", 88.5, "9876543210", "gayatri@example.com"),
    Student(102, "Rahul", "10-A", 72.0, "9876500000", "rahul@example.com"),
    Student(103, "Ananya", "10-B", 95.0, "9876511111", "ananya@example.com"),
    Student(104, "Ishaan", "10-B", 39.5, "9876522222", "ishaan@example.com"),
    Student(105, "Meera", "10-C", 64.0, "9876533333", "meera@example.com"),
)


class StudentService:
    """
    Record store with CSV persistence.

    Example:
        >>> service = StudentService(AppConfig(csv_path=Path("students.csv")))
        >>> service.load_if_exists()
        0
        >>> service.add(Student(101, "Gayatri", "10-A", 88.5))
        >>> service.save()
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        repository: Optional[StudentRepository] = None,
        storage: Optional[CsvStorage] = None,
    ) -> None:
        self.config = config or AppConfig()
        self.repository = repository or StudentRepository(self.config.profile)
        self.storage = storage or CsvStorage(self.config.csv_path, self.config.profile)

    @property
    def profile(self):
        return self.config.profile

    # ─────────────────────────────────────────────────────────────────────────
    # CRUD
    # ─────────────────────────────────────────────────────────────────────────

    def add(self, student: Student) -> None:
        self.repository.add(student)
        logger.info(f"Added {student.name} (Roll {student.id})")

    def update(self, original_id: int, student: Student) -> None:
        self.repository.update(original_id, student)
        logger.info(f"Updated {student.name} (Roll {original_id})")

    def delete(self, student_id: int) -> bool:
        removed = self.repository.delete(student_id)
        if removed:
            logger.info(f"Deleted Roll {student_id}")
        return removed

    def clear(self) -> None:
        count = len(self.repository)
        self.repository.clear()
        logger.info(f"Cleared {count} students")

    def list(self) -> List[Student]:
        return self.repository.list()

    def exists(self, student_id: int) -> bool:
        return self.repository.exists(student_id)

    def find(self, student_id: int) -> Optional[Student]:
        return self.repository.get(student_id)

    def search(self, query: str) -> List[Student]:
        """Records with any field containing the query, in stored order."""
        return [s for s in self.repository.list() if s.matches(query)]

    def seed_sample(self) -> int:
        """
        Fill an empty store with the sample students.

        Returns:
            Number of students added (0 if the store was not empty)
        """
        if len(self.repository):
            return 0
        self.repository.replace_all(SAMPLE_STUDENTS)
        logger.info(f"Seeded {len(SAMPLE_STUDENTS)} sample students")
        return len(SAMPLE_STUDENTS)

    # ─────────────────────────────────────────────────────────────────────────
    # Persistence
    # ─────────────────────────────────────────────────────────────────────────

    def load(self) -> int:
        """
        Replace the store with the contents of the CSV file.

        All rows are parsed and validated before the store changes; on any
        failure the store keeps its previous contents.

        Returns:
            Number of records loaded

        Raises:
            StorageError: If the file cannot be read
            ParseError: If a row is malformed, invalid, or repeats a roll number
        """
        rows = self.storage.load_rows()

        seen: set[int] = set()
        for line_no, student in rows:
            try:
                if student.id in seen:
                    raise DuplicateIdError(student.id)
                validate_student(student, self.profile)
            except (ValidationError, DuplicateIdError) as e:
                raise ParseError(line_no, str(e)) from e
            seen.add(student.id)

        self.repository.replace_all(student for _, student in rows)
        logger.info(f"Loaded {len(rows)} students from {self.storage.path}")
        return len(rows)

    def load_if_exists(self) -> int:
        """Load only when the CSV file exists; otherwise keep the store as is."""
        if not self.storage.exists():
            return 0
        return self.load()

    def save(self) -> None:
        """
        Write every stored record to the CSV file.

        Raises:
            StorageError: If the file cannot be written
        """
        self.storage.save(self.repository.list())

    # ─────────────────────────────────────────────────────────────────────────
    # Statistics
    # ─────────────────────────────────────────────────────────────────────────

    def stats(self, view: Optional[Sequence[Student]] = None) -> StatsSummary:
        """
        Aggregate figures over a view of the records.

        Args:
            view: Records currently shown (e.g. a filtered table); None
                means the whole store
        """
        students = self.repository.list() if view is None else list(view)
        return statistics.summarize(students, self.config.pass_threshold)
