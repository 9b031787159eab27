"""
Module: repository

Purpose:
    In-memory store of student records keyed by roll number. Enforces id
    uniqueness and validates every record before it is stored, so the
    store never holds an invalid record and never ends up half-updated.

Key Classes:
    - StudentRepository: CRUD over an insertion-ordered dict

Used By:
    - core.service.StudentService
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, Iterable, Iterator, List, Optional

from .errors import DuplicateIdError, NotFoundError
from .models.profile import RecordProfile
from .models.student import Student
from .schemas.validator import validate_student

logger = logging.getLogger(__name__)


class StudentRepository:
    """
    Insertion-ordered collection of records, one per roll number.

    Iteration order is insertion order. Replacing a record under the same
    roll number keeps its position; changing the roll number moves the
    record to the end.

    All operations take an internal re-entrant lock, so concurrent callers
    are serialized.

    Example:
        >>> repo = StudentRepository()
        >>> repo.add(Student(101, "Gayatri", "10-A", 88.5))
        >>> repo.exists(101)
        True
    """

    def __init__(self, profile: RecordProfile = RecordProfile.FULL) -> None:
        self.profile = profile
        self._by_id: Dict[int, Student] = {}
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._by_id)

    def __contains__(self, student_id: object) -> bool:
        with self._lock:
            return student_id in self._by_id

    def __iter__(self) -> Iterator[Student]:
        return iter(self.list())

    def exists(self, student_id: int) -> bool:
        """Return True if a record with this roll number is stored."""
        with self._lock:
            return student_id in self._by_id

    def get(self, student_id: int) -> Optional[Student]:
        """Return the record with this roll number, or None."""
        with self._lock:
            return self._by_id.get(student_id)

    def add(self, student: Student) -> None:
        """
        Append a new record.

        Raises:
            DuplicateIdError: If the roll number is already stored
            ValidationError: If the record violates a field constraint
        """
        with self._lock:
            if student.id in self._by_id:
                raise DuplicateIdError(student.id)
            validate_student(student, self.profile)
            self._by_id[student.id] = student
        logger.debug(f"Added roll {student.id}")

    def update(self, original_id: int, updated: Student) -> None:
        """
        Replace the record stored under original_id.

        Raises:
            NotFoundError: If original_id is not stored
            DuplicateIdError: If the roll number changes to one already stored
            ValidationError: If the updated record violates a field constraint
        """
        with self._lock:
            if original_id not in self._by_id:
                raise NotFoundError(original_id)
            id_changed = updated.id != original_id
            if id_changed and updated.id in self._by_id:
                raise DuplicateIdError(updated.id)
            validate_student(updated, self.profile)

            if id_changed:
                del self._by_id[original_id]
            self._by_id[updated.id] = updated

        if id_changed:
            logger.debug(f"Updated roll {original_id} -> {updated.id}")
        else:
            logger.debug(f"Updated roll {original_id}")

    def delete(self, student_id: int) -> bool:
        """
        Remove a record if present.

        Returns:
            True if a record was removed, False if the roll number was absent
        """
        with self._lock:
            removed = self._by_id.pop(student_id, None) is not None
        if removed:
            logger.debug(f"Deleted roll {student_id}")
        return removed

    def list(self) -> List[Student]:
        """Snapshot of all records in insertion order."""
        with self._lock:
            return list(self._by_id.values())

    def clear(self) -> None:
        """Remove every record."""
        with self._lock:
            self._by_id.clear()

    def replace_all(self, students: Iterable[Student]) -> None:
        """
        Swap the whole store for a new set of records.

        Every record is validated and checked for duplicate roll numbers
        before anything changes; on failure the store is left untouched.

        Raises:
            DuplicateIdError: If two records share a roll number
            ValidationError: If any record violates a field constraint
        """
        staged: Dict[int, Student] = {}
        for student in students:
            if student.id in staged:
                raise DuplicateIdError(student.id)
            validate_student(student, self.profile)
            staged[student.id] = student

        with self._lock:
            self._by_id = staged
