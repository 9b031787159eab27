"""
Module: student

Purpose:
    Provides the Student dataclass - one student's record, keyed by its
    unique roll number. Records are immutable; the repository is the only
    place a stored record is replaced.

Key Functions:
    - Student.from_form(...): Build a record from raw form text
    - Student.matches(query): Case-insensitive search over all fields
    - Student.to_row(): Field values in display/CSV column order
    - parse_roll_no(text): Strict ASCII integer parsing for roll numbers

Used By:
    - core.repository.StudentRepository
    - core.utils.csv_codec
    - gui.models.student_table_model
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional


def parse_roll_no(text: Any) -> int:
    """
    Parse a roll number: optional sign followed by ASCII digits.

    Unlike int(), underscores and non-ASCII digits are rejected.

    Raises:
        ValueError: If the text is not a plain integer
    """
    value = str(text).strip()
    digits = value[1:] if value[:1] in ("+", "-") else value
    if not (digits.isascii() and digits.isdecimal()):
        raise ValueError(f"invalid roll number: {text!r}")
    return int(value)


@dataclass(frozen=True, slots=True)
class Student:
    """
    A single student record.

    Attributes:
        id: Roll number, unique within a repository (> 0 when stored)
        name: Student name
        class_name: Class label such as "10-A" (empty under the minimal profile)
        marks: Marks in the range 0..100
        phone: Optional phone number ("" when absent)
        email: Optional email address ("" when absent)

    Field constraints are not enforced here; see
    core.schemas.validator.validate_student.

    Example:
        >>> s = Student(101, "Gayatri", "10-A", 88.5)
        >>> s.phone
        ''
    """

    id: int
    name: str
    class_name: str = ""
    marks: float = 0.0
    phone: str = ""
    email: str = ""

    def __post_init__(self) -> None:
        """Normalize missing optional fields to empty strings."""
        for attr in ("class_name", "phone", "email"):
            if getattr(self, attr) is None:
                object.__setattr__(self, attr, "")
        object.__setattr__(self, "marks", float(self.marks))

    # ─────────────────────────────────────────────────────────────────────────
    # Factory Methods
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def from_form(
        cls,
        *,
        roll_no: Any,
        name: str,
        marks: Any,
        class_name: Optional[str] = "",
        phone: Optional[str] = "",
        email: Optional[str] = "",
    ) -> Student:
        """
        Build a record from user-entered form values.

        Text values are trimmed. The roll number must parse as an integer
        and marks as a number.

        Raises:
            ValidationError: If roll number or marks are not numeric
        """
        from ..schemas.validator import ValidationError, ValidationReason

        try:
            roll = parse_roll_no(roll_no)
        except ValueError:
            raise ValidationError(
                f"Roll No must be a whole number: {roll_no!r}",
                reason=ValidationReason.INVALID_ID,
                field="id",
            ) from None

        try:
            mark_value = float(str(marks).strip())
        except (TypeError, ValueError):
            raise ValidationError(
                f"Marks must be a number: {marks!r}",
                reason=ValidationReason.INVALID_MARKS,
                field="marks",
            ) from None

        return cls(
            id=roll,
            name=(name or "").strip(),
            class_name=(class_name or "").strip(),
            marks=mark_value,
            phone=(phone or "").strip(),
            email=(email or "").strip(),
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def marks_text(self) -> str:
        """Marks with exactly two decimals, as written to CSV and shown in tables."""
        return f"{self.marks:.2f}"

    def to_row(self) -> tuple[Any, ...]:
        """Field values in column order: roll no, name, class, marks, phone, email."""
        return (self.id, self.name, self.class_name, self.marks, self.phone, self.email)

    def with_changes(self, **changes: Any) -> Student:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def matches(self, query: str) -> bool:
        """
        Check whether any field contains the query (case-insensitive).

        An empty or whitespace-only query matches every record.
        """
        needle = query.strip().lower()
        if not needle:
            return True
        haystack = (
            str(self.id),
            self.name,
            self.class_name,
            self.marks_text,
            self.phone,
            self.email,
        )
        return any(needle in value.lower() for value in haystack)
