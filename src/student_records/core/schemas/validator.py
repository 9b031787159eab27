"""
Record Validation

Checks a Student's field constraints before it is stored.

Checks run in a fixed order and the first violation is raised; there is no
multi-error aggregation. Which fields are required depends on the record
profile: the minimal profile carries no class.
"""

from __future__ import annotations

import math
import re
from enum import Enum
from typing import TYPE_CHECKING

from ..errors import RecordError
from ..models.profile import RecordProfile

if TYPE_CHECKING:
    from ..models.student import Student


MIN_MARKS = 0.0
MAX_MARKS = 100.0
MIN_PHONE_DIGITS = 7

_NON_DIGIT = re.compile(r"\D", re.ASCII)


class ValidationReason(str, Enum):
    """Why a record was rejected."""

    NAME_REQUIRED = "name_required"
    INVALID_ID = "invalid_id"
    CLASS_REQUIRED = "class_required"
    MARKS_OUT_OF_RANGE = "marks_out_of_range"
    INVALID_MARKS = "invalid_marks"
    INVALID_EMAIL = "invalid_email"
    INVALID_PHONE = "invalid_phone"


class ValidationError(RecordError):
    """Raised when a record fails validation."""

    def __init__(self, message: str, reason: ValidationReason, field: str = ""):
        super().__init__(message)
        self.reason = reason
        self.field = field


def validate_student(
    student: Student,
    profile: RecordProfile = RecordProfile.FULL,
) -> None:
    """
    Validate a record against the field constraints of a profile.

    Args:
        student: Record to check
        profile: Field set in use; the class is required only under FULL

    Raises:
        ValidationError: On the first violated constraint
    """
    if not student.name or not student.name.strip():
        raise ValidationError(
            "Name required.",
            reason=ValidationReason.NAME_REQUIRED,
            field="name",
        )

    if student.id <= 0:
        raise ValidationError(
            "Roll No must be > 0.",
            reason=ValidationReason.INVALID_ID,
            field="id",
        )

    if profile.requires_class and not student.class_name.strip():
        raise ValidationError(
            "Class required.",
            reason=ValidationReason.CLASS_REQUIRED,
            field="class_name",
        )

    marks = student.marks
    if math.isnan(marks) or not (MIN_MARKS <= marks <= MAX_MARKS):
        raise ValidationError(
            "Marks must be between 0 and 100.",
            reason=ValidationReason.MARKS_OUT_OF_RANGE,
            field="marks",
        )

    email = student.email.strip()
    if email and "@" not in email:
        raise ValidationError(
            "Invalid email.",
            reason=ValidationReason.INVALID_EMAIL,
            field="email",
        )

    phone = student.phone.strip()
    if phone and len(_NON_DIGIT.sub("", phone)) < MIN_PHONE_DIGITS:
        raise ValidationError(
            "Invalid phone.",
            reason=ValidationReason.INVALID_PHONE,
            field="phone",
        )
