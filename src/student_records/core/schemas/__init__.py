"""
Schemas Package

Field validation for student records.
"""

from .validator import (
    validate_student,
    ValidationError,
    ValidationReason,
    MIN_MARKS,
    MAX_MARKS,
)

__all__ = [
    "validate_student",
    "ValidationError",
    "ValidationReason",
    "MIN_MARKS",
    "MAX_MARKS",
]
