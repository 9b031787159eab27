"""
Module: profile

Purpose:
    Which fields a record set carries. The full profile tracks class,
    phone and email alongside id/name/marks; the minimal profile tracks
    only id, name and marks.

Used By:
    - core.schemas.validator
    - core.utils.csv_codec
    - core.repository
    - gui.models.student_table_model
"""

from __future__ import annotations

from enum import Enum


class RecordProfile(str, Enum):
    """Field set of a record collection."""

    FULL = "full"
    MINIMAL = "minimal"

    @property
    def requires_class(self) -> bool:
        return self is RecordProfile.FULL

    @property
    def csv_header(self) -> tuple[str, ...]:
        """Column names written on the first line of a CSV file."""
        if self is RecordProfile.FULL:
            return ("rollNo", "name", "class", "marks", "phone", "email")
        return ("rollNo", "name", "marks")

    @property
    def required_columns(self) -> int:
        """Minimum number of columns a data row must carry."""
        return 4 if self is RecordProfile.FULL else 3
