"""
CSV Codec

Converts student records to and from CSV text.

Format:
- First line is a fixed header (`rollNo,name,class,marks,phone,email`, or
  `rollNo,name,marks` for the minimal profile). It is skipped on read
  without being checked.
- One row per record, marks written with exactly two decimals.
- Fields containing a comma, double quote or line break are quoted, with
  inner quotes doubled.
- On read, blank lines are skipped, fields are trimmed, and missing
  trailing optional columns default to "".

Deserialization only checks that ids and marks parse; field constraints
are enforced by the repository when the records are stored.
"""

from __future__ import annotations

import csv
import io
from typing import List, Sequence, Tuple

from ..errors import RecordError
from ..models.profile import RecordProfile
from ..models.student import Student, parse_roll_no


class ParseError(RecordError):
    """Raised when a CSV row cannot be turned into a record."""

    def __init__(self, line_no: int, message: str):
        super().__init__(f"Line {line_no}: {message}")
        self.line_no = line_no
        self.detail = message


# ─────────────────────────────────────────────────────────────────────────────
# Serialization
# ─────────────────────────────────────────────────────────────────────────────

def _row_for(student: Student, profile: RecordProfile) -> List[str]:
    if profile is RecordProfile.MINIMAL:
        return [str(student.id), student.name, student.marks_text]
    return [
        str(student.id),
        student.name,
        student.class_name,
        student.marks_text,
        student.phone,
        student.email,
    ]


def serialize(
    students: Sequence[Student],
    profile: RecordProfile = RecordProfile.FULL,
) -> str:
    """
    Serialize records to CSV text, header first.

    Args:
        students: Records in the order they should be written
        profile: Field set to write

    Returns:
        CSV text with "\\n" line endings
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    # QUOTE_MINIMAL only quotes characters of the line terminator, so a bare
    # "\r" would end the row on read
    quoted_writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(profile.csv_header)
    for student in students:
        row = _row_for(student, profile)
        if any("\r" in field for field in row):
            quoted_writer.writerow(row)
        else:
            writer.writerow(row)
    return buffer.getvalue()


# ─────────────────────────────────────────────────────────────────────────────
# Deserialization
# ─────────────────────────────────────────────────────────────────────────────

def _parse_row(fields: List[str], line_no: int, profile: RecordProfile) -> Student:
    """Build a record from trimmed fields."""
    if len(fields) < profile.required_columns:
        raise ParseError(
            line_no,
            f"expected at least {profile.required_columns} columns, got {len(fields)}",
        )

    try:
        student_id = parse_roll_no(fields[0])
    except ValueError:
        raise ParseError(line_no, f"invalid roll number {fields[0]!r}") from None

    marks_index = 3 if profile is RecordProfile.FULL else 2
    try:
        marks = float(fields[marks_index])
    except ValueError:
        raise ParseError(line_no, f"invalid marks {fields[marks_index]!r}") from None

    if profile is RecordProfile.MINIMAL:
        return Student(id=student_id, name=fields[1], marks=marks)

    def optional(index: int) -> str:
        return fields[index] if len(fields) > index else ""

    return Student(
        id=student_id,
        name=fields[1],
        class_name=fields[2],
        marks=marks,
        phone=optional(4),
        email=optional(5),
    )


def deserialize_rows(
    text: str,
    profile: RecordProfile = RecordProfile.FULL,
) -> List[Tuple[int, Student]]:
    """
    Deserialize CSV text into (line number, record) pairs.

    Line numbers are 1-based and refer to the line on which the row ends.

    Raises:
        ParseError: On the first malformed row
    """
    if text.startswith("\ufeff"):
        text = text[1:]

    reader = csv.reader(io.StringIO(text, newline=""), skipinitialspace=True)
    rows: List[Tuple[int, Student]] = []
    try:
        header = next(reader, None)
        if header is None:
            return rows
        for raw in reader:
            if not raw or all(not field.strip() for field in raw):
                continue
            fields = [field.strip() for field in raw]
            rows.append((reader.line_num, _parse_row(fields, reader.line_num, profile)))
    except csv.Error as e:
        raise ParseError(reader.line_num, str(e)) from e
    return rows


def deserialize(
    text: str,
    profile: RecordProfile = RecordProfile.FULL,
) -> List[Student]:
    """
    Deserialize CSV text into records, skipping the header and blank lines.

    Raises:
        ParseError: On the first malformed row, naming its line
    """
    return [student for _, student in deserialize_rows(text, profile)]
