"""
Unit Tests for Student Model

Tests for the Student dataclass: construction, form parsing and search.
"""

import pytest

from student_records.core.models import RecordProfile, Student, parse_roll_no
from student_records.core.schemas import ValidationError, ValidationReason


class TestStudent:
    """Tests for Student dataclass."""

    # ─────────────────────────────────────────────────────────────────────────
    # Constructor Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_init_when_optional_fields_none_then_empty_strings(self):
        """None for class, phone and email should normalize to ''."""
        s = Student(1, "Asha", None, 50, None, None)
        assert s.class_name == ""
        assert s.phone == ""
        assert s.email == ""

    def test_init_when_int_marks_then_stored_as_float(self):
        """Integer marks should be converted to float."""
        s = Student(1, "Asha", "10-A", 50)
        assert isinstance(s.marks, float)
        assert s.marks == 50.0

    def test_student_is_immutable(self):
        """Student should be frozen."""
        s = Student(1, "Asha", "10-A", 50.0)
        with pytest.raises(AttributeError):
            s.name = "Other"

    def test_with_changes_when_called_then_returns_copy(self):
        """with_changes should leave the original untouched."""
        s = Student(1, "Asha", "10-A", 50.0)
        changed = s.with_changes(marks=75.0)
        assert changed.marks == 75.0
        assert s.marks == 50.0
        assert changed.name == "Asha"

    def test_marks_text_when_called_then_two_decimals(self):
        assert Student(1, "Asha", "10-A", 88.5).marks_text == "88.50"
        assert Student(1, "Asha", "10-A", 0).marks_text == "0.00"

    def test_to_row_when_called_then_column_order(self):
        s = Student(7, "Asha", "10-A", 50.0, "1234567", "a@b")
        assert s.to_row() == (7, "Asha", "10-A", 50.0, "1234567", "a@b")

    # ─────────────────────────────────────────────────────────────────────────
    # Form Parsing Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_from_form_when_valid_then_trims_text(self):
        """Form values should be trimmed and parsed."""
        s = Student.from_form(
            roll_no=" 12 ", name="  Asha ", marks="88.5",
            class_name=" 10-A ", phone=" 9876543210 ", email=" a@b.com ",
        )
        assert s == Student(12, "Asha", "10-A", 88.5, "9876543210", "a@b.com")

    def test_from_form_when_roll_not_integer_then_raises_invalid_id(self):
        with pytest.raises(ValidationError) as exc:
            Student.from_form(roll_no="12a", name="Asha", marks=50)
        assert exc.value.reason is ValidationReason.INVALID_ID
        assert exc.value.field == "id"

    def test_from_form_when_roll_empty_then_raises_invalid_id(self):
        with pytest.raises(ValidationError) as exc:
            Student.from_form(roll_no="", name="Asha", marks=50)
        assert exc.value.reason is ValidationReason.INVALID_ID

    def test_from_form_when_marks_not_numeric_then_raises_invalid_marks(self):
        with pytest.raises(ValidationError) as exc:
            Student.from_form(roll_no="1", name="Asha", marks="abc")
        assert exc.value.reason is ValidationReason.INVALID_MARKS
        assert exc.value.field == "marks"

    @pytest.mark.parametrize("roll", ["1_000", "\u0661\u0662", " "])
    def test_from_form_when_roll_not_ascii_integer_then_raises_invalid_id(self, roll):
        with pytest.raises(ValidationError) as exc:
            Student.from_form(roll_no=roll, name="Asha", marks=50)
        assert exc.value.reason is ValidationReason.INVALID_ID

    def test_parse_roll_no_when_signed_then_parsed(self):
        assert parse_roll_no(" -3 ") == -3
        assert parse_roll_no(12) == 12

    def test_from_form_when_optional_none_then_empty(self):
        s = Student.from_form(roll_no=1, name="Asha", marks=1, class_name=None, phone=None, email=None)
        assert (s.class_name, s.phone, s.email) == ("", "", "")

    # ─────────────────────────────────────────────────────────────────────────
    # Search Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_matches_when_empty_query_then_true(self):
        s = Student(1, "Asha", "10-A", 50.0)
        assert s.matches("")
        assert s.matches("   ")

    def test_matches_when_name_differs_in_case_then_true(self):
        s = Student(1, "Gayatri", "10-A", 50.0)
        assert s.matches("gay")
        assert s.matches("TRI")

    def test_matches_when_roll_class_or_email_then_true(self):
        s = Student(101, "Asha", "10-B", 50.0, "", "asha@school.org")
        assert s.matches("101")
        assert s.matches("10-b")
        assert s.matches("school.org")

    def test_matches_when_no_field_contains_query_then_false(self):
        s = Student(1, "Asha", "10-A", 50.0)
        assert not s.matches("zzz")


class TestRecordProfile:
    """Tests for RecordProfile enum."""

    def test_full_when_queried_then_requires_class(self):
        assert RecordProfile.FULL.requires_class
        assert RecordProfile.FULL.csv_header == ("rollNo", "name", "class", "marks", "phone", "email")
        assert RecordProfile.FULL.required_columns == 4

    def test_minimal_when_queried_then_three_columns(self):
        assert not RecordProfile.MINIMAL.requires_class
        assert RecordProfile.MINIMAL.csv_header == ("rollNo", "name", "marks")
        assert RecordProfile.MINIMAL.required_columns == 3
