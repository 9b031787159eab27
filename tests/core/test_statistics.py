"""
Unit Tests for Statistics

Tests for aggregate figures over record sequences.
"""

import pytest

from student_records.core import statistics
from student_records.core.models import Student
from student_records.core.statistics import StatsSummary, summarize


@pytest.fixture
def four_students():
    return [
        Student(101, "Gayatri", "10-A", 88.5),
        Student(102, "Rahul", "10-A", 72.0),
        Student(103, "Ananya", "10-B", 95.0),
        Student(104, "Ishaan", "10-B", 39.5),
    ]


class TestAggregates:
    """Tests for the individual aggregate functions."""

    def test_aggregates_when_four_students_then_expected_values(self, four_students):
        assert statistics.count(four_students) == 4
        assert statistics.average(four_students) == pytest.approx(73.75)
        assert statistics.highest(four_students) == 95.0
        assert statistics.lowest(four_students) == 39.5
        assert statistics.pass_rate(four_students, 40.0) == pytest.approx(75.0)

    def test_aggregates_when_empty_then_zero(self):
        assert statistics.count([]) == 0
        assert statistics.average([]) == 0.0
        assert statistics.highest([]) == 0.0
        assert statistics.lowest([]) == 0.0
        assert statistics.pass_rate([], 40.0) == 0.0

    def test_pass_rate_when_marks_equal_threshold_then_counts_as_pass(self):
        students = [Student(1, "A", "X", 40.0), Student(2, "B", "X", 39.99)]
        assert statistics.pass_rate(students, 40.0) == pytest.approx(50.0)


class TestStatsSummary:
    """Tests for summarize and display rows."""

    def test_summarize_when_called_then_all_fields(self, four_students):
        summary = summarize(four_students, 40.0)
        assert summary == StatsSummary(4, 73.75, 95.0, 39.5, 75.0, 40.0)

    def test_format_rows_when_called_then_two_decimals(self, four_students):
        rows = summarize(four_students, 40.0).format_rows()
        assert rows == [
            ("Total", "4"),
            ("Average", "73.75"),
            ("Highest", "95.00"),
            ("Lowest", "39.50"),
            ("Pass Rate (>=40)", "75.00%"),
        ]

    def test_format_rows_when_fractional_threshold_then_label_keeps_fraction(self):
        rows = summarize([], 32.5).format_rows()
        assert rows[-1] == ("Pass Rate (>=32.5)", "0.00%")
