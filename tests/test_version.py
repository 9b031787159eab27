"""Tests for package metadata."""

import student_records


def test_version_when_imported_then_string():
    """__version__ is always a non-empty string, installed or not."""
    assert isinstance(student_records.__version__, str)
    assert student_records.__version__
