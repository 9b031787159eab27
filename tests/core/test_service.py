"""
Unit Tests for StudentService

Tests for the facade the GUI calls: CRUD, search, load/save and stats.
"""

import pytest

from student_records.core import (
    AppConfig, DuplicateIdError, NotFoundError, ParseError, RecordProfile,
    Student, StudentService, ValidationError,
)
from student_records.core.service import SAMPLE_STUDENTS

HEADER = "rollNo,name,class,marks,phone,email\n"


@pytest.fixture
def service(config):
    return StudentService(config)


@pytest.fixture
def filled(service, sample_students):
    for s in sample_students:
        service.add(s)
    return service


class TestCrud:
    """Tests for add/update/delete/clear."""

    def test_add_when_duplicate_then_raises_and_count_unchanged(self, filled):
        with pytest.raises(DuplicateIdError):
            filled.add(Student(2, "Again", "10-A", 10.0))
        assert len(filled.list()) == 4

    def test_update_when_missing_then_not_found(self, filled):
        with pytest.raises(NotFoundError):
            filled.update(99, Student(99, "X", "10-A", 1.0))

    def test_update_when_valid_then_find_returns_new(self, filled):
        filled.update(1, Student(1, "Asha R", "10-A", 81.0))
        assert filled.find(1).name == "Asha R"

    def test_delete_when_present_then_true_and_gone(self, filled):
        assert filled.delete(1) is True
        assert not filled.exists(1)
        assert filled.delete(1) is False

    def test_clear_when_called_then_empty(self, filled):
        filled.clear()
        assert filled.list() == []

    def test_search_when_query_then_matching_in_order(self, filled):
        assert [s.id for s in filled.search("10-b")] == [3, 4]
        assert len(filled.search("")) == 4
        assert filled.search("nobody") == []


class TestSeed:
    """Tests for seed_sample."""

    def test_seed_when_empty_then_sample_added(self, service):
        assert service.seed_sample() == len(SAMPLE_STUDENTS)
        assert service.list() == list(SAMPLE_STUDENTS)

    def test_seed_when_not_empty_then_nothing_added(self, filled):
        assert filled.seed_sample() == 0
        assert len(filled.list()) == 4

    def test_sample_students_are_valid(self):
        service = StudentService(AppConfig())
        for s in SAMPLE_STUDENTS:
            service.repository.add(s)


class TestPersistence:
    """Tests for load/save."""

    def test_save_then_load_when_new_service_then_same_records(self, filled, config):
        filled.save()
        other = StudentService(config)
        assert other.load() == 4
        assert other.list() == filled.list()

    def test_load_if_exists_when_missing_then_store_kept(self, filled):
        assert filled.load_if_exists() == 0
        assert len(filled.list()) == 4

    def test_load_when_header_only_then_store_emptied(self, filled, csv_path):
        csv_path.write_text(HEADER, encoding="utf-8")
        assert filled.load() == 0
        assert filled.list() == []

    def test_load_when_duplicate_row_then_parse_error_and_store_kept(self, filled, csv_path):
        csv_path.write_text(
            HEADER + "10,Ann,9-A,50,,\n11,Bo,9-A,60,,\n10,Cy,9-A,70,,\n",
            encoding="utf-8",
        )
        with pytest.raises(ParseError) as exc:
            filled.load()
        assert exc.value.line_no == 4
        assert "already exists" in str(exc.value)
        assert [s.id for s in filled.list()] == [1, 2, 3, 4]

    def test_load_when_invalid_row_then_parse_error_names_line(self, filled, csv_path):
        csv_path.write_text(HEADER + "10,Ann,9-A,50,,\n11,Bo,9-A,150,,\n", encoding="utf-8")
        with pytest.raises(ParseError, match="Line 3: Marks must be between 0 and 100."):
            filled.load()
        assert len(filled.list()) == 4

    def test_load_when_malformed_row_then_store_kept(self, filled, csv_path):
        csv_path.write_text(HEADER + "10,Ann,9-A,50,,\nbad,row\n", encoding="utf-8")
        with pytest.raises(ParseError):
            filled.load()
        assert len(filled.list()) == 4

    def test_load_when_minimal_profile_then_class_not_required(self, tmp_path):
        path = tmp_path / "min.csv"
        path.write_text("rollNo,name,marks\n1,Asha,80\n", encoding="utf-8")
        service = StudentService(AppConfig(csv_path=path, profile=RecordProfile.MINIMAL))
        assert service.load() == 1


class TestStats:
    """Tests for stats."""

    def test_stats_when_no_view_then_whole_store(self, filled):
        summary = filled.stats()
        assert summary.count == 4
        assert summary.highest == 95.0
        assert summary.lowest == 39.5
        assert summary.pass_rate == pytest.approx(75.0)

    def test_stats_when_view_then_only_view(self, filled):
        summary = filled.stats(filled.search("10-b"))
        assert summary.count == 2
        assert summary.average == pytest.approx(67.5)
        assert summary.pass_rate == pytest.approx(100.0)

    def test_stats_when_threshold_configured_then_used(self, csv_path, sample_students):
        service = StudentService(AppConfig(csv_path=csv_path, pass_threshold=90.0))
        for s in sample_students:
            service.add(s)
        assert service.stats().pass_rate == pytest.approx(25.0)
        assert service.stats().threshold == 90.0

    def test_stats_when_empty_then_zeros(self, service):
        summary = service.stats()
        assert (summary.count, summary.average, summary.pass_rate) == (0, 0.0, 0.0)
