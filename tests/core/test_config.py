"""
Unit Tests for AppConfig
"""

from pathlib import Path

import pytest

from student_records.core.config import DEFAULT_PASS_THRESHOLD, AppConfig
from student_records.core.models import RecordProfile


class TestAppConfig:
    """Tests for AppConfig."""

    def test_defaults_when_constructed_then_expected(self):
        config = AppConfig()
        assert config.csv_path == Path("students.csv")
        assert config.profile is RecordProfile.FULL
        assert config.pass_threshold == DEFAULT_PASS_THRESHOLD == 40.0
        assert config.seed_when_empty is True
        assert config.save_on_close is True

    def test_csv_path_when_string_then_coerced_to_path(self):
        assert AppConfig(csv_path="data/x.csv").csv_path == Path("data/x.csv")

    @pytest.mark.parametrize("threshold", [-1.0, 100.5])
    def test_threshold_when_out_of_range_then_raises(self, threshold):
        with pytest.raises(ValueError, match="pass_threshold"):
            AppConfig(pass_threshold=threshold)

    def test_config_is_immutable(self):
        with pytest.raises(AttributeError):
            AppConfig().pass_threshold = 50.0
