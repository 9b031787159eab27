import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import student_records
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from student_records.core import AppConfig, Student


# Common test fixtures
@pytest.fixture
def sample_students():
    """Four students covering a pass/fail mix."""
    return [
        Student(1, "Asha", "10-A", 80.0, "9876543210", "asha@example.com"),
        Student(2, "Ben", "10-A", 39.5),
        Student(3, "Chen", "10-B", 95.0),
        Student(4, "Dara", "10-B", 40.0),
    ]


@pytest.fixture
def csv_path(tmp_path: Path) -> Path:
    """Path for a CSV file that does not exist yet."""
    return tmp_path / "students.csv"


@pytest.fixture
def config(csv_path: Path) -> AppConfig:
    """Config writing to a temp CSV, no seeding, no save on close."""
    return AppConfig(csv_path=csv_path, seed_when_empty=False, save_on_close=False)
