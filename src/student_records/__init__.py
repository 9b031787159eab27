"""Top-level package for Student Records.

Provides subpackages:
- student_records.core – records, validation, repository, statistics, CSV persistence
- student_records.gui – PySide6 desktop app
"""
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("student-records")
except PackageNotFoundError:
    # Running from a source checkout without an install
    __version__ = "0.0.0"

__all__: list[str] = ["__version__"]
