"""
Module: core.config

Purpose:
    Application configuration (immutable, validated on construction).

Key Classes:
    - AppConfig: Where records are stored, which fields they carry, and
      the pass threshold used for statistics

Used By:
    - core.service.StudentService
    - gui.main_window.MainWindow
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .models.profile import RecordProfile
from .storage import DEFAULT_CSV_NAME

DEFAULT_PASS_THRESHOLD = 40.0


@dataclass(frozen=True)
class AppConfig:
    """
    Configuration for the record store.

    Attributes:
        csv_path: CSV file used by load/save (relative to the working directory)
        profile: Field set of the records (FULL or MINIMAL)
        pass_threshold: Marks needed to count as a pass in statistics
        seed_when_empty: Add sample students when the store starts empty
        save_on_close: Save to CSV when the main window closes

    Invariants:
        - 0 <= pass_threshold <= 100

    Example:
        >>> config = AppConfig(csv_path=Path("class_10.csv"))
        >>> config.pass_threshold
        40.0
    """

    csv_path: Path = field(default_factory=lambda: Path(DEFAULT_CSV_NAME))
    profile: RecordProfile = RecordProfile.FULL
    pass_threshold: float = DEFAULT_PASS_THRESHOLD
    seed_when_empty: bool = True
    save_on_close: bool = True

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not isinstance(self.csv_path, Path):
            object.__setattr__(self, "csv_path", Path(self.csv_path))
        if not (0.0 <= self.pass_threshold <= 100.0):
            raise ValueError(f"pass_threshold must be within 0..100: {self.pass_threshold}")
