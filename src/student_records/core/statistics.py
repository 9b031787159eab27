"""
Module: statistics

Purpose:
    Aggregate figures over any sequence of records - the full store or a
    filtered view. Every function returns 0 for an empty sequence.

Key Functions:
    - count, average, highest, lowest, pass_rate
    - summarize(): All five figures in one StatsSummary
"""

from __future__ import annotations

import statistics as _stats
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .models.student import Student


def count(students: Sequence[Student]) -> int:
    return len(students)


def average(students: Sequence[Student]) -> float:
    """Arithmetic mean of marks."""
    if not students:
        return 0.0
    return _stats.fmean(s.marks for s in students)


def highest(students: Sequence[Student]) -> float:
    if not students:
        return 0.0
    return max(s.marks for s in students)


def lowest(students: Sequence[Student]) -> float:
    if not students:
        return 0.0
    return min(s.marks for s in students)


def pass_rate(students: Sequence[Student], threshold: float) -> float:
    """
    Percentage of records whose marks reach the threshold.

    Args:
        students: Records to measure
        threshold: Minimum marks that count as a pass (inclusive)

    Returns:
        Value in 0..100
    """
    if not students:
        return 0.0
    passed = sum(1 for s in students if s.marks >= threshold)
    return 100.0 * passed / len(students)


@dataclass(frozen=True)
class StatsSummary:
    """
    Aggregate figures for one view of the records (immutable).

    Example:
        >>> summary = summarize(students, threshold=40.0)
        >>> summary.format_rows()[0]
        ('Total', '4')
    """
    count: int
    average: float
    highest: float
    lowest: float
    pass_rate: float
    threshold: float

    def format_rows(self) -> List[Tuple[str, str]]:
        """Label/value pairs for display, marks to two decimals."""
        return [
            ("Total", str(self.count)),
            ("Average", f"{self.average:.2f}"),
            ("Highest", f"{self.highest:.2f}"),
            ("Lowest", f"{self.lowest:.2f}"),
            (f"Pass Rate (>={self.threshold:g})", f"{self.pass_rate:.2f}%"),
        ]


def summarize(students: Sequence[Student], threshold: float) -> StatsSummary:
    """Compute every aggregate over the same sequence."""
    return StatsSummary(
        count=count(students),
        average=average(students),
        highest=highest(students),
        lowest=lowest(students),
        pass_rate=pass_rate(students, threshold),
        threshold=threshold,
    )
