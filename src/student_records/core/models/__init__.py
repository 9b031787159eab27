"""
Core Models Package

Immutable data models shared by the repository, the CSV codec and the GUI.
"""

from .profile import RecordProfile
from .student import Student, parse_roll_no

__all__ = [
    "RecordProfile",
    "Student",
    "parse_roll_no",
]
