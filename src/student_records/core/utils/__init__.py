"""
Utils Package

CSV serialization and file locking.
"""

from .csv_codec import (
    serialize,
    deserialize,
    deserialize_rows,
    ParseError,
)

__all__ = [
    "serialize",
    "deserialize",
    "deserialize_rows",
    "ParseError",
]
