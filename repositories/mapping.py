"""
repositories/mapping.py
-----------------------
Helpers shared by the row mappers.
Rows come from a RealDictCursor, so columns are read by name.
"""

from typing import Any, Mapping


def text_or_empty(row: Mapping[str, Any], column: str) -> str:
    """Read a text column, turning SQL NULL into an empty string."""
    value = row.get(column)
    return "" if value is None else str(value)


def flag_or_false(row: Mapping[str, Any], column: str) -> bool:
    """Read a boolean column, turning SQL NULL into False."""
    return bool(row.get(column))


def is_null(row: Mapping[str, Any], column: str) -> bool:
    """True when the column holds SQL NULL (or was not selected at all)."""
    return row.get(column) is None
