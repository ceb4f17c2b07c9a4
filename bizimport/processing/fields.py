from __future__ import annotations

from ..models.row_data import Row

"""Field access and presence validation over a single row.

Header names are matched case-insensitively. The lookup scans the row keys;
import files are small enough that no per-row index is built.
"""

__all__ = [
    "get_value",
    "get_optional_value",
    "required_present",
    "missing_fields",
]


def _lookup(row: Row, key: str) -> str | None:
    wanted = key.casefold()
    for header, value in row.items():
        if header.casefold() == wanted:
            return "" if value is None else str(value).strip()
    return None


def get_value(row: Row, key: str, *aliases: str) -> str:
    """Return the trimmed value of ``key`` (or the first present alias).

    Absent keys and empty cells both give "".
    """
    for candidate in (key, *aliases):
        value = _lookup(row, candidate)
        if value is not None:
            return value
    return ""


def get_optional_value(row: Row, key: str, *aliases: str) -> str | None:
    """Like get_value, but an empty result means absent (None)."""
    value = get_value(row, key, *aliases)
    return value or None


def required_present(*values: str | None) -> bool:
    """True only if every value is non-empty after trimming."""
    return all(v is not None and v.strip() != "" for v in values)


def missing_fields(**named_values: str | None) -> list[str]:
    """Names of the values that fail required_present, in argument order."""
    return [name for name, v in named_values.items() if not required_present(v)]
