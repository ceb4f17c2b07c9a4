from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

"""RowData model for the CSV import pipeline.

RowData is one data line of an import file after header mapping: header name ->
trimmed cell text. It is created by the CSV reader, consumed once by the
orchestrator and then discarded.
"""

__all__ = [
    "Row",
    "RowData",
]

# Header name -> cell value, as handed to the row processors
Row = Mapping[str, str]


@dataclass(frozen=True)
class RowData:
    """Single row of an import file after header processing.

    The row_number is the 1-based position among the data rows (the header line
    is not counted).
    """
    row_number: int  # 1 = first data row
    values: dict[str, str]  # Header name -> trimmed cell value ("" when empty)
