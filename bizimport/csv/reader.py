from __future__ import annotations

from pathlib import Path
from typing import Any

import pandas as pd

from ..models.config_models import DEFAULT_DELIMITER, DEFAULT_ENCODING
from ..models.row_data import RowData

"""CSV reader: turns an import file into header-keyed rows.

The whole file is read in one blocking call. The first line is the header;
every cell is read as text (no NA conversion) so that "NA" or "null" reach the
row processors unchanged. Files exported from Excel use ';' as separator and
may start with a UTF-8 BOM, both handled by the defaults.
"""

__all__ = [
    "CsvReadError",
    "read_csv_rows",
    "read_csv_columns",
]

BOM = "\ufeff"


class CsvReadError(Exception):
    """Raised when an import file cannot be opened, decoded or parsed."""


def _clean_header(name: Any) -> str:
    return str(name).lstrip(BOM).strip()


def _cell(value: Any) -> str:
    # Short rows are padded by pandas with NaN even when NA filtering is off
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return ""
    return str(value).strip()


def _read_frame(path: Path, delimiter: str, encoding: str, nrows: int | None = None) -> pd.DataFrame | None:
    """Read the file into a DataFrame of strings. None for a completely empty file."""
    try:
        return pd.read_csv(
            path,
            sep=delimiter,
            encoding=encoding,
            dtype=str,
            # Trailing separators would otherwise turn the first column into the index
            index_col=False,
            keep_default_na=False,
            na_filter=False,
            skip_blank_lines=True,
            nrows=nrows,
        )
    except pd.errors.EmptyDataError:
        return None
    except pd.errors.ParserError as e:
        raise CsvReadError(f"malformed csv '{path}': {e}") from e
    except UnicodeDecodeError as e:
        raise CsvReadError(f"cannot decode '{path}' as {encoding}: {e}") from e
    except OSError as e:
        raise CsvReadError(f"cannot read '{path}': {e}") from e


def read_csv_rows(
    path: Path | str,
    delimiter: str = DEFAULT_DELIMITER,
    encoding: str = DEFAULT_ENCODING,
) -> list[RowData]:
    """Read every data row of a CSV file.

    Steps:
    1. Parse the file with the first line as header
    2. Clean header names (BOM, surrounding whitespace)
    3. Trim every cell, missing cells become ""
    4. Number the rows from 1; a line of bare separators is still a row

    Raises:
        CsvReadError: file missing/unreadable/undecodable or structurally malformed
    """
    df = _read_frame(Path(path), delimiter, encoding)
    if df is None:
        return []

    columns = [_clean_header(c) for c in df.columns]
    return [
        RowData(row_number=n, values=dict(zip(columns, (_cell(v) for v in raw), strict=False)))
        for n, raw in enumerate(df.itertuples(index=False, name=None), start=1)
    ]


def read_csv_columns(
    path: Path | str,
    delimiter: str = DEFAULT_DELIMITER,
    encoding: str = DEFAULT_ENCODING,
) -> list[str]:
    """Return the cleaned header names of a CSV file ([] for an empty file)."""
    df = _read_frame(Path(path), delimiter, encoding, nrows=0)
    if df is None:
        return []
    return [_clean_header(c) for c in df.columns]
