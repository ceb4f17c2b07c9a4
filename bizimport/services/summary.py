from __future__ import annotations

from ..models.import_outcome import ImportOutcome
from ..models.processing_result import ProcessingResult

"""SUMMARY line rendering for batch runs and single-file imports."""


def _format_number(value: float) -> str:
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        # Avoid scientific notation for very small values
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return str(round(value, 3))


def render_summary_line(total_files: int, result: ProcessingResult) -> str:
    """Render the SUMMARY line of a batch run.

    Format:
    SUMMARY files={total}/{total} success={s} failed={f} rows={rows}
    imported={imported} skipped={skipped} row_errors={errors}
    skipped_files={unmapped} elapsed_sec={elapsed} throughput_rps={throughput}

    Examples:
        >>> from datetime import datetime, timezone
        >>> start = datetime(2024, 1, 1, 10, 0, 0, tzinfo=timezone.utc)
        >>> end = datetime(2024, 1, 1, 10, 0, 2, tzinfo=timezone.utc)
        >>> result = ProcessingResult(
        ...     success_files=1, failed_files=0, total_rows=10, imported_rows=8,
        ...     skipped_rows=2, row_errors=0, skipped_files=0, start_time=start,
        ...     end_time=end, elapsed_seconds=2.0, throughput_rows_per_sec=5.0
        ... )
        >>> render_summary_line(1, result)  # doctest: +ELLIPSIS
        'SUMMARY files=1/1 success=1 failed=0 rows=10 imported=8 skipped=2 row_errors=0 ...'
    """
    return (
        f"SUMMARY files={total_files}/{total_files} "
        f"success={result.success_files} "
        f"failed={result.failed_files} "
        f"rows={result.total_rows} "
        f"imported={result.imported_rows} "
        f"skipped={result.skipped_rows} "
        f"row_errors={result.row_errors} "
        f"skipped_files={result.skipped_files} "
        f"elapsed_sec={_format_number(result.elapsed_seconds)} "
        f"throughput_rps={_format_number(result.throughput_rows_per_sec)}"
    )


def render_outcome_line(file_name: str, outcome: ImportOutcome) -> str:
    """One-line summary of a single import, e.g. for the presentation layer."""
    return (
        f"SUMMARY file={file_name} rows={outcome.total_rows} "
        f"imported={outcome.imported} "
        f"skipped_missing={outcome.skipped_missing} "
        f"skipped_invalid={outcome.skipped_invalid} "
        f"row_errors={outcome.row_errors}"
    )
