from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import UTC, datetime
from pathlib import Path
from typing import Protocol

from ..csv.reader import CsvReadError, read_csv_rows
from ..logging.error_log import ErrorLogBuffer
from ..models.config_models import DEFAULT_DELIMITER, DEFAULT_ENCODING, ImportConfig
from ..models.error_record import FILE_LEVEL_ROW, ErrorRecord
from ..models.import_outcome import DiagnosticKind, ImportOutcome, RowDiagnostic
from ..models.processing_result import FileStat, FileStatus, ProcessingResult
from ..models.records import DomainRecord
from ..models.row_data import Row, RowData
from ..processing.processors import Rejection, RowProcessor, get_processor
from .progress import ProgressTracker

logger = logging.getLogger(__name__)

"""Import orchestration.

``import_rows`` is the per-row fold: every row goes through the bound row
processor; accepted records are kept in file order, rejections and processor
exceptions become RowDiagnostics and never abort the import. ``import_file``
puts the CSV reader in front of it; only file-level failures (CsvReadError)
reach the caller.

``process_all`` drives a whole directory from the import config, hands the
records of each file to an optional persistence sink and writes diagnostics to
the JSON Lines error log.
"""

__all__ = [
    "ProcessingError",
    "RecordSink",
    "import_rows",
    "import_file",
    "import_entity_file",
    "scan_csv_files",
    "process_all",
]


class ProcessingError(Exception):
    """Fatal batch error (e.g. source directory missing)."""


class RecordSink(Protocol):
    """Persistence collaborator: stores records and assigns their identifiers."""

    def save(self, entity: str, records: Sequence[DomainRecord]) -> None: ...


def import_rows(
    rows: Iterable[RowData | Row],
    processor: RowProcessor,
    *,
    source: str = "<memory>",
) -> ImportOutcome:
    """Run every row through ``processor`` and collect the outcome.

    Row numbers are the 1-based positions in ``rows``.
    """
    row_list = list(rows)
    outcome = ImportOutcome(total_rows=len(row_list))
    if not row_list:
        logger.info("%s: no data found", source)
        return outcome

    for row_number, row in enumerate(row_list, start=1):
        values = row.values if isinstance(row, RowData) else row
        try:
            result = processor(values)
        except Exception as e:
            message = str(e) or type(e).__name__
            outcome.diagnostics.append(RowDiagnostic(row_number, DiagnosticKind.ROW_ERROR, message))
            logger.error("%s: error processing row %d: %s", source, row_number, message)
            continue

        if result is None:
            result = Rejection.invalid("rejected by row processor")
        if isinstance(result, Rejection):
            outcome.diagnostics.append(RowDiagnostic(row_number, result.kind, result.reason))
            logger.warning("%s: row %d skipped: %s", source, row_number, result.reason)
            continue

        outcome.records.append(result)

    logger.info("%s: imported %d of %d rows", source, outcome.imported, outcome.total_rows)
    return outcome


def import_file(
    path: Path | str,
    processor: RowProcessor,
    *,
    delimiter: str = DEFAULT_DELIMITER,
    encoding: str = DEFAULT_ENCODING,
) -> ImportOutcome:
    """Import one CSV file with the given row processor.

    Raises:
        CsvReadError: the file cannot be read or parsed
    """
    path = Path(path)
    rows = read_csv_rows(path, delimiter=delimiter, encoding=encoding)
    return import_rows(rows, processor, source=path.name)


def import_entity_file(
    path: Path | str,
    entity: str,
    *,
    delimiter: str = DEFAULT_DELIMITER,
    encoding: str = DEFAULT_ENCODING,
) -> ImportOutcome:
    """import_file with the processor registered for ``entity``.

    Raises:
        UnknownEntityError: no processor for ``entity``
        CsvReadError: the file cannot be read or parsed
    """
    return import_file(path, get_processor(entity), delimiter=delimiter, encoding=encoding)


def scan_csv_files(directory: Path) -> list[Path]:
    """Return the .csv files of ``directory`` (non-recursive), sorted by name.

    Raises:
        ProcessingError: directory missing, not a directory or unreadable
    """
    if not directory.exists():
        raise ProcessingError(f"Directory not found: {directory}")

    if not directory.is_dir():
        raise ProcessingError(f"Path is not a directory: {directory}")

    try:
        return sorted(
            (p for p in directory.iterdir() if p.is_file() and p.suffix.lower() == ".csv"),
            key=lambda p: p.name,
        )
    except OSError as e:
        raise ProcessingError(f"Error reading directory {directory}: {e}") from e


def process_all(config: ImportConfig, sink: RecordSink | None = None) -> ProcessingResult:
    """Import every mapped CSV file of the configured directory.

    1. Scan the directory for .csv files
    2. Import each mapped file; unmapped files are counted as skipped
    3. Hand accepted records to ``sink`` (if any), one call per file
    4. Flush row diagnostics and file failures to the error log

    A file that cannot be read, or whose records the sink refuses, is counted
    as failed and the run continues with the next file.

    Raises:
        ProcessingError: the source directory cannot be scanned
    """
    start_time = datetime.now(UTC)
    error_log = ErrorLogBuffer(config.log_directory)

    file_paths = scan_csv_files(Path(config.source_directory))

    file_stats: list[FileStat] = []
    with ProgressTracker(len(file_paths)) as progress:
        for file_path in file_paths:
            progress.start_file(file_path)
            stat = _process_single_file(file_path, config, error_log, sink)
            file_stats.append(stat)
            progress.finish_file(stat)

    try:
        log_path = error_log.flush()
    except OSError as e:
        logger.warning("could not write error log: %s", e)
    else:
        if log_path is not None:
            logger.info("row diagnostics written to %s", log_path)

    end_time = datetime.now(UTC)
    elapsed_seconds = (end_time - start_time).total_seconds()

    succeeded = [s for s in file_stats if s.status == FileStatus.SUCCESS.value]
    total_rows = sum(s.total_rows for s in succeeded)
    throughput_rps = total_rows / elapsed_seconds if elapsed_seconds > 0 else 0.0

    return ProcessingResult(
        success_files=len(succeeded),
        failed_files=sum(1 for s in file_stats if s.status == FileStatus.FAILED.value),
        total_rows=total_rows,
        imported_rows=sum(s.imported_rows for s in succeeded),
        skipped_rows=sum(s.skipped_rows for s in succeeded),
        row_errors=sum(s.row_errors for s in succeeded),
        skipped_files=sum(1 for s in file_stats if s.status == FileStatus.SKIPPED.value),
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=elapsed_seconds,
        throughput_rows_per_sec=throughput_rps,
        file_stats=file_stats,
    )


def _failed_stat(file_path: Path, entity: str, started: datetime, error: str) -> FileStat:
    return FileStat(
        file_name=file_path.name,
        entity=entity,
        status=FileStatus.FAILED.value,
        total_rows=0,
        imported_rows=0,
        skipped_rows=0,
        row_errors=0,
        elapsed_seconds=(datetime.now(UTC) - started).total_seconds(),
        error=error,
    )


def _process_single_file(
    file_path: Path,
    config: ImportConfig,
    error_log: ErrorLogBuffer,
    sink: RecordSink | None,
) -> FileStat:
    started = datetime.now(UTC)

    mapping = config.mapping_for(file_path.name)
    if mapping is None:
        logger.info("%s: no file mapping, skipped", file_path.name)
        return FileStat(
            file_name=file_path.name,
            entity=None,
            status=FileStatus.SKIPPED.value,
            total_rows=0,
            imported_rows=0,
            skipped_rows=0,
            row_errors=0,
            elapsed_seconds=0.0,
        )

    entity = mapping.entity
    try:
        outcome = import_file(
            file_path,
            get_processor(entity),
            delimiter=config.delimiter,
            encoding=config.encoding,
        )
    except CsvReadError as e:
        logger.error("%s: %s", file_path.name, e)
        error_log.append(
            ErrorRecord.create(file_path.name, entity, FILE_LEVEL_ROW, "FILE_READ_ERROR", str(e))
        )
        return _failed_stat(file_path, entity, started, str(e))

    for diagnostic in outcome.diagnostics:
        error_log.append(ErrorRecord.from_diagnostic(file_path.name, entity, diagnostic))

    if sink is not None and outcome.records:
        try:
            sink.save(entity, list(outcome.records))
        except Exception as e:
            logger.error("%s: saving %d %s records failed: %s", file_path.name, outcome.imported, entity, e)
            error_log.append(
                ErrorRecord.create(file_path.name, entity, FILE_LEVEL_ROW, "SINK_ERROR", str(e))
            )
            return _failed_stat(file_path, entity, started, f"sink failed: {e}")

    return FileStat(
        file_name=file_path.name,
        entity=entity,
        status=FileStatus.SUCCESS.value,
        total_rows=outcome.total_rows,
        imported_rows=outcome.imported,
        skipped_rows=outcome.skipped,
        row_errors=outcome.row_errors,
        elapsed_seconds=(datetime.now(UTC) - started).total_seconds(),
    )
