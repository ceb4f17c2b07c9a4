from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

"""Processing result models for a batch import run.

Aggregates per-file outcomes into the figures printed on the SUMMARY line.
"""


class FileStatus(Enum):
    """Status of one CSV file in a batch run.

    - SUCCESS: file read and every row went through the pipeline
    - FAILED: file-level failure (unreadable, malformed), nothing imported
    - SKIPPED: no file mapping configured for this file name
    """
    SUCCESS = "success"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class FileStat:
    """Per-file statistics (internal helper for ProcessingResult)."""
    file_name: str
    entity: str | None
    status: str  # FileStatus value
    total_rows: int
    imported_rows: int
    skipped_rows: int
    row_errors: int
    elapsed_seconds: float
    error: str | None = None  # File-level failure reason


@dataclass(frozen=True)
class ProcessingResult:
    """Aggregated results of a batch run, used for the SUMMARY line."""
    success_files: int
    failed_files: int
    total_rows: int  # Data rows seen in successfully read files
    imported_rows: int
    skipped_rows: int  # Rejected by validation
    row_errors: int  # Processor raised
    skipped_files: int  # CSV files without mapping
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    throughput_rows_per_sec: float  # total_rows / elapsed
    file_stats: list[FileStat] | None = None
