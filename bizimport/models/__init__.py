"""Domain models for the CSV import tool.

This package contains the row, record, diagnostic, configuration and result
classes used throughout the application.
"""

from .config_models import FileMappingConfig, ImportConfig
from .error_record import ErrorRecord
from .import_outcome import DiagnosticKind, ImportOutcome, RowDiagnostic
from .processing_result import FileStat, FileStatus, ProcessingResult
from .records import WORKER_ROLES, Client, DomainRecord, Product, Worker
from .row_data import Row, RowData

__all__ = [
    # Configuration models
    "FileMappingConfig",
    "ImportConfig",
    # Rows and records
    "Row",
    "RowData",
    "WORKER_ROLES",
    "Worker",
    "Client",
    "Product",
    "DomainRecord",
    # Outcome and diagnostics
    "DiagnosticKind",
    "RowDiagnostic",
    "ImportOutcome",
    "ErrorRecord",
    # Batch results
    "FileStat",
    "FileStatus",
    "ProcessingResult",
]
