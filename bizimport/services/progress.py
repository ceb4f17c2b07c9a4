from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from tqdm import tqdm
from tqdm.std import tqdm as TqdmType

from ..models.processing_result import FileStat, FileStatus

"""Progress display with tqdm (TTY only).

One bar over the CSV files of a batch run; the postfix shows the records
imported so far and the number of failed files. Piped output (CI, log files)
gets no bar.
"""

__all__ = [
    "ProgressTracker",
    "is_tty_enabled",
]


def is_tty_enabled() -> bool:
    return sys.stdout.isatty()


class ProgressTracker:
    """File-level progress over a batch run, usable as a context manager.

    Counters are kept even when the bar is disabled.
    """

    def __init__(self, total_files: int, *, label: str = "Importing files") -> None:
        self.total_files = total_files
        self.label = label
        self.files_done = 0
        self.imported = 0
        self.failed = 0
        self.pbar: TqdmType[Any] | None = None
        if is_tty_enabled() and total_files > 0:
            self.pbar = tqdm(total=total_files, desc=label, unit="file", ncols=80, ascii=True)

    @property
    def enabled(self) -> bool:
        return self.pbar is not None

    def start_file(self, file_path: Path) -> None:
        if self.pbar is not None:
            self.pbar.set_description(f"{self.label} [{file_path.name}]")

    def finish_file(self, stat: FileStat) -> None:
        self.files_done += 1
        self.imported += stat.imported_rows
        if stat.status == FileStatus.FAILED.value:
            self.failed += 1
        if self.pbar is not None:
            self.pbar.set_description(self.label)
            self.pbar.set_postfix(imported=self.imported, failed=self.failed)
            self.pbar.update(1)

    def close(self) -> None:
        if self.pbar is not None:
            self.pbar.close()
            self.pbar = None

    def __enter__(self) -> ProgressTracker:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
