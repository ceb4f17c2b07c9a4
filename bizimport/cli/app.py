from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from ..config.loader import DEFAULT_CONFIG_PATH, ConfigError, load_config
from ..csv.reader import CsvReadError, read_csv_columns, read_csv_rows
from ..logging.init import log_summary, setup_logging
from ..models.config_models import DEFAULT_DELIMITER, DEFAULT_ENCODING, ImportConfig
from ..processing.processors import PROCESSORS
from ..services.orchestrator import ProcessingError, import_entity_file, process_all, scan_csv_files
from ..services.summary import render_outcome_line, render_summary_line

"""CLI entrypoint.

Batch mode (default): load the config, import every mapped CSV file of the
source directory, print a SUMMARY line.
Single-file mode (--file/--entity): import one file and print its diagnostics.
"""

EXIT_SUCCESS_ALL = 0
EXIT_PARTIAL_FAILURE = 2
EXIT_FATAL = 1

CONFIG_ENV_VAR = "BIZIMPORT_CONFIG"
SUMMARY_PREFIX = "SUMMARY "


def _load_env_file(path: Path) -> None:
    """Load .env without overriding variables already set in the environment."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=False)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="bizimport",
        description="Import workers, clients and products from CSV files",
    )
    p.add_argument("--config", type=Path, default=None,
                   help=f"Config file (default: ${CONFIG_ENV_VAR} or {DEFAULT_CONFIG_PATH})")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect-data", action="store_true",
                   help="Print headers & first rows of every CSV file then exit")
    p.add_argument("--file", type=Path, default=None, help="Import a single CSV file")
    p.add_argument("--entity", choices=sorted(PROCESSORS), help="Entity of the rows in --file")
    p.add_argument("--delimiter", default=DEFAULT_DELIMITER, help="Field separator for --file")
    p.add_argument("--encoding", default=DEFAULT_ENCODING, help="Text encoding for --file")
    args = p.parse_args(argv)
    if args.file is not None and args.entity is None:
        p.error("--file requires --entity")
    return args


def _resolve_config_path(args: argparse.Namespace) -> Path:
    if args.config is not None:
        return args.config
    env_path = os.getenv(CONFIG_ENV_VAR)
    return Path(env_path) if env_path else DEFAULT_CONFIG_PATH


def _inspect_data(cfg: ImportConfig) -> int:
    try:
        files = scan_csv_files(Path(cfg.source_directory))
    except ProcessingError as e:
        print(f"inspect: {e}")
        return EXIT_FATAL
    if not files:
        print("inspect: no .csv files")
        return EXIT_SUCCESS_ALL
    for f in files:
        mapping = cfg.mapping_for(f.name)
        print(f"FILE: {f.name} entity={mapping.entity if mapping else '-'}")
        try:
            columns = read_csv_columns(f, delimiter=cfg.delimiter, encoding=cfg.encoding)
            sample = read_csv_rows(f, delimiter=cfg.delimiter, encoding=cfg.encoding)[:3]
        except CsvReadError as e:
            print(f"  read_error: {e}")
            continue
        print(f"  cols={columns}")
        print("  sample_rows=", [r.values for r in sample])
    return EXIT_SUCCESS_ALL


def _import_single(args: argparse.Namespace) -> int:
    logger = setup_logging()
    try:
        outcome = import_entity_file(
            args.file, args.entity, delimiter=args.delimiter, encoding=args.encoding
        )
    except CsvReadError as e:
        logger.error(f"file: {e}")
        return EXIT_FATAL
    log_summary(render_outcome_line(args.file.name, outcome)[len(SUMMARY_PREFIX):])
    return EXIT_SUCCESS_ALL


def main(argv: list[str] | None = None) -> int:
    # Only read sys.argv when no list was given; [] means "no arguments"
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    logger = setup_logging(debug=args.debug)
    logger.debug("debug mode enabled")

    _load_env_file(Path(".env"))

    if args.file is not None:
        return _import_single(args)

    config_path = _resolve_config_path(args)
    try:
        cfg = load_config(config_path)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    directory = Path(cfg.source_directory)
    if not directory.exists():
        logger.error(f"directory not found: {directory}")
        return EXIT_FATAL

    if args.inspect_data:
        return _inspect_data(cfg)

    logger.info(f"Importing files from: {directory}")
    try:
        result = process_all(cfg)
    except ProcessingError as e:
        logger.error(f"processing: {e}")
        return EXIT_FATAL

    total_files = result.success_files + result.failed_files
    summary_line = render_summary_line(total_files, result)
    log_summary(summary_line[len(SUMMARY_PREFIX):])

    # Row-level skips never change the exit code; only file failures do
    if result.failed_files > 0:
        return EXIT_PARTIAL_FAILURE
    return EXIT_SUCCESS_ALL
