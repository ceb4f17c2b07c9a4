from __future__ import annotations

import codecs
import json
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import (
    DEFAULT_DELIMITER,
    DEFAULT_ENCODING,
    DEFAULT_LOG_DIRECTORY,
    FileMappingConfig,
    ImportConfig,
)

"""Config loader.

Responsibilities:
- Load the YAML config (config/import.yml by default)
- Validate it against the bundled JSON schema
- Apply defaults (delimiter ';', encoding utf-8-sig, log directory ./logs)
"""

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "SCHEMA_PATH",
    "load_config",
]

DEFAULT_CONFIG_PATH = Path("config/import.yml")
SCHEMA_PATH = Path(__file__).with_name("config_schema.json")


class ConfigError(Exception):
    pass


def _validate_config_schema(data: Any) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: schema file missing or not valid JSON, or the config data
            violates the schema (missing keys, wrong types, unknown keys)
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def _check_encoding(name: str) -> None:
    try:
        codecs.lookup(name)
    except LookupError as e:
        raise ConfigError(f"unknown encoding: {name}") from e


def load_config(path: Path) -> ImportConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e

    _validate_config_schema(data)

    encoding = data.get("encoding", DEFAULT_ENCODING)
    _check_encoding(encoding)

    mappings = {
        name: FileMappingConfig(file_name=name, entity=raw["entity"])
        for name, raw in data["file_mappings"].items()
    }
    return ImportConfig(
        source_directory=data["source_directory"],
        file_mappings=mappings,
        delimiter=data.get("delimiter", DEFAULT_DELIMITER),
        encoding=encoding,
        log_directory=data.get("log_directory", DEFAULT_LOG_DIRECTORY),
    )
