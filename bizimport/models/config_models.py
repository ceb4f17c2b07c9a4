from __future__ import annotations

from dataclasses import dataclass, field

"""Config dataclasses for the CSV import tool.

Built by bizimport.config.loader after the YAML file passed schema validation.
"""

DEFAULT_DELIMITER = ";"
DEFAULT_ENCODING = "utf-8-sig"
DEFAULT_LOG_DIRECTORY = "./logs"


@dataclass(frozen=True)
class FileMappingConfig:
    """Binds one CSV file name to the entity its rows are imported as."""
    file_name: str  # CSV file name inside source_directory (key in file_mappings)
    entity: str  # worker | client | product


@dataclass(frozen=True)
class ImportConfig:
    """Root configuration object for a batch import run."""
    source_directory: str  # Directory scanned for *.csv files
    file_mappings: dict[str, FileMappingConfig] = field(default_factory=dict)
    delimiter: str = DEFAULT_DELIMITER
    encoding: str = DEFAULT_ENCODING
    log_directory: str = DEFAULT_LOG_DIRECTORY

    def mapping_for(self, file_name: str) -> FileMappingConfig | None:
        """Case-insensitive lookup of the mapping for a file name."""
        mapping = self.file_mappings.get(file_name)
        if mapping is not None:
            return mapping
        lowered = file_name.lower()
        for name, candidate in self.file_mappings.items():
            if name.lower() == lowered:
                return candidate
        return None
