from .fields import get_optional_value, get_value, missing_fields, required_present
from .processors import (
    PROCESSORS,
    Rejection,
    RowProcessor,
    UnknownEntityError,
    get_processor,
    process_client,
    process_product,
    process_worker,
)

__all__ = [
    "get_value",
    "get_optional_value",
    "required_present",
    "missing_fields",
    "Rejection",
    "RowProcessor",
    "UnknownEntityError",
    "PROCESSORS",
    "get_processor",
    "process_worker",
    "process_client",
    "process_product",
]
