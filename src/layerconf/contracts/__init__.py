"""Resolution contracts: the error taxonomy and fail-fast preconditions.

Key principle:
- Pydantic validates resolver options
- Contracts reject bad targets, schemas and inputs before anything is written
- Provider absence (no file, no variable) is never an error
"""

from layerconf.contracts.failure import (
    ConfigError,
    NilTarget,
    InvalidTarget,
    SchemaError,
    UnsupportedFieldType,
    ConflictingOptions,
    CoercionError,
    FileParseError,
    RequiredFieldEmpty,
)
from layerconf.contracts.base import require

__all__ = [
    "ConfigError",
    "NilTarget",
    "InvalidTarget",
    "SchemaError",
    "UnsupportedFieldType",
    "ConflictingOptions",
    "CoercionError",
    "FileParseError",
    "RequiredFieldEmpty",
    "require",
]
