"""`layerconf` - typed configuration from defaults, environment and YAML.

Subpackages:
- schemas: Field tables, resolver options, resolution engine
- providers: Defaults, environment and file sources
- export: Redacted console listing, markdown and example file generation
- contracts: Error taxonomy
"""

__version__ = "0.1.0"

from layerconf.coercion import FieldKind, decode, encode
from layerconf.contracts import (
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
from layerconf.schemas import (
    ConfigSchema,
    FieldDescriptor,
    ReadMode,
    ResolveOptions,
    Source,
    extract_schema,
    init_config,
    resolve_config,
    resolve_values,
)
from layerconf.export import log_config, write_example_file, write_markdown_file

__all__ = [
    'FieldKind',
    'decode',
    'encode',
    'ConfigError',
    'NilTarget',
    'InvalidTarget',
    'SchemaError',
    'UnsupportedFieldType',
    'ConflictingOptions',
    'CoercionError',
    'FileParseError',
    'RequiredFieldEmpty',
    'ConfigSchema',
    'FieldDescriptor',
    'ReadMode',
    'ResolveOptions',
    'Source',
    'extract_schema',
    'init_config',
    'resolve_config',
    'resolve_values',
    'log_config',
    'write_example_file',
    'write_markdown_file',
]
