"""Field schemas, resolver options and the resolution engine.

Exports
-------
resolve_config : function
    Single entrypoint for configuration resolution
resolve_values : function
    Resolution into a plain dict, without a target record
init_config : function
    Resolution plus logging and document generation
extract_schema : function
    Build a ConfigSchema from a declarative field table
ConfigSchema, FieldDescriptor : class
    Immutable schema description
ResolveOptions, ReadMode, Source : class
    Precedence policy and source options
"""

from layerconf.schemas.field import ConfigSchema, FieldDescriptor, extract_schema
from layerconf.schemas.options import DEFAULT_FILE_PATHS, ReadMode, ResolveOptions, Source
from layerconf.schemas.resolve import resolve_config, resolve_values
from layerconf.schemas.initialization import init_config

__all__ = [
    'resolve_config',
    'resolve_values',
    'init_config',
    'extract_schema',
    'ConfigSchema',
    'FieldDescriptor',
    'ResolveOptions',
    'ReadMode',
    'Source',
    'DEFAULT_FILE_PATHS',
]
