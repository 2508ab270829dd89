"""Configuration resolution and merging logic.

This module provides the single entrypoint for configuration resolution:
resolve_config(). It merges the raw text of every source in the requested
precedence order, coerces it into typed values, validates required fields
and only then writes the result into the caller's record.

Precedence (lowest to highest):
1. Defaults (compiled-in, or the caller's replacement mapping)
2. First source of the read mode (environment or file)
3. Second source of the read mode, if any
"""

import dataclasses
import inspect
import logging
from collections.abc import Mapping, MutableMapping
from typing import Any, Callable, Optional, Union

from pydantic import BaseModel

from layerconf.coercion import FieldKind, Scalar, decode
from layerconf.contracts import InvalidTarget, NilTarget, RequiredFieldEmpty, require
from layerconf.providers.defaults import DefaultsProvider
from layerconf.providers.environment import EnvironmentProvider, bootstrap_environment
from layerconf.providers.file import FileProvider
from layerconf.schemas.field import ConfigSchema, extract_schema
from layerconf.schemas.options import ResolveOptions, Source

logger = logging.getLogger(__name__)

Provider = Callable[[ConfigSchema], Optional[Mapping[str, str]]]


def merge_raw_values(base: dict, *overrides: Optional[Mapping[str, str]]) -> dict:
    """Overlay raw value mappings.

    Later mappings override earlier ones key by key; keys a later mapping
    does not define keep their earlier value. None stands for a source
    with nothing to offer and changes nothing.

    Examples
    --------
    >>> merge_raw_values({"a": "1", "b": "2"}, {"b": "3"}, None, {"c": ""})
    {'a': '1', 'b': '3', 'c': ''}
    """
    result = base.copy()

    for override in overrides:
        if override is None:
            continue
        for key, value in override.items():
            result[key] = value

    return result


def _coerce_options(options, option_kwargs: dict) -> ResolveOptions:
    if options is None:
        return ResolveOptions.model_validate(option_kwargs)
    if not isinstance(options, ResolveOptions):
        return ResolveOptions.model_validate({**dict(options), **option_kwargs})
    if option_kwargs:
        return ResolveOptions.model_validate({**options.model_dump(), **option_kwargs})
    return options


def build_providers(options: ResolveOptions, environ: Optional[Mapping[str, str]] = None) -> dict:
    """Create the stock provider for each source."""
    return {
        Source.ENVIRONMENT: EnvironmentProvider(environ),
        Source.FILE: FileProvider(options.file_path, options.search_paths),
    }


def check_required(schema: ConfigSchema, values: Mapping[str, Scalar]) -> None:
    """Fail if a required text field resolved to an empty string.

    Only text fields can be empty; a zero number or False is a value.

    Raises
    ------
    RequiredFieldEmpty
        Naming the first offending field in declaration order.
    """
    for descriptor in schema:
        if descriptor.required and descriptor.kind is FieldKind.TEXT:
            if len(values[descriptor.name]) == 0:
                raise RequiredFieldEmpty(descriptor.name)


def resolve_values(
    fields: Union[ConfigSchema, Any],
    options: Optional[ResolveOptions] = None,
    providers: Optional[Mapping[Source, Provider]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> dict[str, Scalar]:
    """Resolve typed values for every field without touching any record.

    Parameters
    ----------
    fields : ConfigSchema or field table
        Schema, or the declarative table to extract it from.
    options : ResolveOptions, optional
        Read mode, file and default replacement. Defaults to ResolveOptions().
    providers : mapping of Source to provider, optional
        Replaces the stock provider for the given sources.
    environ : mapping, optional
        Environment to read instead of ``os.environ``. No dotenv file is
        loaded when given.

    Returns
    -------
    dict
        One typed value per field, keyed by field name, in declaration order.

    Raises
    ------
    CoercionError
        If a raw value does not fit its field's kind.
    FileParseError
        If the config file exists but is malformed.
    RequiredFieldEmpty
        If a required text field resolved to an empty string.
    """
    schema = extract_schema(fields)
    if options is None:
        options = ResolveOptions()

    sources = build_providers(options, environ)
    if providers:
        sources.update({Source(source): provider for source, provider in providers.items()})

    if (
        options.dotenv
        and environ is None
        and Source.ENVIRONMENT in options.precedence
        and isinstance(sources[Source.ENVIRONMENT], EnvironmentProvider)
    ):
        bootstrap_environment(options.dotenv_path)

    # Defaults always go first so later sources only overwrite
    raw = DefaultsProvider(options.new_defaults)(schema)

    for source in options.precedence:
        supplied = sources[source](schema)
        if supplied is None:
            logger.debug("Source %s supplied nothing", source.value)
        raw = merge_raw_values(raw, supplied)

    resolved = {}
    for descriptor in schema:
        if descriptor.name not in raw:
            resolved[descriptor.name] = descriptor.kind.zero_value
            continue
        resolved[descriptor.name] = decode(raw[descriptor.name].strip(), descriptor.kind, descriptor.name)

    check_required(schema, resolved)
    return resolved


def _is_read_only(cls, name: str) -> bool:
    attr = inspect.getattr_static(cls, name, None)
    return isinstance(attr, property) and attr.fset is None


def check_target(target: Any, schema: Optional[ConfigSchema] = None) -> None:
    """Verify that ``target`` can receive resolved values.

    Accepted targets are mutable mappings, non-frozen dataclass and
    Pydantic model instances, and plain objects with an instance
    ``__dict__``. With a schema, dataclass and Pydantic targets must also
    declare every field, and no field may be a read-only property.

    Raises
    ------
    NilTarget
        If target is None.
    InvalidTarget
        For classes, read-only or frozen records, and missing fields.
    """
    require(target is not None, "target record must not be None", NilTarget)
    require(
        not isinstance(target, type),
        f"target must be a record instance, got the class {getattr(target, '__name__', target)}",
        InvalidTarget,
    )
    type_name = type(target).__name__

    if isinstance(target, Mapping):
        require(isinstance(target, MutableMapping), f"target mapping {type_name} is read-only", InvalidTarget)
        return

    if isinstance(target, BaseModel):
        require(not target.model_config.get("frozen", False), f"target model {type_name} is frozen", InvalidTarget)
        declared = set(type(target).model_fields)
    elif dataclasses.is_dataclass(target):
        require(not type(target).__dataclass_params__.frozen, f"target dataclass {type_name} is frozen", InvalidTarget)
        declared = {field.name for field in dataclasses.fields(target)}
    else:
        require(hasattr(target, "__dict__"), f"target of type {type_name} cannot hold attributes", InvalidTarget)
        declared = None

    if schema is not None:
        if declared is not None:
            missing = [name for name in schema.names if name not in declared]
            require(not missing, f"target {type_name} does not declare fields {missing}", InvalidTarget)
        read_only = [name for name in schema.names if _is_read_only(type(target), name)]
        require(not read_only, f"target {type_name} has read-only attributes {read_only}", InvalidTarget)


def commit(target: Any, schema: ConfigSchema, values: Mapping[str, Scalar]) -> None:
    """Write resolved values into the target, field by field.

    check_target() has already rejected targets it can tell are unwritable.
    A setter that raises here still leaves earlier fields written.
    """
    is_mapping = isinstance(target, MutableMapping)
    for descriptor in schema:
        value = values[descriptor.name]
        if is_mapping:
            target[descriptor.name] = value
        else:
            setattr(target, descriptor.name, value)


def resolve_config(
    target: Any,
    fields: Union[ConfigSchema, Any],
    options: Optional[Union[ResolveOptions, dict]] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
    providers: Optional[Mapping[Source, Provider]] = None,
    **option_kwargs,
):
    """Resolve configuration into ``target``.

    This is the SINGLE ENTRYPOINT for configuration resolution. It checks
    the target, extracts the schema, merges defaults, environment and file
    according to the read mode, coerces and validates, and commits only if
    every step succeeded. On any error the target is left unmodified.

    Parameters
    ----------
    target : object or mutable mapping
        Caller-owned record receiving one value per field.
    fields : ConfigSchema or field table
        The declarative field table (see layerconf.schemas.field).
    options : ResolveOptions or dict, optional
        Resolution options. Keyword arguments are merged on top, so
        ``resolve_config(cfg, FIELDS, read_mode="yaml-only")`` works too.
    environ : mapping, optional
        Environment to read instead of ``os.environ``.
    providers : mapping of Source to provider, optional
        Replacement providers for individual sources.

    Returns
    -------
    object
        The same ``target``, populated.

    Raises
    ------
    NilTarget, InvalidTarget
        If the target cannot receive values.
    SchemaError, UnsupportedFieldType
        If the field table is malformed.
    ConflictingOptions
        If the options contradict each other.
    CoercionError, FileParseError, RequiredFieldEmpty
        If resolution fails.

    Examples
    --------
    >>> FIELDS = [
    ...     {"name": "Name", "kind": "text", "default": "defaultStr", "required": True},
    ...     {"name": "Count", "kind": "integer", "default": "42"},
    ... ]
    >>> cfg = resolve_config({}, FIELDS, read_mode="env-only")
    >>> cfg["Count"]
    42
    """
    check_target(target)
    schema = extract_schema(fields)
    check_target(target, schema)
    options = _coerce_options(options, option_kwargs)

    values = resolve_values(schema, options, providers=providers, environ=environ)
    commit(target, schema, values)

    logger.info("Resolved %d fields (read mode %s)", len(schema), options.read_mode.value)
    return target
