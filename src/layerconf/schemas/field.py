"""Field schema extraction.

A schema is built once from an explicit declarative table supplied by the
caller. Each row names a field, its scalar kind, its default text, the key
used to look it up in the environment, and whether it is required.

Rows may be given as mappings, as positional tuples, or as ready-made
FieldDescriptor instances::

    FIELDS = [
        {"name": "Name", "kind": "text", "default": "defaultStr", "required": True},
        {"name": "Count", "kind": int, "default": "42", "env": "APP_COUNT"},
        ("Debug", "boolean", "false"),
    ]
    schema = extract_schema(FIELDS)
"""

from collections.abc import Mapping
from typing import Any, Iterable, Iterator, Optional, Union

from pydantic import model_validator

from layerconf.coercion import FieldKind, encode, kind_of, parse_bool
from layerconf.contracts import SchemaError, UnsupportedFieldType, require
from layerconf.schemas.base import LayerconfBaseModel


_KIND_ALIASES = {
    "text": FieldKind.TEXT,
    "str": FieldKind.TEXT,
    "string": FieldKind.TEXT,
    "integer": FieldKind.INTEGER,
    "int": FieldKind.INTEGER,
    "int64": FieldKind.INTEGER,
    "float": FieldKind.FLOAT,
    "float64": FieldKind.FLOAT,
    "double": FieldKind.FLOAT,
    "boolean": FieldKind.BOOLEAN,
    "bool": FieldKind.BOOLEAN,
}

_PYTHON_TYPES = {
    str: FieldKind.TEXT,
    int: FieldKind.INTEGER,
    float: FieldKind.FLOAT,
    bool: FieldKind.BOOLEAN,
}

_ROW_KEYS = ("name", "kind", "default", "env", "required")
_ROW_ALIASES = {"source_key": "env", "default_text": "default"}


class FieldDescriptor(LayerconfBaseModel):
    """One configuration field. Immutable once extracted."""

    name: str
    kind: FieldKind
    source_key: str
    default_text: str = ""
    required: bool = False

    model_config = LayerconfBaseModel.model_config.copy()
    model_config.update({"frozen": True})


class ConfigSchema(LayerconfBaseModel):
    """Ordered, immutable collection of field descriptors.

    Field names are unique; iteration follows declaration order.
    """

    descriptors: tuple[FieldDescriptor, ...] = ()

    model_config = LayerconfBaseModel.model_config.copy()
    model_config.update({"frozen": True})

    @model_validator(mode="after")
    def names_are_unique(self):
        """Every field name is the merge key across providers."""
        seen = set()
        for descriptor in self.descriptors:
            if descriptor.name in seen:
                raise SchemaError(f"duplicate field name {descriptor.name}")
            seen.add(descriptor.name)
        return self

    def __iter__(self) -> Iterator[FieldDescriptor]:
        return iter(self.descriptors)

    def __len__(self) -> int:
        return len(self.descriptors)

    def __contains__(self, name) -> bool:
        return any(descriptor.name == name for descriptor in self.descriptors)

    def get(self, name: str) -> Optional[FieldDescriptor]:
        for descriptor in self.descriptors:
            if descriptor.name == name:
                return descriptor
        return None

    @property
    def names(self) -> list[str]:
        return [descriptor.name for descriptor in self.descriptors]

    def default_texts(self) -> dict[str, str]:
        """Map every field name to its compiled-in default text."""
        return {descriptor.name: descriptor.default_text for descriptor in self.descriptors}


def normalize_kind(field: str, kind: Any) -> FieldKind:
    """Map a declared kind onto FieldKind.

    Accepts FieldKind members, kind names and their aliases (``str``,
    ``int64``, ``bool`` ...) and the Python types str, int, float and bool.

    Raises
    ------
    UnsupportedFieldType
        For anything else, naming the offending field.
    """
    if isinstance(kind, FieldKind):
        return kind
    if isinstance(kind, type):
        if kind in _PYTHON_TYPES:
            return _PYTHON_TYPES[kind]
        raise UnsupportedFieldType(field, kind.__name__)
    if isinstance(kind, str) and kind.strip().lower() in _KIND_ALIASES:
        return _KIND_ALIASES[kind.strip().lower()]
    raise UnsupportedFieldType(field, kind)


def parse_required(flag: Any) -> bool:
    """A field is required only if its flag reads as boolean true.

    Missing or unparsable flags mean "not required"; they never raise.
    """
    if flag is None:
        return False
    if isinstance(flag, bool):
        return flag
    try:
        return parse_bool(str(flag).strip())
    except ValueError:
        return False


def _default_text(field: str, default: Any) -> str:
    if default is None:
        return ""
    if isinstance(default, str):
        return default
    if kind_of(default) is not None:
        return encode(default)
    raise SchemaError(f"default for field {field} must be text or a scalar, got {type(default).__name__}")


def _row_to_mapping(row: Union[Mapping, tuple, list]) -> dict:
    if isinstance(row, Mapping):
        mapping = {}
        for key, value in row.items():
            key = _ROW_ALIASES.get(key, key)
            if key not in _ROW_KEYS:
                raise SchemaError(f"unknown field attribute {key!r} in row {dict(row)!r}")
            mapping[key] = value
        return mapping
    if isinstance(row, (tuple, list)):
        if not 2 <= len(row) <= len(_ROW_KEYS):
            raise SchemaError(
                f"positional field row needs 2 to {len(_ROW_KEYS)} items "
                f"(name, kind, default, env, required), got {row!r}"
            )
        return dict(zip(_ROW_KEYS, row))
    raise SchemaError(f"field row must be a mapping, tuple or FieldDescriptor, got {type(row).__name__}")


def build_descriptor(row) -> FieldDescriptor:
    """Build one FieldDescriptor from a table row."""
    if isinstance(row, FieldDescriptor):
        return row

    mapping = _row_to_mapping(row)
    name = mapping.get("name")
    require(
        isinstance(name, str) and name.isidentifier(),
        f"field name must be an identifier, got {name!r}",
        SchemaError,
    )
    require("kind" in mapping, f"field {name} declares no kind", SchemaError)

    kind = normalize_kind(name, mapping["kind"])
    source_key = mapping.get("env") or name

    return FieldDescriptor(
        name=name,
        kind=kind,
        source_key=str(source_key),
        default_text=_default_text(name, mapping.get("default")),
        required=parse_required(mapping.get("required")),
    )


def extract_schema(table: Union[ConfigSchema, Iterable]) -> ConfigSchema:
    """Produce the ordered schema for a declarative field table.

    Parameters
    ----------
    table : ConfigSchema or iterable of rows
        An existing schema (returned unchanged) or the field table.

    Returns
    -------
    ConfigSchema
        Descriptors in declaration order.

    Raises
    ------
    UnsupportedFieldType
        If a row declares a kind other than text, integer, float, boolean.
    SchemaError
        If the table is missing, a row is malformed, or names repeat.
    """
    if isinstance(table, ConfigSchema):
        return table
    require(table is not None, "field table must not be None", SchemaError)
    require(
        not isinstance(table, (str, bytes, Mapping)),
        "field table must be a sequence of rows",
        SchemaError,
    )

    return ConfigSchema(descriptors=tuple(build_descriptor(row) for row in table))
