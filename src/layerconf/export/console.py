"""Redaction-aware listing of a resolved configuration record."""

import logging
from collections.abc import Mapping
from typing import Any, Optional, TextIO

from layerconf.coercion import encode
from layerconf.schemas.field import ConfigSchema, extract_schema

__all__ = ['SENSITIVE_SUFFIXES', 'should_be_masked', 'mask_value', 'read_values', 'format_config', 'log_config']

logger = logging.getLogger(__name__)

SENSITIVE_SUFFIXES = ("PASSWORD", "TOKEN", "API_KEY", "SECRET")

BANNER_START = "### Configuration Start ###"
BANNER_END = "### Configuration End ###"


def should_be_masked(name: str) -> bool:
    """True if the field name ends with a sensitive suffix, in any case."""
    return name.upper().endswith(SENSITIVE_SUFFIXES)


def mask_value(text: str) -> str:
    """Placeholder revealing only the length of ``text``."""
    return f"[Masked - Length: {len(text)}]"


def read_values(record: Any, schema: ConfigSchema) -> dict:
    """Collect the current value of every schema field from a record."""
    if isinstance(record, Mapping):
        return {name: record.get(name) for name in schema.names}
    return {name: getattr(record, name, None) for name in schema.names}


def format_config(record: Any, fields) -> list[str]:
    """Render one line per field, sensitive values masked.

    Parameters
    ----------
    record : object or mapping
        Resolved record (or a plain dict of values).
    fields : ConfigSchema or field table

    Returns
    -------
    list of str
        Banner, ``#| name : value`` lines, banner.
    """
    schema = extract_schema(fields)
    values = read_values(record, schema)

    lines = [BANNER_START]
    for name in schema.names:
        text = encode(values[name])
        if should_be_masked(name):
            text = mask_value(text)
        lines.append(f"#| {name} : {text}")
    lines.append(BANNER_END)
    return lines


def log_config(record: Any, fields, stream: Optional[TextIO] = None) -> None:
    """Print the redacted configuration to ``stream``, or log it at INFO."""
    for line in format_config(record, fields):
        if stream is not None:
            stream.write(line + "\n")
        else:
            logger.info("%s", line)
