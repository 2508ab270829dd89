"""Documentation generators for a configuration schema.

Two pure formatters and their file-writing counterparts:

- render_markdown(): a table of every field (keys, type, required, default,
  description), for READMEs and wikis
- render_example(): a commented YAML document users can copy to
  ``config.yml`` and edit; it parses back through the file provider

Writing is delegated to layerconf.file_io; failures surface as OSError.
"""

import logging
from datetime import datetime, timezone
from typing import Mapping, Optional

import yaml

from layerconf.coercion import decode, encode
from layerconf.contracts import CoercionError
from layerconf.export.console import mask_value, should_be_masked
from layerconf.file_io import write_document
from layerconf.schemas.field import FieldDescriptor, extract_schema

__all__ = ['render_markdown', 'render_example', 'write_markdown_file', 'write_example_file']

logger = logging.getLogger(__name__)


def _timestamp(generated_at: Optional[datetime]) -> str:
    if generated_at is None:
        generated_at = datetime.now(timezone.utc)
    return generated_at.isoformat(timespec="seconds")


def _cell(text: str) -> str:
    return text.replace("|", "\\|").replace("\n", " ")


def render_markdown(
    fields,
    descriptions: Optional[Mapping[str, str]] = None,
    values: Optional[Mapping] = None,
    generated_at: Optional[datetime] = None,
) -> str:
    """Render the schema as a markdown table.

    Parameters
    ----------
    fields : ConfigSchema or field table
    descriptions : mapping, optional
        Description per field name; missing entries render empty.
    values : mapping, optional
        Resolved values to show instead of the defaults. Sensitive fields
        are masked.
    generated_at : datetime, optional
        Timestamp for the header (default: now, UTC).

    Returns
    -------
    str
    """
    schema = extract_schema(fields)
    descriptions = descriptions or {}

    lines = [
        "# Default Configuration",
        f"*Generated {_timestamp(generated_at)}*",
        "",
        "| YAML Key | ENV Key | Type | Required | Default | Description |",
        "|---|---|---|---|---|---|",
    ]

    for descriptor in schema:
        shown = descriptor.default_text
        if values is not None and descriptor.name in values:
            shown = encode(values[descriptor.name])
            if should_be_masked(descriptor.name):
                shown = mask_value(shown)

        row = [
            descriptor.name,
            descriptor.source_key,
            descriptor.kind.value,
            "yes" if descriptor.required else "no",
            shown,
            descriptions.get(descriptor.name, ""),
        ]
        lines.append("| " + " | ".join(_cell(item) for item in row) + " |")

    return "\n".join(lines) + "\n"


def _example_entry(descriptor: FieldDescriptor, text: str) -> str:
    """Dump one ``name: value`` line, typed where the text allows it."""
    try:
        value = decode(text.strip(), descriptor.kind, descriptor.name)
    except CoercionError:
        value = text
    dumped = yaml.safe_dump(
        {descriptor.name: value},
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )
    return dumped.rstrip("\n")


def render_example(
    fields,
    descriptions: Optional[Mapping[str, str]] = None,
    values: Optional[Mapping] = None,
    generated_at: Optional[datetime] = None,
) -> str:
    """Render a commented example YAML config file.

    Each field gets a comment line with its kind, whether it is required
    and its description, followed by its default (or resolved, non
    sensitive) value.
    """
    schema = extract_schema(fields)
    descriptions = descriptions or {}

    lines = [
        "# Autogenerated config.yml.example file. Please provide your own values here.",
        f"# Generated {_timestamp(generated_at)}",
        "",
    ]

    for descriptor in schema:
        text = descriptor.default_text
        # never write resolved secrets into an example file
        if values is not None and descriptor.name in values and not should_be_masked(descriptor.name):
            text = encode(values[descriptor.name])

        required = "required" if descriptor.required else "optional"
        comment = f"# {descriptor.name} [{descriptor.kind.value} - {required}]"
        if descriptions.get(descriptor.name):
            comment += f" - {descriptions[descriptor.name]}"
        lines.append(comment)
        lines.append(_example_entry(descriptor, text))
        lines.append("")

    return "\n".join(lines)


def write_markdown_file(fields, descriptions, path, values: Optional[Mapping] = None):
    """Write render_markdown() output to ``path``."""
    return write_document(path, render_markdown(fields, descriptions, values))


def write_example_file(fields, descriptions, path, values: Optional[Mapping] = None):
    """Write render_example() output to ``path``."""
    return write_document(path, render_example(fields, descriptions, values))
