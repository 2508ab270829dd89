"""One-call configuration startup for applications.

This module handles the usual startup sequence:
- Configuration resolution (defaults < sources in read-mode order)
- Redacted listing of the resolved values
- Optional markdown table and example config file generation

Everything raised by resolution is fatal to startup; document writing
failures surface as OSError after the record has been populated.
"""

import logging
from typing import Any, Mapping, Optional, TextIO

from layerconf.export.console import log_config
from layerconf.export.documents import write_example_file, write_markdown_file
from layerconf.schemas.field import extract_schema
from layerconf.schemas.resolve import resolve_config

logger = logging.getLogger(__name__)


def init_config(
    target: Any,
    fields,
    descriptions: Optional[Mapping[str, str]] = None,
    markdown_path=None,
    example_path=None,
    log: bool = True,
    stream: Optional[TextIO] = None,
    **resolve_kwargs,
):
    """Resolve ``target`` and run the startup side effects.

    Parameters
    ----------
    target : object or mutable mapping
        Caller-owned record to populate.
    fields : ConfigSchema or field table
        Declarative field table.
    descriptions : mapping, optional
        Field descriptions for the generated documents.
    markdown_path, example_path : str or Path, optional
        Where to write the markdown table and the example YAML file.
    log : bool, optional
        Print the redacted listing (default True).
    stream : file-like, optional
        Destination for the listing; the module logger when None.
    **resolve_kwargs
        Passed to resolve_config() (options, environ, read_mode, ...).

    Returns
    -------
    object
        The populated target.

    Examples
    --------
    >>> cfg = AppConfig()
    >>> init_config(cfg, FIELDS, DESCRIPTIONS, example_path="config.yml.example")
    """
    schema = extract_schema(fields)
    resolve_config(target, schema, **resolve_kwargs)

    if log:
        log_config(target, schema, stream=stream)

    if markdown_path is not None:
        write_markdown_file(schema, descriptions, markdown_path)
    if example_path is not None:
        write_example_file(schema, descriptions, example_path)

    logger.info("Configuration initialization complete (%d fields)", len(schema))
    return target


__all__ = ['init_config']
