"""Read-only introspection of resolved configuration.

Console listing with secret redaction, a markdown field table and a
commented example config file.
"""

from layerconf.export.console import (
    SENSITIVE_SUFFIXES,
    should_be_masked,
    mask_value,
    format_config,
    log_config,
)
from layerconf.export.documents import (
    render_markdown,
    render_example,
    write_markdown_file,
    write_example_file,
)

__all__ = [
    'SENSITIVE_SUFFIXES',
    'should_be_masked',
    'mask_value',
    'format_config',
    'log_config',
    'render_markdown',
    'render_example',
    'write_markdown_file',
    'write_example_file',
]
