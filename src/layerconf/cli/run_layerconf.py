"""Command line runner for layerconf.

Loads a field table from a Python file, resolves it against the current
environment and config file, prints the redacted result and optionally
writes the generated documents. Argument parsing lives in main(); the
real work is in run_layerconf() so it can be called from other scripts.
"""

import argparse
import importlib.util
import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from layerconf.contracts import ConfigError
from layerconf.schemas.initialization import init_config
from layerconf.schemas.options import ReadMode

logger = logging.getLogger(__name__)


def load_field_table(fields_path: str) -> tuple[list, dict]:
    """Load FIELDS (and optional DESCRIPTIONS) from a Python file.

    Parameters
    ----------
    fields_path : str
        Path to a Python file defining a ``FIELDS`` sequence.

    Returns
    -------
    tuple
        (fields, descriptions); descriptions is empty if not defined.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValueError
        If no FIELDS sequence is found in the file.
    """
    path = Path(fields_path)
    if not path.exists():
        raise FileNotFoundError(f"Field table not found: {path}")

    spec = importlib.util.spec_from_file_location("layerconf_fields", path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Could not load field table module from {path}")

    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    fields = getattr(module, "FIELDS", None)
    if not isinstance(fields, (list, tuple)):
        raise ValueError(f"No FIELDS list found in {path}")

    descriptions = getattr(module, "DESCRIPTIONS", None) or {}
    return list(fields), dict(descriptions)


def _setup_logging(verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.WARNING

    formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root = logging.getLogger()
    root.setLevel(log_level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(log_level)
    ch.setFormatter(formatter)
    root.addHandler(ch)


def run_layerconf(
    fields_path: str,
    read_mode: str = ReadMode.ENV_THEN_YAML.value,
    file_path: Optional[str] = None,
    markdown_path: Optional[str] = None,
    example_path: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> dict:
    """Resolve the table in ``fields_path`` and print the redacted values.

    Returns
    -------
    dict
        The resolved values, keyed by field name.
    """
    fields, descriptions = load_field_table(fields_path)

    options = {"read_mode": read_mode}
    if file_path is not None:
        options["file_path"] = file_path

    return init_config(
        {},
        fields,
        descriptions,
        markdown_path=markdown_path,
        example_path=example_path,
        stream=stream if stream is not None else sys.stdout,
        **options,
    )


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="layerconf",
        description="Resolve a configuration field table and print the result",
    )
    parser.add_argument("fields", help="Python file defining FIELDS (and optionally DESCRIPTIONS)")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in ReadMode],
        default=ReadMode.ENV_THEN_YAML.value,
        help="Source precedence (default: env-yaml, file wins)",
    )
    parser.add_argument("--file", help="Explicit YAML config file instead of discovery")
    parser.add_argument("--markdown", help="Write a markdown field table to this path")
    parser.add_argument("--example", help="Write an example YAML config to this path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    _setup_logging(args.verbose)

    try:
        run_layerconf(
            args.fields,
            read_mode=args.mode,
            file_path=args.file,
            markdown_path=args.markdown,
            example_path=args.example,
        )
    except (ConfigError, FileNotFoundError, ValueError) as exc:
        print(f"layerconf: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
