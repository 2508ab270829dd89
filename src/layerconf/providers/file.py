"""Read field values from a flat YAML document.

The document is either the caller's explicit path or the first of the
conventional candidates that exists. No file at all is not an error; a
file that exists but is not a flat key/value mapping is.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

import yaml

from layerconf.contracts import FileParseError
from layerconf.file_io import find_first_existing
from layerconf.schemas.field import ConfigSchema
from layerconf.schemas.options import DEFAULT_FILE_PATHS

__all__ = ['FileProvider', 'parse_flat_document']

logger = logging.getLogger(__name__)


def _scalar_text(path, key, value) -> str:
    """Check that a parsed value is a scalar; BaseLoader keeps scalars as written."""
    if isinstance(value, str):
        return value
    raise FileParseError(
        path, f"key {key} holds a {type(value).__name__}, only scalar values are allowed"
    )


def parse_flat_document(text: str, path="<string>") -> dict[str, str]:
    """Parse YAML text into a flat mapping of key to raw text.

    Parameters
    ----------
    text : str
        Document content.
    path : str or Path, optional
        Used in error messages only.

    Returns
    -------
    dict
        Keys and values as text. An empty document yields an empty dict.

    Raises
    ------
    FileParseError
        If the YAML is malformed, the top level is not a mapping, or a
        value is itself a mapping or a list.
    """
    try:
        # no implicit typing: "1.10", "01234", "12:30" and "yes" stay literal
        document = yaml.load(text, Loader=yaml.BaseLoader)
    except yaml.YAMLError as exc:
        raise FileParseError(path, str(exc)) from exc

    if document is None:
        return {}
    if not isinstance(document, dict):
        raise FileParseError(path, f"expected a mapping at top level, got {type(document).__name__}")

    return {str(key): _scalar_text(path, key, value) for key, value in document.items()}


class FileProvider:
    """Supply raw values from a YAML config file.

    Keys are matched against field names only; unknown keys are ignored.

    Parameters
    ----------
    file_path : str or Path, optional
        Explicit file. It must exist; discovery is skipped.
    search_paths : iterable of str, optional
        Discovery candidates, probed in order.
    base_dir : str or Path, optional
        Directory relative candidates are probed in (default: cwd).
    """

    def __init__(
        self,
        file_path=None,
        search_paths: Iterable[str] = DEFAULT_FILE_PATHS,
        base_dir=None,
    ):
        self.file_path = file_path
        self.search_paths = tuple(search_paths)
        self.base_dir = base_dir

    def locate(self) -> Optional[Path]:
        """Return the file to read, or None if there is none."""
        if self.file_path is not None:
            path = Path(self.file_path)
            if not path.is_file():
                raise FileNotFoundError(f"Config file not found: {path}")
            return path
        return find_first_existing(self.search_paths, self.base_dir)

    def __call__(self, schema: ConfigSchema) -> Optional[dict[str, str]]:
        path = self.locate()
        if path is None:
            logger.debug("No config file found among %s", list(self.search_paths))
            return None

        with open(path, "r", encoding="utf-8") as f:
            document = parse_flat_document(f.read(), path)

        values = {name: text for name, text in document.items() if name in schema}
        logger.info("Using config file %s (%d of %d fields)", path, len(values), len(schema))
        return values
