"""
File system helpers for configuration files and generated documents.

- Config discovery probes a fixed list of candidates, first hit wins
- Generated documents create their parent directories on demand
- Write failures surface as OSError, never as resolution errors
"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def find_first_existing(paths: Iterable[PathLike], base_dir: Optional[PathLike] = None) -> Optional[Path]:
    """
    Return the first candidate that exists as a regular file.

    Parameters
    ----------
    paths : iterable of str or Path
        Candidates in priority order. Relative paths are resolved against
        base_dir, or the current working directory if base_dir is None.
    base_dir : str or Path, optional
        Directory relative candidates are probed in.

    Returns
    -------
    Path or None
        The first existing file, or None when no candidate exists.

    Example
    -------
    >>> find_first_existing(["config.yml", "config/config.yml"])
    PosixPath('config/config.yml')
    """
    root = Path(base_dir) if base_dir is not None else None

    for candidate in paths:
        path = Path(candidate)
        if root is not None and not path.is_absolute():
            path = root / path
        if path.is_file():
            return path

    return None


def write_document(path: PathLike, text: str) -> Path:
    """
    Write a generated document, creating parent directories as needed.

    Parameters
    ----------
    path : str or Path
        Destination file. Existing files are overwritten.
    text : str
        Document content.

    Returns
    -------
    Path
        The written path.

    Raises
    ------
    OSError
        If the directory cannot be created or the file cannot be written.
    """
    path = Path(path).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        f.write(text)

    logger.info("Wrote %s (%d bytes)", path, len(text.encode("utf-8")))
    return path
