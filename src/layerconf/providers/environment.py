"""Read field values from the process environment.

Each field is looked up under its source key, which falls back to the
field name. Only variables that are actually set are reported; a variable
set to an empty string is a present (empty) value, an unset one is no
opinion at all.
"""

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from layerconf.schemas.field import ConfigSchema

__all__ = ['EnvironmentProvider', 'bootstrap_environment']

logger = logging.getLogger(__name__)


def bootstrap_environment(dotenv_path=".env") -> bool:
    """Load a dotenv file into ``os.environ`` if it exists.

    Variables that are already set keep their value. A missing file is
    silently ignored.

    Returns
    -------
    bool
        True if a file was found and loaded.
    """
    path = Path(dotenv_path)
    if not path.is_file():
        logger.debug("No dotenv file at %s", path)
        return False

    load_dotenv(dotenv_path=path, override=False)
    logger.info("Loaded environment from %s", path)
    return True


class EnvironmentProvider:
    """Supply raw values from environment variables.

    Parameters
    ----------
    environ : mapping, optional
        Variables to read. Defaults to ``os.environ`` at call time.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self.environ = environ

    def __call__(self, schema: ConfigSchema) -> dict[str, str]:
        environ = os.environ if self.environ is None else self.environ

        values = {}
        for descriptor in schema:
            if descriptor.source_key in environ:
                # keyed by field name, looked up by source key
                values[descriptor.name] = environ[descriptor.source_key].strip()

        logger.debug("Environment supplied %d of %d fields", len(values), len(schema))
        return values
