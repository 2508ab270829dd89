"""Compiled-in defaults, or a caller-supplied replacement mapping."""

import logging
from typing import Mapping, Optional

from layerconf.schemas.field import ConfigSchema

__all__ = ['DefaultsProvider']

logger = logging.getLogger(__name__)


class DefaultsProvider:
    """Supply the starting raw values of a resolution.

    With no replacement this returns every field's default text. A
    replacement mapping is used instead of the defaults as a whole, not
    merged with them: fields it does not name get no raw value at all.
    Keys that match no field are ignored.

    Examples
    --------
    >>> DefaultsProvider()(schema)
    {'Name': 'defaultStr', 'Count': '42'}
    >>> DefaultsProvider({"Count": "7", "Unknown": "x"})(schema)
    {'Count': '7'}
    """

    def __init__(self, new_defaults: Optional[Mapping[str, str]] = None):
        self.new_defaults = new_defaults

    def __call__(self, schema: ConfigSchema) -> dict[str, str]:
        if self.new_defaults is None:
            return schema.default_texts()

        values = {
            name: text
            for name, text in self.new_defaults.items()
            if name in schema
        }
        ignored = set(self.new_defaults) - set(values)
        if ignored:
            logger.debug("Ignoring replacement defaults for unknown fields: %s", sorted(ignored))
        return values
