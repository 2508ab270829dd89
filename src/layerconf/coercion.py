"""Conversion between raw configuration text and typed scalar values.

Only four scalar kinds exist. decode() turns trimmed text into a typed
value or raises CoercionError; encode() renders a typed value back to its
canonical text and never fails, so introspection cannot break on a
formatting problem.
"""

import math
from enum import Enum
from typing import Optional, Union

import numpy as np

from layerconf.contracts.failure import CoercionError

Scalar = Union[str, int, float, bool]

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

_TRUE_TEXT = frozenset({"1", "t", "true"})
_FALSE_TEXT = frozenset({"0", "f", "false"})


class FieldKind(str, Enum):
    """The closed set of scalar kinds a configuration field may have."""
    TEXT = "text"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"

    @property
    def zero_value(self) -> Scalar:
        """Value committed for a field that no source supplied."""
        if self is FieldKind.TEXT:
            return ""
        elif self is FieldKind.INTEGER:
            return 0
        elif self is FieldKind.FLOAT:
            return 0.0
        elif self is FieldKind.BOOLEAN:
            return False
        raise AssertionError(f"unhandled field kind {self!r}")


def parse_bool(text: str) -> bool:
    """Parse boolean text: 1, 0, t, f, true, false in any letter case.

    Raises
    ------
    ValueError
        If text is not one of the accepted spellings.
    """
    lowered = text.lower()
    if lowered in _TRUE_TEXT:
        return True
    if lowered in _FALSE_TEXT:
        return False
    raise ValueError(f"invalid boolean syntax {text!r}")


def _parse_int(text: str) -> int:
    sign, digits = "", text
    if digits[:1] in ("+", "-"):
        sign, digits = digits[0], digits[1:]
    if len(digits) > 1 and digits[0] == "0" and digits[1] not in "xXoObB":
        # a bare leading zero marks octal, "010" is 8
        digits = "0o" + digits[1:]
    value = int(sign + digits, 0)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError("value out of range for a signed 64-bit integer")
    return value


def _parse_float(text: str) -> float:
    value = float(text)
    if math.isinf(value) and "inf" not in text.lower():
        raise ValueError("value out of range for a 64-bit float")
    return value


def decode(text: str, kind: FieldKind, field: Optional[str] = None) -> Scalar:
    """Convert raw text into the typed value for ``kind``.

    Parameters
    ----------
    text : str
        Raw text, already trimmed by the caller.
    kind : FieldKind
        Target scalar kind.
    field : str, optional
        Field name, only used to make errors point at the culprit.

    Returns
    -------
    str, int, float or bool

    Raises
    ------
    CoercionError
        If text does not match the grammar of ``kind``.

    Examples
    --------
    >>> decode("0x1F", FieldKind.INTEGER)
    31
    >>> decode("TRUE", FieldKind.BOOLEAN)
    True
    """
    kind = FieldKind(kind)
    try:
        if kind is FieldKind.TEXT:
            return text
        elif kind is FieldKind.INTEGER:
            return _parse_int(text)
        elif kind is FieldKind.FLOAT:
            return _parse_float(text)
        elif kind is FieldKind.BOOLEAN:
            return parse_bool(text)
    except ValueError as exc:
        raise CoercionError(field, text, kind, str(exc)) from exc
    raise AssertionError(f"unhandled field kind {kind!r}")


def kind_of(value) -> Optional[FieldKind]:
    """Return the scalar kind of a Python value, or None if unsupported."""
    # bool before int: bool is an int subclass
    if isinstance(value, (bool, np.bool_)):
        return FieldKind.BOOLEAN
    if isinstance(value, (int, np.integer)):
        return FieldKind.INTEGER
    if isinstance(value, (float, np.floating)):
        return FieldKind.FLOAT
    if isinstance(value, str):
        return FieldKind.TEXT
    return None


def encode(value) -> str:
    """Render a typed value as canonical text.

    Booleans become ``true``/``false``, integers plain decimal, floats the
    shortest positional form that reads back to the same number (``1000``,
    ``0.1``). Unsupported values yield a diagnostic placeholder instead of
    raising.
    """
    kind = kind_of(value)
    if kind is FieldKind.TEXT:
        return value
    elif kind is FieldKind.BOOLEAN:
        return "true" if value else "false"
    elif kind is FieldKind.INTEGER:
        return str(int(value))
    elif kind is FieldKind.FLOAT:
        return np.format_float_positional(float(value), trim="-")
    return f" - unsupported type {type(value).__name__} - "
