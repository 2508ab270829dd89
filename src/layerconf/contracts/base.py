"""Precondition enforcement for the resolver.

require() is the single enforcement mechanism for caller-facing
preconditions (target present, target writable, options consistent).
"""

from typing import Type

from layerconf.contracts.failure import ConfigError


def require(condition: bool, message: str, error: Type[ConfigError] = ConfigError) -> None:
    """Enforce a resolution precondition.

    Fail-fast: no recovery, no fallback, no silence.

    Parameters
    ----------
    condition : bool
        The invariant that must be true.
    message : str
        Error message describing the violated precondition.
    error : type of ConfigError, optional
        Exception class to raise. Defaults to ConfigError.

    Raises
    ------
    ConfigError
        The requested subclass, if condition is False.

    Examples
    --------
    >>> require(target is not None, "target must not be None", NilTarget)
    >>> require(not isinstance(target, type), "pass an instance", InvalidTarget)
    """
    if not condition:
        raise error(message)
