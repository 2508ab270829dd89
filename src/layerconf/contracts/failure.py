"""Error taxonomy for configuration resolution.

Every failure the resolver can raise derives from ConfigError, so callers
can treat a failed startup uniformly. None of these are retried: a
resolution call that raises leaves the target record untouched.
"""


class ConfigError(Exception):
    """Base class for all configuration resolution failures.

    Key distinction:
    - ConfigError: the caller's record, schema, options or inputs are wrong
    - ValidationError: a ResolveOptions value failed Pydantic validation
    - OSError: the file system failed underneath us
    """
    pass


class NilTarget(ConfigError):
    """Raised when no target record was passed."""
    pass


class InvalidTarget(ConfigError):
    """Raised when the target cannot receive resolved values."""
    pass


class SchemaError(ConfigError):
    """Raised when the declarative field table is malformed."""
    pass


class UnsupportedFieldType(SchemaError):
    """Raised when a field declares a kind outside text/integer/float/boolean."""

    def __init__(self, field: str, kind):
        self.field = field
        self.kind = kind
        super().__init__(
            f"invalid type {kind!r} on field {field} "
            "- allowed are text, integer, float, boolean"
        )


class ConflictingOptions(ConfigError):
    """Raised when resolution options contradict each other."""
    pass


class CoercionError(ConfigError):
    """Raised when raw text does not match a field's scalar grammar."""

    def __init__(self, field, raw_input: str, kind, reason: str = ""):
        self.field = field
        self.raw_input = raw_input
        self.kind = kind
        kind_name = getattr(kind, "value", kind)
        message = f"cannot use {raw_input} as {kind_name}"
        if field:
            message += f" for field {field}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class FileParseError(ConfigError):
    """Raised when a config file exists but is not a flat key/value document."""

    def __init__(self, path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"unable to parse config file {self.path}: {reason}")


class RequiredFieldEmpty(ConfigError):
    """Raised when a required text field resolved to an empty string."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"required field {field} has length 0")
