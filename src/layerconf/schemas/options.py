"""ResolveOptions: how a resolution call merges its sources.

Defaults always come first. The read mode then decides which of the
environment and the config file are consulted, and in which order; the
source listed last wins on keys both define.
"""

from enum import Enum
from typing import Optional

from pydantic import Field, model_validator

from layerconf.contracts import ConflictingOptions
from layerconf.schemas.base import LayerconfBaseModel

DEFAULT_FILE_PATHS = (
    "config.yml",
    "config.yaml",
    "config/config.yml",
    "config/config.yaml",
)


class Source(str, Enum):
    """Providers that may follow the defaults in a precedence list."""
    ENVIRONMENT = "environment"
    FILE = "file"


class ReadMode(str, Enum):
    """Supported precedence policies."""
    ENV_ONLY = "env-only"
    YAML_ONLY = "yaml-only"
    ENV_THEN_YAML = "env-yaml"
    YAML_THEN_ENV = "yaml-env"

    @property
    def precedence(self) -> tuple[Source, ...]:
        """Sources in application order; later entries overwrite earlier ones."""
        if self is ReadMode.ENV_ONLY:
            return (Source.ENVIRONMENT,)
        elif self is ReadMode.YAML_ONLY:
            return (Source.FILE,)
        elif self is ReadMode.ENV_THEN_YAML:
            return (Source.ENVIRONMENT, Source.FILE)
        elif self is ReadMode.YAML_THEN_ENV:
            return (Source.FILE, Source.ENVIRONMENT)
        raise AssertionError(f"unhandled read mode {self!r}")


class ResolveOptions(LayerconfBaseModel):
    """Options for a single resolution call.

    Usage
    -----
        options = ResolveOptions(read_mode="yaml-env", file_path="settings.yml")
        resolve_config(cfg, FIELDS, options)

        # Replace the compiled-in defaults wholesale
        options = ResolveOptions(new_defaults={"Name": "custom"})

    Notes
    -----
    Requesting a specific file together with ``env-only`` is contradictory
    and raises ConflictingOptions, as does an empty file path.
    """

    read_mode: ReadMode = ReadMode.ENV_THEN_YAML
    file_path: Optional[str] = Field(None, description="Explicit config file; disables discovery")
    new_defaults: Optional[dict[str, str]] = Field(
        None, description="Replaces the compiled-in defaults, keyed by field name"
    )
    search_paths: tuple[str, ...] = Field(
        DEFAULT_FILE_PATHS, description="Discovery candidates, first existing file wins"
    )
    dotenv: bool = Field(True, description="Load a dotenv file before reading the environment")
    dotenv_path: str = ".env"

    @model_validator(mode="after")
    def reject_conflicting_file_request(self):
        """An explicit file must be usable by the chosen read mode."""
        if self.file_path is not None:
            if not self.file_path.strip():
                raise ConflictingOptions("the config file path cannot be empty")
            if self.read_mode is ReadMode.ENV_ONLY:
                raise ConflictingOptions(
                    "read mode env-only does not read files, "
                    f"but file {self.file_path} was requested"
                )
        return self

    @property
    def precedence(self) -> tuple[Source, ...]:
        return self.read_mode.precedence
