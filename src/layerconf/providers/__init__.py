"""Raw value providers: defaults, environment variables and config files.

Each provider is a callable taking a ConfigSchema and returning a mapping
from field name to raw text, or None when it has nothing to offer.
"""

from layerconf.providers.defaults import DefaultsProvider
from layerconf.providers.environment import EnvironmentProvider, bootstrap_environment
from layerconf.providers.file import FileProvider, parse_flat_document
from layerconf.schemas.options import DEFAULT_FILE_PATHS

__all__ = [
    'DefaultsProvider',
    'EnvironmentProvider',
    'FileProvider',
    'DEFAULT_FILE_PATHS',
    'bootstrap_environment',
    'parse_flat_document',
]
