"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, default_configuration, load_configuration
from .runtime_settings import (
    DEFAULT_API_VERSION,
    DEFAULT_CLIENT_ID,
    DEFAULT_PROJECT,
    DEFAULT_SCHEMA,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_URL,
    Configuration,
    ConnectionSettings,
    Credentials,
    OutputSettings,
)

__all__ = [
    "Configuration",
    "ConnectionSettings",
    "Credentials",
    "OutputSettings",
    "ConfigurationError",
    "default_configuration",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
    "DEFAULT_URL",
    "DEFAULT_PROJECT",
    "DEFAULT_SCHEMA",
    "DEFAULT_API_VERSION",
    "DEFAULT_TIMEOUT_SECONDS",
    "DEFAULT_CLIENT_ID",
]
