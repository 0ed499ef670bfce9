"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_registry_settings
from .runtime_settings import RegistrySettings, SSLSettings

__all__ = [
    "RegistrySettings",
    "SSLSettings",
    "ConfigurationError",
    "load_registry_settings",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
