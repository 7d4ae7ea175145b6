"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, default_configuration, load_configuration
from .runtime_settings import (
    NEXT_KINDS,
    OUTPUT_FORMATS,
    Configuration,
    DiffSettings,
    OutputSettings,
)

__all__ = [
    "Configuration",
    "DiffSettings",
    "OutputSettings",
    "NEXT_KINDS",
    "OUTPUT_FORMATS",
    "ConfigurationError",
    "default_configuration",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
