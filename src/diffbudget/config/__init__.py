"""Configuration loading, schema, and defaults."""

from diffbudget.config.loader import CONFIG_FILENAME, ConfigError, load_config
from diffbudget.config.schema import DiffBudgetConfig, OutputFormat

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DiffBudgetConfig",
    "OutputFormat",
    "load_config",
]
