"""Configuration package with clean public API."""

from .loader import ConfigurationLoader
from .manager import ConfigurationManager, get_config_manager, reset_config_manager
from .schemas import (
    OUTPUT_FORMATS,
    AppConfig,
    CliConfig,
    DemoConfig,
    LogDestination,
    LoggingConfig,
    LogLevel,
    validate_config,
)

__all__ = [
    "AppConfig",
    "validate_config",
    "CliConfig",
    "DemoConfig",
    "LoggingConfig",
    "LogDestination",
    "LogLevel",
    "OUTPUT_FORMATS",
    "ConfigurationLoader",
    "ConfigurationManager",
    "get_config_manager",
    "reset_config_manager",
]
