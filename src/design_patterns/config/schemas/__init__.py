"""Configuration schemas package."""

from .app_schema import AppConfig, validate_config
from .demo_schema import OUTPUT_FORMATS, CliConfig, DemoConfig
from .logging_schema import LogDestination, LoggingConfig, LogLevel

__all__ = [
    "AppConfig",
    "validate_config",
    "CliConfig",
    "DemoConfig",
    "OUTPUT_FORMATS",
    "LogDestination",
    "LoggingConfig",
    "LogLevel",
]
