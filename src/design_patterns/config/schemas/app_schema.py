"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, Field

from .demo_schema import CliConfig, DemoConfig
from .logging_schema import LoggingConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    demo: DemoConfig = Field(default_factory=lambda: DemoConfig())
    cli: CliConfig = Field(default_factory=lambda: CliConfig())


def validate_config(config: Dict[str, Any]) -> AppConfig:
    """
    Validate configuration.

    Args:
        config: Configuration to validate

    Returns:
        Validated configuration

    Raises:
        pydantic.ValidationError: If configuration is invalid
    """
    return AppConfig(**config)
