"""Configuration loader - defaults, file and environment sources."""
from __future__ import annotations

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from design_patterns.config.schemas import AppConfig
from design_patterns.config.utils.env_expansion import expand_config_env_vars
from design_patterns.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0.0",
    "logging": {
        "level": "WARNING",
        "destination": "stdout",
        "file_path": None,
        "max_size_mb": 10,
        "backup_count": 5,
        "format": "text",
    },
    "demo": {
        "random_seed": None,
        "load_balancer_requests": 15,
        "show_banner": True,
    },
    "cli": {
        "output_format": "table",
    },
}

# Environment overrides applied after the file, keyed by (section, field)
ENV_OVERRIDES = {
    "GOF_LOG_LEVEL": ("logging", "level"),
    "GOF_LOG_FORMAT": ("logging", "format"),
    "GOF_RANDOM_SEED": ("demo", "random_seed"),
    "GOF_OUTPUT_FORMAT": ("cli", "output_format"),
}

CONFIG_FILE_ENV = "GOF_CONFIG_FILE"


class ConfigurationLoader:
    """
    Loads configuration from multiple sources.

    Precedence, lowest first: built-in defaults, configuration file (JSON or
    YAML chosen by extension), environment overrides.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize loader with an optional configuration file path."""
        self._config_file = config_file or os.environ.get(CONFIG_FILE_ENV)

    @property
    def config_file(self) -> Optional[str]:
        """Path of the configuration file in use, if any."""
        return self._config_file

    def load(self) -> AppConfig:
        """
        Load and validate the application configuration.

        Returns:
            Validated AppConfig

        Raises:
            ConfigurationError: If the file is missing, unreadable or invalid
        """
        data = copy.deepcopy(DEFAULT_CONFIG)
        if self._config_file:
            self._merge(data, self._read_file(self._config_file))
        data = expand_config_env_vars(data)
        self._apply_env_overrides(data)

        try:
            return AppConfig(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    def _read_file(self, path: str) -> Dict[str, Any]:
        """Read a JSON or YAML configuration file."""
        file_path = Path(os.path.expanduser(path))
        if not file_path.is_file():
            raise ConfigurationError(f"Configuration file not found: {file_path}")

        try:
            with file_path.open("r", encoding="utf-8") as f:
                if file_path.suffix.lower() in (".yaml", ".yml"):
                    content = yaml.safe_load(f) or {}
                else:
                    content = json.load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to read configuration file {file_path}: {e}") from e

        if not isinstance(content, dict):
            raise ConfigurationError(f"Configuration file {file_path} must contain a mapping")

        logger.debug("Loaded configuration file %s", file_path)
        return content

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        """Deep-merge override into base in place."""
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                self._merge(base[key], value)
            else:
                base[key] = value

    def _apply_env_overrides(self, data: Dict[str, Any]) -> None:
        for env_name, (section, field) in ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value is None or value == "":
                continue
            data.setdefault(section, {})[field] = value
            logger.debug("Applied environment override %s", env_name)
