"""Unified configuration management for the application."""
from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Optional

from design_patterns.config.loader import ConfigurationLoader
from design_patterns.config.schemas import AppConfig, CliConfig, DemoConfig, LoggingConfig

logger = logging.getLogger(__name__)


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Configuration is loaded lazily on first access and can be reloaded or
    overridden (for example from CLI flags) afterwards.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None
        self._loader: Optional[ConfigurationLoader] = None

    @property
    def loader(self) -> ConfigurationLoader:
        """Get configuration loader (lazy initialization)."""
        if self._loader is None:
            self._loader = ConfigurationLoader(self._config_file)
        return self._loader

    @property
    def app_config(self) -> AppConfig:
        """Get the application configuration, loading it on first access."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self.loader.load()
                    logger.debug("Application configuration loaded")
        return self._app_config

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration."""
        return self.app_config.logging

    def get_demo_config(self) -> DemoConfig:
        """Get demo driver configuration."""
        return self.app_config.demo

    def get_cli_config(self) -> CliConfig:
        """Get CLI configuration."""
        return self.app_config.cli

    def override(self, section: str, **values: Any) -> None:
        """
        Override fields of one configuration section.

        Args:
            section: Section name (logging, demo or cli)
            **values: Field values; None values are ignored

        Raises:
            ValueError: If the section does not exist
        """
        updates = {key: value for key, value in values.items() if value is not None}
        if not updates:
            return
        with self._lock:
            config = self.app_config
            current = getattr(config, section, None)
            if not isinstance(current, (LoggingConfig, DemoConfig, CliConfig)):
                raise ValueError(f"Unknown configuration section: {section}")
            merged = type(current)(**{**current.model_dump(), **updates})
            self._app_config = config.model_copy(update={section: merged})

    def to_dict(self) -> Dict[str, Any]:
        """Return the active configuration as a plain dictionary."""
        return self.app_config.model_dump(mode="json")

    def reload(self) -> None:
        """Drop the cached configuration so the next access reloads it."""
        with self._lock:
            self._app_config = None
            self._loader = None


_config_manager: Optional[ConfigurationManager] = None
_manager_lock = threading.Lock()


def get_config_manager(config_path: Optional[str] = None) -> ConfigurationManager:
    """
    Get the process-wide configuration manager.

    Passing a path replaces the current manager with one bound to that file.
    """
    global _config_manager
    with _manager_lock:
        if _config_manager is None or config_path is not None:
            _config_manager = ConfigurationManager(config_path)
        return _config_manager


def reset_config_manager() -> None:
    """Forget the process-wide configuration manager."""
    global _config_manager
    with _manager_lock:
        _config_manager = None
