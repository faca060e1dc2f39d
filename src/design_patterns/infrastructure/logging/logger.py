"""Structured logging built on structlog and the stdlib logging module."""
import logging
import os
import sys
import threading
from logging.handlers import RotatingFileHandler
from typing import List, Optional

import structlog

from design_patterns.config.schemas import LoggingConfig

_configure_lock = threading.Lock()
_structlog_configured = False

# Processors applied both to structlog events and to foreign stdlib records
_SHARED_PROCESSORS = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


def _configure_structlog() -> None:
    """Route structlog through stdlib logging so handlers decide the output."""
    global _structlog_configured
    with _configure_lock:
        if _structlog_configured:
            return
        structlog.configure(
            processors=[structlog.stdlib.filter_by_level]
            + _SHARED_PROCESSORS
            + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            # setup_logging may run after module-level loggers are created
            cache_logger_on_first_use=False,
        )
        _structlog_configured = True


def _build_formatter(log_format: str) -> logging.Formatter:
    renderer = (
        structlog.processors.JSONRenderer()
        if log_format == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    return structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=_SHARED_PROCESSORS,
    )


def _build_handlers(config: LoggingConfig) -> List[logging.Handler]:
    formatter = _build_formatter(config.format)
    handlers: List[logging.Handler] = []

    if config.destination in ("file", "both"):
        if not config.file_path:
            raise ValueError("Logging destination '%s' requires file_path" % config.destination)
        log_path = os.path.expandvars(os.path.expanduser(config.file_path))
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if config.destination in ("stdout", "both"):
        # Demo output owns stdout
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    return handlers


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Args:
        config: Logging configuration. Defaults to LoggingConfig().

    Returns:
        Configured structlog logger instance.
    """
    config = config or LoggingConfig()
    _configure_structlog()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, str(config.level).upper()))

    # Remove any existing handlers and add new ones
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    for handler in _build_handlers(config):
        root_logger.addHandler(handler)

    logging.captureWarnings(True)

    logger = get_logger(__name__)
    logger.debug(
        "Logging configured",
        log_level=config.level,
        log_destination=config.destination,
        log_file=config.file_path,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to a stdlib logger of the given name."""
    _configure_structlog()
    return structlog.get_logger(name)
