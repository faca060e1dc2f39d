"""Logging configuration schema."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDOUT = "stdout"
    BOTH = "both"


class LoggingConfig(BaseModel):
    """Logging configuration.

    ``stdout`` keeps its historical name but the console handler writes to
    stderr, so log lines never interleave with demo output.
    """
    model_config = ConfigDict(extra="forbid", use_enum_values=True)

    level: LogLevel = Field("WARNING", description="Root log level")
    destination: LogDestination = Field("stdout", description="Where log records go")
    file_path: Optional[str] = Field(None, description="Log file path (file/both destinations)")
    max_size_mb: int = Field(10, description="Rotate the log file after this many megabytes")
    backup_count: int = Field(5, description="Number of rotated files to keep")
    format: str = Field("text", description="Record rendering: text or json")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Accept lower-case level names."""
        return v.upper() if isinstance(v, str) else v

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate log rendering format."""
        v = v.lower()
        if v not in ("text", "json"):
            raise ValueError("Log format must be 'text' or 'json'")
        return v

    @field_validator("max_size_mb", "backup_count")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate rotation settings."""
        if v < 0:
            raise ValueError("Rotation settings must not be negative")
        return v
