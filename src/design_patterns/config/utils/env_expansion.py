"""Environment variable expansion for configuration values.

Supports ``$VAR``, ``${VAR}`` and ``${VAR:default}``. Unset variables without
a default are left untouched.
"""
import os
import re
from typing import Any, Dict

_ENV_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::([^}]*))?\}|\$([A-Za-z_][A-Za-z0-9_]*)")


def _replace(match: "re.Match[str]") -> str:
    name = match.group(1) or match.group(3)
    default = match.group(2)
    value = os.environ.get(name)
    if value is not None:
        return value
    if default is not None:
        return default
    return match.group(0)


def expand_env_vars(value: Any) -> Any:
    """Expand environment variables in strings, recursing into dicts and lists."""
    if isinstance(value, str):
        return _ENV_PATTERN.sub(_replace, value)
    if isinstance(value, dict):
        return {key: expand_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value


def expand_config_env_vars(config: Dict[str, Any]) -> Dict[str, Any]:
    """Expand every string value of a configuration mapping."""
    return expand_env_vars(config)
