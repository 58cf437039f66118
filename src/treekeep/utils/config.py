"""
Configuration System

YAML-backed configuration for treekeep. Features:
- Built-in defaults, so every command works without a configuration file
- Single-file YAML loading, deep-merged over the defaults
- Environment variable resolution in string values
- Dot-path access with per-path caching of loaded files

Lookup never depends on the current working directory: a file is only read
when a path is passed explicitly (``--config``) or when the CLI finds
``treekeep.yml`` inside the directory it is asked to synchronize.
"""

import copy
import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml

from treekeep.base.errors import ConfigurationError

# Use standard logging (not get_logger) to avoid circular imports with logger.py
logger = logging.getLogger("CONFIG")

CONFIG_FILE_NAME = "treekeep.yml"

DEFAULT_CONFIG: dict[str, Any] = {
    "sync": {
        "marker_name": ".gitkeep",
        "follow_symlinks": False,
        "on_unreadable": "abort",
        "exclude": [],
    },
    "models": {
        "models_dir": "models",
    },
    "scaffold": {
        "directories": ["src", "tests", "docs", "draft"],
        "packages": ["src", "tests"],
    },
    "logging": {
        "level": "WARNING",
        "rich_tracebacks": True,
        "show_traceback_locals": False,
        "show_full_paths": False,
        "logging_colors": {
            "synchronizer": "cyan",
            "scaffold": "green",
            "config": "white",
        },
    },
}


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of ``base`` with ``override`` merged in recursively."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


class ConfigBuilder:
    """
    Configuration builder for a single (optional) YAML file.

    Features:
    - Defaults-only mode when no path is given
    - YAML loading with validation and error handling
    - Environment variable resolution
    - Dot-notation access via :meth:`get`
    """

    def __init__(self, config_path: str | Path | None = None):
        """
        Initialize configuration builder.

        Args:
            config_path: Path to a YAML configuration file. If None, only the
                built-in defaults are used.

        Raises:
            FileNotFoundError: If an explicit config_path does not exist.
            ConfigurationError: If the file is not valid YAML or not a mapping.
        """
        self.config_path = Path(config_path) if config_path is not None else None

        if self.config_path is None:
            self.raw_config = copy.deepcopy(DEFAULT_CONFIG)
            return

        if not self.config_path.is_file():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        file_config = self._resolve_env_vars(self._load_yaml_file(self.config_path))
        self.raw_config = _deep_merge(DEFAULT_CONFIG, file_config)
        logger.info(f"Loaded configuration from {self.config_path}")

    def _load_yaml_file(self, file_path: Path) -> dict[str, Any]:
        """Load and validate a YAML configuration file."""
        try:
            with open(file_path) as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            error_msg = f"Error parsing YAML configuration {file_path}: {e}"
            logger.error(error_msg)
            raise ConfigurationError(error_msg) from e

        if config is None:
            logger.warning(f"Configuration file is empty: {file_path}")
            return {}

        if not isinstance(config, dict):
            error_msg = f"Configuration file must contain a dictionary/mapping: {file_path}"
            logger.error(error_msg)
            raise ConfigurationError(error_msg)

        logger.debug(f"Parsed configuration file {file_path}")
        return config

    def _resolve_env_vars(self, data: Any) -> Any:
        """Recursively resolve environment variables in configuration data.

        Supports both simple and bash-style default value syntax:
        - ${VAR_NAME} - simple substitution
        - ${VAR_NAME:-default_value} - with default value
        - $VAR_NAME - simple substitution without braces
        """
        if isinstance(data, dict):
            return {key: self._resolve_env_vars(value) for key, value in data.items()}
        elif isinstance(data, list):
            return [self._resolve_env_vars(item) for item in data]
        elif isinstance(data, str):

            def replace_env_var(match):
                if match.group(1):  # ${VAR_NAME:-default} or ${VAR_NAME}
                    var_name = match.group(1)
                    default_value = match.group(2)
                else:  # $VAR_NAME
                    var_name = match.group(3)
                    default_value = None

                env_value = os.environ.get(var_name)
                if env_value is None:
                    if default_value is not None:
                        return default_value
                    logger.info(
                        f"Environment variable '{var_name}' not found, keeping original value"
                    )
                    return match.group(0)
                return env_value

            pattern = r"\$\{([^}:]+)(?::-(.*?))?\}|\$([A-Za-z_][A-Za-z0-9_]*)"
            return re.sub(pattern, replace_env_var, data)
        else:
            return data

    def section(self, name: str) -> dict[str, Any]:
        """Return a copy of a top-level section (empty dict when absent)."""
        value = self.raw_config.get(name)
        if not isinstance(value, dict):
            return {}
        return copy.deepcopy(value)

    def get(self, path: str, default: Any = None) -> Any:
        """Get configuration value using dot notation path."""
        keys = path.split(".")
        value = self.raw_config

        try:
            for key in keys:
                value = value[key]
            return value
        except (KeyError, TypeError):
            return default


# =============================================================================
# GLOBAL CONFIGURATION
# =============================================================================

# Default config used when callers do not pass an explicit path
_default_config: ConfigBuilder | None = None

# Per-path config cache for explicit config paths
_config_cache: dict[str, ConfigBuilder] = {}


def _get_config(config_path: str | Path | None = None) -> ConfigBuilder:
    """Get configuration instance (singleton default with optional explicit path)."""
    global _default_config

    if config_path is None:
        if _default_config is None:
            _default_config = ConfigBuilder()
            logger.debug("Initialized default configuration")
        return _default_config

    resolved_path = str(Path(config_path).resolve())
    if resolved_path not in _config_cache:
        _config_cache[resolved_path] = ConfigBuilder(resolved_path)
    return _config_cache[resolved_path]


def load_config(config_path: str | Path | None = None, set_as_default: bool = False) -> ConfigBuilder:
    """Load configuration, optionally making it the process-wide default.

    Args:
        config_path: Optional path to a YAML file. None means defaults only.
        set_as_default: If True, later calls to :func:`get_config_value`
            without a path read from this configuration.

    Returns:
        The loaded ConfigBuilder

    Examples:
        >>> config = load_config("/projects/demo/treekeep.yml", set_as_default=True)
        >>> config.get("sync.marker_name")
        '.gitkeep'
    """
    global _default_config

    config = _get_config(config_path)
    if set_as_default:
        _default_config = config
        logger.debug(f"Set configuration as default: {config.config_path}")
    return config


def reset_config() -> None:
    """Forget the default configuration and every cached file."""
    global _default_config
    _default_config = None
    _config_cache.clear()


def find_config_file(directory: str | Path) -> Path | None:
    """Return ``<directory>/treekeep.yml`` when it exists, otherwise None."""
    candidate = Path(directory) / CONFIG_FILE_NAME
    return candidate if candidate.is_file() else None


def get_config_value(path: str, default: Any = None, config_path: str | Path | None = None) -> Any:
    """
    Get a specific configuration value by dot-separated path.

    Args:
        path: Dot-separated configuration path (e.g., "sync.marker_name")
        default: Default value to return if path is not found
        config_path: Optional explicit path to configuration file

    Returns:
        The configuration value at the specified path, or default if not found

    Raises:
        ValueError: If path is empty or None

    Examples:
        >>> get_config_value("sync.marker_name")
        '.gitkeep'
        >>> get_config_value("logging.level", "INFO", "/path/to/treekeep.yml")
        'WARNING'
    """
    if not path:
        raise ValueError("Configuration path cannot be empty or None")

    return _get_config(config_path).get(path, default)
