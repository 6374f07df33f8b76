# src/httpconv/utils/helpers.py

"""Helper functions and utilities for httpconv."""

import re
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Type, TypeVar, Union

import yaml
from loguru import logger

from .constants import DEFAULT_LOG_LEVEL, LOG_FORMAT, UNNAMED_FILE_NAME
from ..core.errors import ConfigurationError


T = TypeVar("T")
_WORD_START = re.compile(r"(?<![\w])(\w)")


def setup_logging(
    level: str = DEFAULT_LOG_LEVEL,
    log_file: Optional[Union[str, Path]] = None,
    log_format: Optional[str] = None,
) -> None:
    """
    Set up logging using Loguru.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file. If None, logs only to stderr.
        log_format: Optional custom log format string.
    """
    effective_level = level.upper()
    log_format = log_format or LOG_FORMAT

    logger.remove()  # Remove existing handlers to avoid duplication
    logger.add(
        sink=sys.stderr,
        format=log_format,
        level=effective_level,
        colorize=True,
    )

    if log_file is not None:
        log_file_path = Path(log_file)
        log_file_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            sink=log_file_path,
            format=log_format,
            level=effective_level,
            rotation="10 MB",
            retention="7 days",
            encoding="utf-8",
        )
        logger.debug(f"File logging enabled: {log_file_path}")

    logger.debug(f"Logging initialized at level {effective_level}")


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """Load configuration from YAML file."""
    config_path = Path(config_path).resolve()

    if not config_path.exists():
        logger.warning(f"Configuration file not found: {config_path}. Using defaults.")
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error(f"Error parsing configuration file {config_path}: {e}")
        raise ConfigurationError(f"Invalid YAML configuration file: {e}", str(config_path)) from e
    except OSError as e:
        logger.error(f"Failed to read configuration from {config_path}: {e}")
        raise ConfigurationError(f"Could not read configuration file: {e}", str(config_path)) from e

    if config is None:  # Empty YAML file
        logger.warning(f"Configuration file {config_path} is empty. Using defaults.")
        return {}
    if not isinstance(config, dict):
        raise ConfigurationError("Configuration root must be a mapping", str(config_path))

    logger.debug(f"Configuration loaded from {config_path}")
    return config


def config_section(config: Dict[str, Any], name: str) -> Dict[str, Any]:
    """Return one mapping section of the config, empty if absent."""
    section = config.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"Config section '{name}' must be a mapping")
    return section


def build_section_config(config_cls: Type[T], config: Dict[str, Any], name: str) -> T:
    """Build a config dataclass from one section, e.g. ``ExportConfig(**config["export"])``."""
    section = config_section(config, name)
    try:
        return config_cls(**section)
    except TypeError as e:
        raise ConfigurationError(f"Invalid keys in config section '{name}': {e}") from e


def format_group_name(name: str) -> str:
    """
    Turn a file or folder name into a display name.

    Underscores and hyphens become spaces and every word gets an upper-case
    first letter; the rest of each word is left alone, so applying this twice
    is the same as applying it once.

    Examples:
        >>> format_group_name("get_user-profile")
        'Get User Profile'
        >>> format_group_name("v2_userAPI")
        'V2 UserAPI'
    """
    name = name.replace("_", " ").replace("-", " ")
    return _WORD_START.sub(lambda m: m.group(1).upper(), name)


def format_file_name(name: str) -> str:
    """Turn a display name into a file-system safe, lower-case name."""
    safe = name.replace(" ", "_").replace("/", "_").lower()
    return safe if safe.strip(".") else UNNAMED_FILE_NAME


def get_file_extension(file_path: Union[str, Path]) -> str:
    """Get file extension (lowercase, with dot)."""
    return Path(file_path).suffix.lower()


def has_extension(file_path: Union[str, Path], extensions: Iterable[str]) -> bool:
    """Check whether file_path ends in one of the given extensions (case-insensitive)."""
    return get_file_extension(file_path) in {ext.lower() for ext in extensions}
