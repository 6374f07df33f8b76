"""Utility modules for httpconv."""

from .constants import *
from .helpers import (
    setup_logging,
    load_config,
    config_section,
    build_section_config,
    format_group_name,
    format_file_name,
    get_file_extension,
    has_extension,
)

__all__ = [
    "POSTMAN_SCHEMA_URL",
    "ENV_FILE_NAME",
    "DEFAULT_OUTPUT_FILE",
    "DEFAULT_IMPORT_BASE_FOLDER",
    "setup_logging",
    "load_config",
    "config_section",
    "build_section_config",
    "format_group_name",
    "format_file_name",
    "get_file_extension",
    "has_extension",
]
