"""Core infrastructure modules for httpconv."""

from .errors import (
    ErrorCategory,
    ConversionError,
    RequestFormatError,
    CollectionFormatError,
    ConfigurationError,
)
from .conversion_report import ConversionReport, SkippedUnit, EXIT_OK, EXIT_FATAL, EXIT_PARTIAL

__all__ = [
    "ErrorCategory",
    "ConversionError",
    "RequestFormatError",
    "CollectionFormatError",
    "ConfigurationError",
    "ConversionReport",
    "SkippedUnit",
    "EXIT_OK",
    "EXIT_FATAL",
    "EXIT_PARTIAL",
]
