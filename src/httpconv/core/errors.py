"""Error taxonomy for collection conversion."""

from enum import Enum
from typing import Optional


class ErrorCategory(str, Enum):
    """Error categories for classification."""

    FILE_ERROR = "file_error"  # Unreadable path, failed write
    PARSING_ERROR = "parsing_error"  # Malformed block, header line or tree node
    VALIDATION_ERROR = "validation_error"  # Collection document has the wrong shape
    CONFIGURATION_ERROR = "configuration_error"


class ConversionError(Exception):
    """Base error for anything that aborts an export or import."""

    category: ErrorCategory = ErrorCategory.FILE_ERROR

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.source = source

    def __str__(self) -> str:
        if self.source:
            return f"{self.message} ({self.source})"
        return self.message


class RequestFormatError(ConversionError):
    """A single request block or collection node could not be parsed.

    Raised and caught locally; never aborts a whole run.
    """

    category = ErrorCategory.PARSING_ERROR


class CollectionFormatError(ConversionError):
    """The collection document as a whole is unusable."""

    category = ErrorCategory.VALIDATION_ERROR


class ConfigurationError(ConversionError):
    """Invalid or unreadable configuration file."""

    category = ErrorCategory.CONFIGURATION_ERROR
