"""Constants and enumerations used throughout httpconv."""

from enum import Enum
from pathlib import Path
from typing import List


# Collection document
POSTMAN_SCHEMA_URL = "https://schema.getpostman.com/json/collection/v2.1.0/collection.json"
DEFAULT_DESCRIPTION = "Generated from HTTP files"
VARIABLE_TYPE = "string"


# Body modes
class BodyMode(str, Enum):
    """Request body modes understood by the converters."""

    RAW = "raw"
    FORMDATA = "formdata"


class AuthType(str, Enum):
    """Auth types with special handling."""

    BEARER = "bearer"
    NOAUTH = "noauth"


BEARER_TOKEN_KEY = "token"


# Request files
REQUEST_DELIMITER = "###"
REQUEST_NAME_PREFIX = "# "
DEFAULT_REQUEST_EXTENSIONS: List[str] = [".http", ".rest"]
IMPORT_FILE_EXTENSION = ".http"


# Defaults for file names and locations
DEFAULT_OUTPUT_FILE = "import_postman_collection.json"
DEFAULT_IMPORT_BASE_FOLDER = "http-requests"
ENV_FILE_NAME = "http-client.env.json"
DEFAULT_CONFIG_PATH = Path("config") / "httpconv.yaml"
UNNAMED_FILE_NAME = "unnamed"


# Logging
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}"
