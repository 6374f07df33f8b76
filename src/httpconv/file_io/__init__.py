"""I/O modules for request-file parsing, export and import."""

from .request_parser import RequestFileParser, split_headers_and_body
from .request_writer import render_request, write_request_file
from .env_loader import find_env_file, load_env_variables
from .directory_exporter import DirectoryExporter, ExportConfig
from .collection_importer import CollectionImporter, ImportConfig

__all__ = [
    "RequestFileParser",
    "split_headers_and_body",
    "render_request",
    "write_request_file",
    "find_env_file",
    "load_env_variables",
    "DirectoryExporter",
    "ExportConfig",
    "CollectionImporter",
    "ImportConfig",
]
