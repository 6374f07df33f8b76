"""
httpconv - HTTP request file / Postman collection converter

Converts a directory tree of .http request files into a Postman v2.1
collection document, and a collection back into request files.
"""

__version__ = "1.0.0"
__license__ = "MIT"

from .conversion.data_models import Collection, RequestRecord
from .file_io.directory_exporter import DirectoryExporter
from .file_io.collection_importer import CollectionImporter

__all__ = [
    "Collection",
    "RequestRecord",
    "DirectoryExporter",
    "CollectionImporter",
]
