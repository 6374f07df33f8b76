"""Import a collection document into a directory tree of request files."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Set, Union

from loguru import logger

from .request_writer import write_request_file
from ..conversion.data_models import AuthContext, Collection, FolderNode, GroupNode, node_from_dict
from ..core.conversion_report import ConversionReport
from ..core.errors import CollectionFormatError, ConversionError, RequestFormatError
from ..utils.constants import DEFAULT_IMPORT_BASE_FOLDER, IMPORT_FILE_EXTENSION
from ..utils.helpers import format_file_name


@dataclass
class ImportConfig:
    """Import configuration."""

    base_folder: str = DEFAULT_IMPORT_BASE_FOLDER
    file_extension: str = IMPORT_FILE_EXTENSION


class CollectionImporter:
    """
    Recreate request files from a collection document.

    Folders become directories and requests become files, both named by
    format_file_name. Auth is inherited from the nearest enclosing item
    (or the collection itself) that declares one.
    """

    def __init__(
        self,
        config: Optional[ImportConfig] = None,
        report: Optional[ConversionReport] = None,
    ):
        """
        Initialize CollectionImporter.

        Args:
            config: Import configuration
            report: Report that collects counts and skipped units
        """
        self.config = config or ImportConfig()
        self.report = report if report is not None else ConversionReport(operation="import")
        self._written: Set[Path] = set()

    def load(self, file_path: Union[str, Path]) -> Collection:
        """
        Read a collection document from disk.

        Raises:
            CollectionFormatError: If the file is not JSON or lacks a top-level item list
            ConversionError: If the file cannot be read
        """
        file_path = Path(file_path)
        try:
            with open(file_path, "r", encoding="utf-8-sig") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise CollectionFormatError(f"Invalid JSON: {e}", str(file_path)) from e
        except OSError as e:
            raise ConversionError(f"Could not read collection: {e}", str(file_path)) from e

        return self.read_collection(data, source=str(file_path))

    def read_collection(self, data: Any, source: str = "<collection>") -> Collection:
        """
        Convert a decoded collection document into a Collection.

        Nodes that are neither folders nor requests are skipped and recorded.

        Raises:
            CollectionFormatError: If there is no top-level item list
        """
        items = Collection.top_level_items(data)
        collection = Collection.header_from_dict(data)
        collection.items = self._read_items(items, source, ())
        logger.info(f"Read collection '{collection.name}' with {collection.count_requests()} request(s)")
        return collection

    def _read_items(self, items: List[Any], source: str, path: tuple) -> List[GroupNode]:
        nodes: List[GroupNode] = []
        for index, raw in enumerate(items):
            location = "/".join(path + (f"item[{index}]",))
            try:
                children = None
                if isinstance(raw, dict) and isinstance(raw.get("item"), list):
                    name = raw.get("name") or f"item[{index}]"
                    children = self._read_items(raw["item"], source, path + (str(name),))
                nodes.append(node_from_dict(raw, children))
            except RequestFormatError as e:
                self.report.record_skip("node", f"{source}:{location}", e.message)
        return nodes

    def write_tree(self, collection: Collection, base_dir: Union[str, Path]) -> Path:
        """
        Write every request of collection below base_dir.

        Raises:
            ConversionError: If a directory or file cannot be created
        """
        base_dir = Path(base_dir)
        self._make_dir(base_dir)
        self._write_nodes(collection.items, base_dir, collection.auth)
        logger.info(f"Wrote {self.report.files_written} request file(s) under {base_dir}")
        return base_dir

    def _write_nodes(
        self,
        nodes: List[GroupNode],
        directory: Path,
        parent_auth: Optional[AuthContext],
    ) -> None:
        for node in nodes:
            auth = node.auth if node.auth is not None else parent_auth
            target = directory / format_file_name(node.name)
            if isinstance(node, FolderNode):
                self._make_dir(target)
                self._write_nodes(node.children, target, auth)
                continue

            file_path = target.with_name(target.name + self.config.file_extension)
            if file_path in self._written:
                self.report.record_warning(str(file_path), "overwritten by a later request with the same name")
            write_request_file(file_path, node.request, auth)
            self._written.add(file_path)
            self.report.files_written += 1
            self.report.requests_converted += 1

    @staticmethod
    def _make_dir(directory: Path) -> None:
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Creating directory {directory} failed: {e}")
            raise ConversionError(f"Could not create directory: {e}", str(directory)) from e

    def import_file(
        self,
        file_path: Union[str, Path],
        output_dir: Optional[Union[str, Path]] = None,
    ) -> Path:
        """Load file_path and write its requests under output_dir/base_folder (cwd if None)."""
        self.report.files_processed += 1
        collection = self.load(file_path)
        output_dir = Path(output_dir) if output_dir is not None else Path.cwd()
        return self.write_tree(collection, output_dir / self.config.base_folder)
