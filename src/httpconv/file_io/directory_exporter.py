"""Export a directory of request files to a collection document."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional, Union

from loguru import logger

from .env_loader import find_env_file, load_env_variables
from .request_parser import RequestFileParser
from ..conversion.data_models import Collection
from ..conversion.tree_builder import CollectionBuilder
from ..core.conversion_report import ConversionReport
from ..core.errors import ConversionError, ErrorCategory, RequestFormatError
from ..utils.constants import (
    DEFAULT_DESCRIPTION,
    DEFAULT_OUTPUT_FILE,
    DEFAULT_REQUEST_EXTENSIONS,
    ENV_FILE_NAME,
)
from ..utils.helpers import has_extension


@dataclass
class ExportConfig:
    """Export configuration."""

    output_file: str = DEFAULT_OUTPUT_FILE
    request_extensions: List[str] = field(default_factory=lambda: list(DEFAULT_REQUEST_EXTENSIONS))
    env_file_name: str = ENV_FILE_NAME
    description: str = DEFAULT_DESCRIPTION


class DirectoryExporter:
    """
    Walk a directory of request files and build a collection from it.

    Directories become folders, every request file becomes a folder of its
    requests, and variables come from the nearest environment file.
    """

    def __init__(
        self,
        config: Optional[ExportConfig] = None,
        report: Optional[ConversionReport] = None,
    ):
        """
        Initialize DirectoryExporter.

        Args:
            config: Export configuration
            report: Report that collects counts and skipped units
        """
        self.config = config or ExportConfig()
        self.report = report if report is not None else ConversionReport(operation="export")
        self.parser = RequestFileParser(report=self.report)

    def iter_request_files(self, root: Path) -> Iterator[Path]:
        """
        Yield request files below root in lexical, depth-first order.

        Symlinked directories are not followed.

        Raises:
            ConversionError: If a directory cannot be listed
        """
        try:
            entries = sorted(root.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise ConversionError(f"Could not read directory: {e}", str(root)) from e

        for entry in entries:
            if entry.is_symlink() and entry.is_dir():
                logger.debug(f"Not following directory symlink: {entry}")
                continue
            if entry.is_dir():
                yield from self.iter_request_files(entry)
            elif entry.is_file() and has_extension(entry, self.config.request_extensions):
                yield entry

    def build_collection(self, root: Union[str, Path], collection_name: str) -> Collection:
        """
        Build a Collection from every request file below root.

        Args:
            root: Directory to export
            collection_name: Name recorded in the collection info

        Returns:
            The assembled Collection

        Raises:
            ConversionError: If root is not a readable directory
        """
        root = Path(root)
        if not root.is_dir():
            raise ConversionError("Export root is not a directory", str(root))

        logger.info(f"Exporting request files from {root}")
        builder = CollectionBuilder()

        for file_path in self.iter_request_files(root):
            self.report.files_processed += 1
            try:
                requests = self.parser.parse_file(file_path)
            except RequestFormatError as e:
                self.report.record_skip("file", str(file_path), e.message, ErrorCategory.PARSING_ERROR)
                continue

            dir_parts = file_path.relative_to(root).parent.parts
            builder.add_file(dir_parts, file_path.stem, requests)
            self.report.requests_converted += len(requests)

        collection = Collection(
            name=collection_name,
            items=builder.items,
            description=self.config.description,
        )

        env_file = find_env_file(root, self.config.env_file_name)
        if env_file is not None:
            collection.variables = load_env_variables(env_file, self.report)

        logger.info(
            f"Built collection '{collection_name}' from {self.report.files_processed} file(s), "
            f"{self.report.requests_converted} request(s)"
        )
        return collection

    def write_collection(self, collection: Collection, output_path: Union[str, Path]) -> Path:
        """
        Write the collection document as indented JSON.

        Raises:
            ConversionError: If the file cannot be written
        """
        output_path = Path(output_path)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "w", encoding="utf-8") as f:
                json.dump(collection.to_dict(), f, indent=2, ensure_ascii=False)
                f.write("\n")
        except OSError as e:
            logger.error(f"Writing collection to {output_path} failed: {e}")
            raise ConversionError(f"Could not write collection: {e}", str(output_path)) from e

        self.report.files_written += 1
        logger.info(f"Collection written to {output_path}")
        return output_path

    def export(
        self,
        root: Union[str, Path],
        collection_name: str,
        output_dir: Optional[Union[str, Path]] = None,
    ) -> Path:
        """Build the collection for root and write it to output_dir (cwd if None)."""
        collection = self.build_collection(root, collection_name)
        output_dir = Path(output_dir) if output_dir is not None else Path.cwd()
        return self.write_collection(collection, output_dir / self.config.output_file)
