"""Assemble parsed request files into a nested group tree."""

from typing import Dict, List, Sequence, Tuple

from loguru import logger

from .data_models import FolderNode, GroupNode, RequestNode, RequestRecord
from ..utils.helpers import format_group_name


class CollectionBuilder:
    """
    Builds the top-level item list of a collection, one request file at a time.

    Directory folders are tracked in an index keyed by their formatted path,
    so files that share ancestor directories land in the same folders.
    File-derived groups are never indexed: two files whose names format the
    same way become two sibling nodes, and a directory never merges into a
    file group.
    """

    def __init__(self):
        """Initialize CollectionBuilder with an empty tree."""
        self.items: List[GroupNode] = []
        self._folders: Dict[Tuple[str, ...], FolderNode] = {}

    def add_file(
        self,
        dir_parts: Sequence[str],
        file_stem: str,
        requests: Sequence[RequestRecord],
    ) -> FolderNode:
        """
        Add the requests of one file under its directory path.

        Args:
            dir_parts: Directory names from the export root down to the file's folder
            file_stem: File name without extension
            requests: Requests parsed from the file, in file order

        Returns:
            The FolderNode created for the file
        """
        siblings = self._ensure_folders(dir_parts)
        file_group = FolderNode(
            name=format_group_name(file_stem),
            children=[RequestNode(name=record.name, request=record) for record in requests],
        )
        siblings.append(file_group)
        logger.debug(
            f"Added group '{file_group.name}' with {len(requests)} request(s) "
            f"under /{'/'.join(dir_parts)}"
        )
        return file_group

    def _ensure_folders(self, dir_parts: Sequence[str]) -> List[GroupNode]:
        """Return the child list of the folder at dir_parts, creating folders as needed."""
        siblings = self.items
        key: Tuple[str, ...] = ()
        for part in dir_parts:
            key = key + (format_group_name(part),)
            folder = self._folders.get(key)
            if folder is None:
                folder = FolderNode(name=key[-1])
                siblings.append(folder)
                self._folders[key] = folder
            siblings = folder.children
        return siblings
