# src/httpconv/conversion/__init__.py

"""Tree data model and assembly for request collections."""

from .data_models import (
    Header,
    AuthContext,
    RequestRecord,
    RequestNode,
    FolderNode,
    GroupNode,
    Variable,
    Collection,
    node_from_dict,
)
from .tree_builder import CollectionBuilder

__all__ = [
    "Header",
    "AuthContext",
    "RequestRecord",
    "RequestNode",
    "FolderNode",
    "GroupNode",
    "Variable",
    "Collection",
    "node_from_dict",
    "CollectionBuilder",
]
