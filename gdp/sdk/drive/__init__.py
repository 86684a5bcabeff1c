"""Google Drive SDK operations."""

from .mime import FOLDER_MIME_TYPE, DOCUMENT_MIME_TYPE
from .folders import list_children, create_folder
from .files import create_document, delete_item, get_item_metadata
from .tree import (
    NodeKind, TreeNode, map_folder, map_folder_iterative, tree_to_dicts, count_nodes
)
from .validators import validate_item_id

__all__ = [
    "FOLDER_MIME_TYPE",
    "DOCUMENT_MIME_TYPE",
    "list_children",
    "create_folder",
    "create_document",
    "delete_item",
    "get_item_metadata",
    "NodeKind",
    "TreeNode",
    "map_folder",
    "map_folder_iterative",
    "tree_to_dicts",
    "count_nodes",
    "validate_item_id",
]
