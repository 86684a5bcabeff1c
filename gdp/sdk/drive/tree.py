"""Project tree mapping.

Walks a Drive folder and builds an ordered tree of the Google Docs and
sub-folders it contains. Trees are built fresh on every call.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Dict, Any

from .folders import list_children
from .mime import DOCUMENT_MIME_TYPE, FOLDER_MIME_TYPE
from .validators import validate_item_id

logger = logging.getLogger(__name__)


class NodeKind(str, Enum):
    DOCUMENT = "doc"
    FOLDER = "folder"


@dataclass
class TreeNode:
    """One Drive item in a project tree. Only folders carry children."""

    id: str
    title: str
    mime_type: str
    kind: NodeKind
    children: Optional[List["TreeNode"]] = field(default=None)

    @property
    def is_folder(self) -> bool:
        return self.kind is NodeKind.FOLDER

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "title": self.title,
            "mime_type": self.mime_type,
            "kind": self.kind.value,
        }
        if self.is_folder:
            data["children"] = [child.to_dict() for child in self.children or []]
        return data


def _node_from_item(item: dict) -> Optional[TreeNode]:
    """Build a childless node for a listed item, or None for unsupported types."""
    mime_type = item.get("mimeType")
    if mime_type == DOCUMENT_MIME_TYPE:
        kind = NodeKind.DOCUMENT
    elif mime_type == FOLDER_MIME_TYPE:
        kind = NodeKind.FOLDER
    else:
        logger.debug(f"Skipping '{item.get('name')}' ({item.get('id')}): unsupported type {mime_type}")
        return None

    return TreeNode(
        id=item.get("id"),
        title=item.get("name"),
        mime_type=mime_type,
        kind=kind,
        children=[] if kind is NodeKind.FOLDER else None,
    )


def _map_folder(service, folder_id: str) -> List[TreeNode]:
    nodes = []
    for item in list_children(service, folder_id):
        node = _node_from_item(item)
        if node is None:
            continue
        if node.is_folder:
            node.children = _map_folder(service, node.id)
        nodes.append(node)
    return nodes


def map_folder(service, folder_id: str) -> List[TreeNode]:
    """
    Recursively map the documents and folders under a Drive folder.

    Items keep the order the listing returned them in. Anything that is
    neither a Google Doc nor a folder is left out.

    Args:
        service: Drive v3 service object
        folder_id: ID of the folder to map

    Returns:
        List of TreeNode for the folder's direct children

    Raises:
        InvalidItemIdError, LocalPathError: If folder_id is malformed.
        googleapiclient.errors.HttpError: If any listing call fails. No
            partial tree is returned.
    """
    validate_item_id(folder_id)
    return _map_folder(service, folder_id)


def map_folder_iterative(service, folder_id: str) -> List[TreeNode]:
    """
    Map a Drive folder like map_folder(), using an explicit stack.

    Folders are listed in the same depth-first order as map_folder(), so
    both functions return identical trees and fail on the same call.
    """
    validate_item_id(folder_id)
    root: List[TreeNode] = []
    stack = [(folder_id, root)]

    while stack:
        current_id, container = stack.pop()
        pending = []
        for item in list_children(service, current_id):
            node = _node_from_item(item)
            if node is None:
                continue
            container.append(node)
            if node.is_folder:
                pending.append((node.id, node.children))
        stack.extend(reversed(pending))

    return root


def tree_to_dicts(nodes: List[TreeNode]) -> List[Dict[str, Any]]:
    """Serialize a list of TreeNode to JSON-ready dicts."""
    return [node.to_dict() for node in nodes]


def count_nodes(nodes: List[TreeNode]) -> Dict[str, int]:
    """Count documents and folders in a tree."""
    counts = {"documents": 0, "folders": 0}
    for node in nodes:
        if node.is_folder:
            counts["folders"] += 1
            sub = count_nodes(node.children or [])
            counts["documents"] += sub["documents"]
            counts["folders"] += sub["folders"]
        else:
            counts["documents"] += 1
    return counts
