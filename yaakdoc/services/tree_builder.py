"""
Tree service for building a workspace's folder/request hierarchy.

Folders and requests arrive as flat lists with parent-id back-references.
Children are grouped by parent id in a single pass and the tree is then
assembled recursively from the root folders down.
"""

import logging
from collections import defaultdict
from typing import Iterable, Optional

from ..schemas.resources import Folder, HttpRequest
from ..schemas.tree import TreeNode

logger = logging.getLogger(__name__)


def build_tree(
    workspace_id: str | None,
    folders: Iterable[Folder],
    requests: Iterable[HttpRequest],
    include_root_requests: bool = False,
) -> list[TreeNode]:
    """
    Build the tree for one workspace from flat lists of folders and requests.

    Within a folder, child folders come first and child requests after,
    each in the order of the input lists.

    Args:
        workspace_id: Workspace to build for; None yields an empty tree.
        folders: All folders of the export, any workspace.
        requests: All HTTP requests of the export, any workspace.
        include_root_requests: Also list requests without a folder after
            the root folders.

    Returns:
        Root-level folder nodes with recursively nested children.
    """
    if workspace_id is None:
        return []

    children_map: dict[Optional[str], list[Folder]] = defaultdict(list)
    for folder in folders:
        if folder.workspace_id == workspace_id:
            children_map[folder.folder_id or None].append(folder)

    request_map: dict[Optional[str], list[HttpRequest]] = defaultdict(list)
    for request in requests:
        if request.workspace_id == workspace_id:
            request_map[request.folder_id or None].append(request)

    def _build_subtree(parent_id: Optional[str]) -> list[TreeNode]:
        result = [
            TreeNode(id=folder.id, type="folder", nodes=tuple(_build_subtree(folder.id)))
            for folder in children_map.get(parent_id, [])
        ]
        if parent_id is not None:
            result.extend(
                TreeNode(id=req.id, type="httpRequest")
                for req in request_map.get(parent_id, [])
            )
        return result

    tree = _build_subtree(None)
    if include_root_requests:
        tree.extend(
            TreeNode(id=req.id, type="httpRequest")
            for req in request_map.get(None, [])
        )

    logger.debug("Built tree for workspace %s with %d root nodes", workspace_id, len(tree))
    return tree


def iter_tree(tree: Iterable[TreeNode]) -> Iterable[TreeNode]:
    """Yield every node of a tree, depth first, parents before children."""
    for node in tree:
        yield node
        if node.nodes:
            yield from iter_tree(node.nodes)

