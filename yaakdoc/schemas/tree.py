"""
Pydantic schemas for the materialized folder/request tree.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict


TreeNodeType = Literal["folder", "httpRequest"]


class TreeNode(BaseModel):
    """
    One node of a workspace tree.

    Folders always carry a ``nodes`` tuple (possibly empty). Requests are
    leaves and leave ``nodes`` unset, so it is omitted on serialization.
    """
    id: str
    type: TreeNodeType
    nodes: tuple["TreeNode", ...] | None = None

    model_config = ConfigDict(frozen=True)


TreeNode.model_rebuild()


def dump_tree(tree: tuple[TreeNode, ...] | list[TreeNode]) -> list[dict]:
    """Serialize a tree, dropping the ``nodes`` key from request leaves."""
    return [node.model_dump(mode="json", exclude_none=True) for node in tree]
