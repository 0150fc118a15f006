"""
Pydantic schemas package.

Exports the raw export schemas, the derived tree/snapshot schemas and the
schemas used by the HTTP surface.
"""

from .resources import (
    YaakModel,
    EnvironmentVariable,
    Workspace,
    Environment,
    Folder,
    HttpRequestHeader,
    HttpUrlParameter,
    HttpRequest,
    RawYaakResources,
    RawYaakExport,
)

from .tree import (
    TreeNodeType,
    TreeNode,
    dump_tree,
)

from .snapshot import (
    ExportSnapshot,
    SelectionUpdate,
    RenderRequest,
    RenderResponse,
    RenderedHttpRequest,
    ExportSummary,
)

__all__ = [
    # Raw export schemas
    "YaakModel",
    "EnvironmentVariable",
    "Workspace",
    "Environment",
    "Folder",
    "HttpRequestHeader",
    "HttpUrlParameter",
    "HttpRequest",
    "RawYaakResources",
    "RawYaakExport",
    # Tree schemas
    "TreeNodeType",
    "TreeNode",
    "dump_tree",
    # Snapshot and HTTP schemas
    "ExportSnapshot",
    "SelectionUpdate",
    "RenderRequest",
    "RenderResponse",
    "RenderedHttpRequest",
    "ExportSummary",
]
