"""
Pydantic schemas for derived export state and the HTTP surface.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from .tree import TreeNode


class ExportSnapshot(BaseModel):
    """
    Immutable view of the derived state after a selection change.

    A new snapshot is produced on every rebuild; ``version`` increases by
    one each time so callers can tell stale snapshots apart.
    """
    version: int
    active_workspace_id: str | None = None
    active_environment_id: str | None = None
    tree: tuple[TreeNode, ...] = ()
    variable_map: tuple[tuple[str, str], ...] = ()

    model_config = ConfigDict(frozen=True)

    @property
    def variables(self) -> dict[str, str]:
        """Resolved variables as a fresh dict, in resolution order."""
        return dict(self.variable_map)


# HTTP schemas

class SelectionUpdate(BaseModel):
    """Schema for selecting the active workspace or environment."""
    id: str
    strict: bool = False


class RenderRequest(BaseModel):
    template: str


class RenderResponse(BaseModel):
    rendered: str
    unmatched: list[str] = []


class RenderedHttpRequest(BaseModel):
    """An HTTP request with all templated fields rendered."""
    id: str
    name: str
    method: str
    url: str
    headers: list[tuple[str, str]] = []
    url_parameters: list[tuple[str, str]] = []
    body: dict = {}
    warnings: list[str] = []


class ExportSummary(BaseModel):
    """Schema for listing loaded exports."""
    id: str
    yaak_version: str
    yaak_schema: int
    exported_at: datetime
    active_workspace_id: str | None
    active_environment_id: str | None
    workspace_count: int
    environment_count: int
    folder_count: int
    http_request_count: int
