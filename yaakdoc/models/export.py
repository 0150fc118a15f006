"""
Export model holding an indexed Yaak export and its derived views.

A YaakExport indexes the raw resources once, then keeps one active
workspace and at most one active environment. Every selection change
rebuilds the folder/request tree and the resolved variable map and
publishes them as a new immutable ExportSnapshot.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ..exceptions import (
    EnvironmentNotFoundError,
    HttpRequestNotFoundError,
    InvalidExportError,
    WorkspaceNotFoundError,
    format_validation_errors,
)
from ..schemas.resources import (
    Environment,
    Folder,
    HttpRequest,
    RawYaakExport,
    Workspace,
)
from ..schemas.snapshot import ExportSnapshot, RenderedHttpRequest
from ..schemas.tree import TreeNode, dump_tree
from ..services.indexer import build_index
from ..services.tree_builder import build_tree
from ..services.variable_resolver import resolve_variables
from ..services.variable_substitution import render, render_request

logger = logging.getLogger(__name__)


class YaakExport:
    """
    Indexed Yaak export with active workspace/environment selection.

    On construction the first environment and then the first workspace of
    the raw lists become active, so single-workspace exports have a tree
    and variable map straight away.

    Attributes:
        yaak_version: Yaak version that produced the export
        yaak_schema: Export schema number
        exported_at: Export timestamp
        workspace_map: Workspace id -> Workspace, in input order
        environment_map: Environment id -> Environment, in input order
        folder_map: Folder id -> Folder, in input order
        http_request_map: HttpRequest id -> HttpRequest, in input order
        snapshot: Derived state from the latest rebuild
    """

    def __init__(self, raw_data: RawYaakExport, include_root_requests: bool = False):
        self.yaak_version = raw_data.yaak_version
        self.yaak_schema = raw_data.yaak_schema
        self.exported_at: datetime = raw_data.timestamp
        self.include_root_requests = include_root_requests

        self._index = build_index(raw_data.resources)
        self.workspace_map = self._index.workspaces
        self.environment_map = self._index.environments
        self.folder_map = self._index.folders
        self.http_request_map = self._index.http_requests

        self.active_workspace_id: str | None = None
        self.active_environment_id: str | None = None
        self._tree: list[TreeNode] = []
        self._variable_map: dict[str, str] = {}
        self.snapshot = ExportSnapshot(version=0)

        environment_id = self._index.first_environment_id
        if environment_id is not None:
            self.set_active_environment(environment_id)

        workspace_id = self._index.first_workspace_id
        if workspace_id is not None:
            self.set_active_workspace(workspace_id)

    # Loading helpers

    @classmethod
    def from_dict(cls, data: dict[str, Any], **kwargs) -> "YaakExport":
        """
        Validate a decoded export document and build the model.

        Raises:
            InvalidExportError: If the document does not match the export schema
        """
        try:
            raw = RawYaakExport.model_validate(data)
        except PydanticValidationError as e:
            raise InvalidExportError(format_validation_errors(e.errors())) from e
        return cls(raw, **kwargs)

    @classmethod
    def from_json(cls, text: str | bytes, **kwargs) -> "YaakExport":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidExportError(f"Export is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise InvalidExportError("Export document must be a JSON object")
        return cls.from_dict(data, **kwargs)

    @classmethod
    def from_file(cls, path: str | Path, **kwargs) -> "YaakExport":
        return cls.from_json(Path(path).read_text(encoding="utf-8"), **kwargs)

    # Active selection

    @property
    def active_workspace(self) -> Workspace | None:
        if self.active_workspace_id is None:
            return None
        return self.workspace_map.get(self.active_workspace_id)

    @property
    def active_environment(self) -> Environment | None:
        if self.active_environment_id is None:
            return None
        return self.environment_map.get(self.active_environment_id)

    def set_active_workspace(self, workspace_id: str, strict: bool = False) -> ExportSnapshot:
        """
        Make a workspace active and rebuild the tree and the variable map.

        Args:
            workspace_id: Id of the workspace to activate
            strict: Raise instead of accepting an id missing from the export

        Returns:
            The snapshot produced by the rebuild

        Raises:
            WorkspaceNotFoundError: If strict and the id does not resolve
        """
        if workspace_id not in self.workspace_map:
            if strict:
                raise WorkspaceNotFoundError(workspace_id)
            logger.warning("Workspace %s not found in export, tree will be empty", workspace_id)

        self.active_workspace_id = workspace_id
        self._build_tree()
        self._build_variable_map()
        return self._publish()

    def set_active_environment(self, environment_id: str, strict: bool = False) -> ExportSnapshot:
        """
        Make an environment active and rebuild the variable map.

        The tree does not depend on the environment and is left alone.

        Raises:
            EnvironmentNotFoundError: If strict and the id does not resolve
        """
        if environment_id not in self.environment_map:
            if strict:
                raise EnvironmentNotFoundError(environment_id)
            logger.warning("Environment %s not found in export, ignoring its variables", environment_id)

        self.active_environment_id = environment_id
        self._build_variable_map()
        return self._publish()

    # Derived views

    @property
    def tree(self) -> tuple[TreeNode, ...]:
        return self.snapshot.tree

    @property
    def variable_map(self) -> dict[str, str]:
        return self.snapshot.variables

    def get_http_request(self, request_id: str) -> HttpRequest:
        request = self.http_request_map.get(request_id)
        if request is None:
            raise HttpRequestNotFoundError(request_id)
        return request

    def get_folder(self, folder_id: str) -> Folder | None:
        return self.folder_map.get(folder_id)

    def render(self, template: str) -> tuple[str, list[str]]:
        """Render a template against the current variable map."""
        return render(template, self.variable_map)

    def render_http_request(self, request_id: str) -> RenderedHttpRequest:
        return render_request(self.get_http_request(request_id), self.variable_map)

    def to_json(self) -> dict[str, Any]:
        """
        Serialize the model.

        Lookup tables and the variable map are emitted as ordered
        ``[key, value]`` pairs so re-serialization is deterministic.
        """
        def dump(table: dict) -> list[list]:
            return [
                [key, value.model_dump(mode="json", by_alias=True, exclude_unset=True)]
                for key, value in table.items()
            ]

        return {
            "yaakVersion": self.yaak_version,
            "yaakSchema": self.yaak_schema,
            "exportedAt": self.exported_at.isoformat(),
            "activeWorkspaceId": self.active_workspace_id,
            "activeEnvironmentId": self.active_environment_id,
            "workspaceMap": dump(self.workspace_map),
            "environmentMap": dump(self.environment_map),
            "folderMap": dump(self.folder_map),
            "httpRequestMap": dump(self.http_request_map),
            "tree": dump_tree(self.tree),
            "variableMap": [list(pair) for pair in self.snapshot.variable_map],
        }

    # Rebuilds

    def _build_tree(self) -> None:
        workspace = self.active_workspace
        if workspace is None:
            self._tree = []
            return

        self._tree = build_tree(
            workspace.id,
            self.folder_map.values(),
            self.http_request_map.values(),
            include_root_requests=self.include_root_requests,
        )

    def _build_variable_map(self) -> None:
        self._variable_map = resolve_variables(self.active_workspace, self.active_environment)

    def _publish(self) -> ExportSnapshot:
        self.snapshot = ExportSnapshot(
            version=self.snapshot.version + 1,
            active_workspace_id=self.active_workspace_id,
            active_environment_id=self.active_environment_id,
            tree=tuple(self._tree),
            variable_map=tuple(self._variable_map.items()),
        )
        logger.debug(
            "Published snapshot v%d (workspace=%s, environment=%s)",
            self.snapshot.version, self.active_workspace_id, self.active_environment_id,
        )
        return self.snapshot
