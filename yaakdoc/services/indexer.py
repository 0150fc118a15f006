"""
Indexing service for building id-keyed lookup tables from a raw export.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, TypeVar

from ..schemas.resources import (
    Environment,
    Folder,
    HttpRequest,
    RawYaakResources,
    Workspace,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", Workspace, Environment, Folder, HttpRequest)


@dataclass
class ResourceIndex:
    """
    Four id -> entity tables plus the ordered ids of each kind.

    The id lists record first-occurrence order of the raw lists and are
    what default selection reads, so "the first workspace" never depends on
    mapping iteration order.
    """
    workspaces: dict[str, Workspace] = field(default_factory=dict)
    environments: dict[str, Environment] = field(default_factory=dict)
    folders: dict[str, Folder] = field(default_factory=dict)
    http_requests: dict[str, HttpRequest] = field(default_factory=dict)
    workspace_ids: list[str] = field(default_factory=list)
    environment_ids: list[str] = field(default_factory=list)

    @property
    def first_workspace_id(self) -> str | None:
        return self.workspace_ids[0] if self.workspace_ids else None

    @property
    def first_environment_id(self) -> str | None:
        return self.environment_ids[0] if self.environment_ids else None


def index_by_id(items: Iterable[T]) -> tuple[dict[str, T], list[str]]:
    """
    Key items by id. A later item with a repeated id replaces the earlier
    one but keeps the earlier position.

    Returns:
        Tuple of (id -> item mapping, ids in first-occurrence order)
    """
    table: dict[str, T] = {}
    order: list[str] = []
    for item in items:
        if item.id not in table:
            order.append(item.id)
        table[item.id] = item
    return table, order


def build_index(resources: RawYaakResources) -> ResourceIndex:
    """
    Build the lookup tables for a raw resource bundle.

    No reference checking is done here: dangling workspace or folder ids
    only show up later as entries missing from the tree.
    """
    workspaces, workspace_ids = index_by_id(resources.workspaces)
    environments, environment_ids = index_by_id(resources.environments)
    folders, _ = index_by_id(resources.folders)
    http_requests, _ = index_by_id(resources.http_requests)

    logger.debug(
        "Indexed %d workspaces, %d environments, %d folders, %d requests",
        len(workspaces), len(environments), len(folders), len(http_requests),
    )

    return ResourceIndex(
        workspaces=workspaces,
        environments=environments,
        folders=folders,
        http_requests=http_requests,
        workspace_ids=workspace_ids,
        environment_ids=environment_ids,
    )
