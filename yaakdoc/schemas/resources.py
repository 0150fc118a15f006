"""
Pydantic schemas for the raw Yaak export document.

Field names are snake_case in Python and camelCase on the wire. Unknown
fields are kept as-is so a loaded resource re-serializes unchanged.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class YaakModel(BaseModel):
    """Base schema for everything that comes out of a Yaak export."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class EnvironmentVariable(YaakModel):
    """A name/value pair used for template substitution.

    A variable without an ``enabled`` key is treated as disabled.
    """
    name: str
    value: str = ""
    enabled: bool = False


class Workspace(YaakModel):
    """Top-level container; carries workspace-scoped variables."""
    id: str
    name: str = ""
    variables: list[EnvironmentVariable] = []


class Environment(YaakModel):
    """Named set of variables layered over the workspace's variables."""
    id: str
    workspace_id: str | None = None
    name: str = ""
    variables: list[EnvironmentVariable] = []


class Folder(YaakModel):
    id: str
    workspace_id: str
    folder_id: str | None = None
    name: str = ""


class HttpRequestHeader(YaakModel):
    name: str
    value: str = ""
    enabled: bool = True


class HttpUrlParameter(YaakModel):
    name: str
    value: str = ""
    enabled: bool = True


class HttpRequest(YaakModel):
    """A saved HTTP request; ``folder_id`` is None or empty at the workspace root."""
    id: str
    workspace_id: str
    folder_id: str | None = None
    name: str = ""
    method: str = "GET"
    url: str = ""
    headers: list[HttpRequestHeader] = []
    url_parameters: list[HttpUrlParameter] = []
    body_type: str | None = None
    body: dict[str, Any] = {}


class RawYaakResources(YaakModel):
    workspaces: list[Workspace] = []
    environments: list[Environment] = []
    folders: list[Folder] = []
    http_requests: list[HttpRequest] = []


class RawYaakExport(YaakModel):
    """The export document as produced by Yaak's "Export Data" action."""
    yaak_version: str
    yaak_schema: int
    timestamp: datetime
    resources: RawYaakResources = Field(default_factory=RawYaakResources)
