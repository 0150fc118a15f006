"""
Export API routes.

Load Yaak exports, inspect their derived tree and variable map, switch the
active workspace/environment and render templates against the result.
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from ..config import settings
from ..exceptions import ErrorResponse
from ..models.export import YaakExport
from ..schemas.resources import RawYaakExport
from ..schemas.snapshot import (
    ExportSummary,
    RenderedHttpRequest,
    RenderRequest,
    RenderResponse,
    SelectionUpdate,
)
from ..schemas.tree import dump_tree
from ..services.export_store import ExportStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/exports",
    tags=["exports"],
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)


def _summarize(export_id: str, export: YaakExport) -> ExportSummary:
    return ExportSummary(
        id=export_id,
        yaak_version=export.yaak_version,
        yaak_schema=export.yaak_schema,
        exported_at=export.exported_at,
        active_workspace_id=export.active_workspace_id,
        active_environment_id=export.active_environment_id,
        workspace_count=len(export.workspace_map),
        environment_count=len(export.environment_map),
        folder_count=len(export.folder_map),
        http_request_count=len(export.http_request_map),
    )


@router.post("", response_model=ExportSummary, status_code=status.HTTP_201_CREATED)
def load_export(raw_export: RawYaakExport, store: ExportStore = Depends(get_store)):
    """
    Load a raw Yaak export document.

    The first workspace and first environment of the document become active.

    Returns:
        Summary of the loaded export including its assigned id
    """
    export = YaakExport(raw_export, include_root_requests=settings.include_root_requests)
    export_id = store.add(export)
    logger.info(
        "Loaded export %s (yaak %s, %d workspaces)",
        export_id, export.yaak_version, len(export.workspace_map),
    )
    return _summarize(export_id, export)


@router.get("", response_model=list[ExportSummary])
def list_exports(store: ExportStore = Depends(get_store)):
    """List all loaded exports."""
    return [_summarize(export_id, export) for export_id, export in store.items()]


@router.get("/{export_id}")
def get_export(export_id: str, store: ExportStore = Depends(get_store)):
    """
    Get the full serialization of a loaded export.

    Raises:
        ExportNotFoundError: 404 if the export is not loaded
    """
    export = store.get(export_id)
    with store.lock:
        return export.to_json()


@router.delete("/{export_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_export(export_id: str, store: ExportStore = Depends(get_store)):
    """Unload an export."""
    store.delete(export_id)
    logger.info("Deleted export %s", export_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{export_id}/tree")
def get_tree(export_id: str, store: ExportStore = Depends(get_store)):
    """Get the folder/request tree of the active workspace."""
    export = store.get(export_id)
    return dump_tree(export.tree)


@router.get("/{export_id}/variables")
def get_variables(export_id: str, store: ExportStore = Depends(get_store)):
    """Get the resolved variables as ordered ``[name, value]`` pairs."""
    export = store.get(export_id)
    return [list(pair) for pair in export.snapshot.variable_map]


@router.put("/{export_id}/active-workspace", response_model=ExportSummary)
def select_workspace(
    export_id: str,
    selection: SelectionUpdate,
    store: ExportStore = Depends(get_store),
):
    """
    Change the active workspace.

    Raises:
        WorkspaceNotFoundError: 404 if strict and the workspace is not in the export
    """
    export = store.get(export_id)
    with store.lock:
        export.set_active_workspace(selection.id, strict=selection.strict)
    logger.info("Export %s: active workspace set to %s", export_id, selection.id)
    return _summarize(export_id, export)


@router.put("/{export_id}/active-environment", response_model=ExportSummary)
def select_environment(
    export_id: str,
    selection: SelectionUpdate,
    store: ExportStore = Depends(get_store),
):
    """
    Change the active environment.

    Raises:
        EnvironmentNotFoundError: 404 if strict and the environment is not in the export
    """
    export = store.get(export_id)
    with store.lock:
        export.set_active_environment(selection.id, strict=selection.strict)
    logger.info("Export %s: active environment set to %s", export_id, selection.id)
    return _summarize(export_id, export)


@router.post("/{export_id}/render", response_model=RenderResponse)
def render_template(
    export_id: str,
    render_request: RenderRequest,
    store: ExportStore = Depends(get_store),
):
    """Render a template against the export's current variables."""
    export = store.get(export_id)
    rendered, unmatched = export.render(render_request.template)
    return RenderResponse(rendered=rendered, unmatched=unmatched)


@router.get(
    "/{export_id}/requests/{request_id}/rendered",
    response_model=RenderedHttpRequest,
)
def get_rendered_request(
    export_id: str,
    request_id: str,
    store: ExportStore = Depends(get_store),
):
    """
    Get an HTTP request with its URL, headers, parameters and body rendered.

    Raises:
        HttpRequestNotFoundError: 404 if the request is not in the export
    """
    export = store.get(export_id)
    return export.render_http_request(request_id)
