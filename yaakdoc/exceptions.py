"""
Custom exception classes and error handling for yaakdoc.

Domain errors carry an HTTP status and error code so the same exception
raised by the export model surfaces as a consistent JSON error response.
"""

from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""
    detail: str
    error_code: str | None = None


class APIException(Exception):
    """Base exception for yaakdoc errors."""

    def __init__(
        self,
        detail: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_code: str | None = None
    ):
        self.detail = detail
        self.status_code = status_code
        self.error_code = error_code
        super().__init__(detail)


class ResourceNotFoundError(APIException):
    """Exception raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: Any):
        self.resource_type = resource_type
        self.resource_id = resource_id
        super().__init__(
            detail=f"{resource_type} with id {resource_id} not found",
            status_code=status.HTTP_404_NOT_FOUND,
            error_code="RESOURCE_NOT_FOUND"
        )


class WorkspaceNotFoundError(ResourceNotFoundError):
    """Raised by strict workspace selection when the id is not in the export."""

    def __init__(self, workspace_id: Any):
        super().__init__("Workspace", workspace_id)


class EnvironmentNotFoundError(ResourceNotFoundError):
    """Raised by strict environment selection when the id is not in the export."""

    def __init__(self, environment_id: Any):
        super().__init__("Environment", environment_id)


class ExportNotFoundError(ResourceNotFoundError):
    def __init__(self, export_id: Any):
        super().__init__("Export", export_id)


class HttpRequestNotFoundError(ResourceNotFoundError):
    def __init__(self, request_id: Any):
        super().__init__("HttpRequest", request_id)


class InvalidExportError(APIException):
    """Exception raised when a raw export document fails validation."""

    def __init__(self, detail: str):
        super().__init__(
            detail=detail,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            error_code="VALIDATION_ERROR"
        )


def format_validation_errors(errors: list[dict]) -> str:
    """Flatten pydantic error dicts into a single readable message."""
    error_messages = []
    for error in errors:
        loc = " -> ".join(str(l) for l in error["loc"])
        msg = error["msg"]
        error_messages.append(f"{loc}: {msg}")

    return "; ".join(error_messages) if error_messages else "Validation error"


async def api_exception_handler(request: Request, exc: APIException) -> JSONResponse:
    """Handler for custom API exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(detail=exc.detail, error_code=exc.error_code).model_dump(),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handler for request body validation errors."""
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=ErrorResponse(
            detail=format_validation_errors(exc.errors()),
            error_code="VALIDATION_ERROR",
        ).model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application."""
    app.add_exception_handler(APIException, api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
