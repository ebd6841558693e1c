"""Domain exceptions and their HTTP mapping.

Every error response shares one body shape:
    {timestamp, status, error, message, path[, validationErrors]}
"""

import logging
from datetime import datetime
from http import HTTPStatus
from typing import Any, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class DomainError(Exception):
    """Base class for errors raised by the application layer."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(DomainError):
    status_code = HTTPStatus.NOT_FOUND

    def __init__(self, resource: str, field: str, value: Any):
        super().__init__(f"{resource} not found with {field}: '{value}'")
        self.resource = resource
        self.field = field
        self.value = value


class LocationNotFoundError(NotFoundError):
    def __init__(self, location_id: Any):
        super().__init__("Location", "id", location_id)


class TransportationNotFoundError(NotFoundError):
    def __init__(self, transportation_id: Any):
        super().__init__("Transportation", "id", transportation_id)


class DuplicateResourceError(DomainError):
    status_code = HTTPStatus.CONFLICT

    def __init__(self, resource: str, field: str, value: Any):
        super().__init__(f"{resource} already exists with {field}: '{value}'")


class ResourceInUseError(DomainError):
    """Raised when deleting something other records still reference."""

    status_code = HTTPStatus.CONFLICT


class ConcurrentModificationError(DomainError):
    status_code = HTTPStatus.CONFLICT

    def __init__(self, resource: str):
        super().__init__(
            f"The {resource} has been modified by another user. Please refresh and try again."
        )


class CatalogValidationError(DomainError):
    status_code = HTTPStatus.BAD_REQUEST


class AuthenticationFailedError(DomainError):
    status_code = HTTPStatus.UNAUTHORIZED


class AccessDeniedError(DomainError):
    """Authenticated, but the user's role may not call this endpoint."""

    status_code = HTTPStatus.FORBIDDEN


class ItineraryInvariantError(DomainError):
    """An assembled itinerary broke connectivity / flight-count / order rules.

    Signals a defect in route enumeration, never bad input.
    """

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str, segment_ids: Optional[List[Any]] = None):
        super().__init__(message)
        self.segment_ids = segment_ids or []


def error_body(
    status: HTTPStatus,
    message: str,
    path: str,
    validation_errors: Optional[List[dict]] = None,
) -> dict:
    body = {
        "timestamp": datetime.now().isoformat(),
        "status": status.value,
        "error": status.phrase,
        "message": message,
        "path": path,
    }
    if validation_errors is not None:
        body["validationErrors"] = validation_errors
    return body


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Translate a DomainError into its JSON error response."""
    status = HTTPStatus(exc.status_code)
    if status >= HTTPStatus.INTERNAL_SERVER_ERROR:
        logger.error(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
        message = "An unexpected error occurred"
    else:
        logger.warning(f"{type(exc).__name__}: {exc.message}")
        message = exc.message
    return JSONResponse(
        status_code=status.value,
        content=error_body(status, message, request.url.path),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request validation failures as 400 with per-field messages."""
    validation_errors = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")),
            "message": error.get("msg", ""),
        }
        for error in exc.errors()
    ]
    logger.warning(f"Validation failed on {request.url.path}: {validation_errors}")
    return JSONResponse(
        status_code=HTTPStatus.BAD_REQUEST.value,
        content=error_body(
            HTTPStatus.BAD_REQUEST, "Validation failed", request.url.path, validation_errors
        ),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
