"""
Application-wide exception handlers.

Route handlers translate the errors they expect themselves; these handlers
cover what escapes them: malformed requests rejected by FastAPI, unknown
routes, domain errors raised outside a handler and anything unexpected.
"""

from __future__ import annotations

import traceback
from http import HTTPStatus

from aws_lambda_powertools import Logger
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from photo_gallery.core.models.errors import PhotoServiceError
from photo_gallery.core.utils.constants import (
    ERROR_CODE_INTERNAL_ERROR,
    REQUEST_ID_HEADER,
    SERVICE_NAME,
)
from photo_gallery.core.utils.response import ResponseBuilder
from photo_gallery.core.utils.validators import sanitize_validation_errors

logger = Logger(service=SERVICE_NAME, UTC=True)


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None) or request.headers.get(
        REQUEST_ID_HEADER
    )


def _log_error(
    message: str,
    *,
    request: Request,
    exc: Exception,
    level: str = "warning",
) -> None:
    """
    Log error with consistent structure and full context.

    Args:
        message: Log message
        request: Request being handled
        exc: Exception that was raised
        level: Log level ('warning' or 'exception')
    """
    log_extra = {
        "http_method": request.method,
        "path": request.url.path,
        "request_id": _request_id(request),
        "error": str(exc),
        "error_type": type(exc).__name__,
    }

    if level == "exception":
        logger.exception(message, extra=log_extra)
    else:
        log_extra["traceback"] = traceback.format_exc()
        logger.warning(message, extra=log_extra)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed requests are client errors: 400 with sanitized field errors."""
    _log_error("Request validation failed", request=request, exc=exc)

    return ResponseBuilder.validation_error(
        message="Invalid request",
        details={"errors": sanitize_validation_errors(list(exc.errors()))},
        request_id=_request_id(request),
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    status = HTTPStatus(exc.status_code)
    response = ResponseBuilder.error(
        status=status,
        message=str(exc.detail) if exc.detail else status.phrase,
        request_id=_request_id(request),
    )

    if exc.headers:
        response.headers.update(exc.headers)

    return response


async def photo_service_exception_handler(
    request: Request, exc: PhotoServiceError
) -> JSONResponse:
    level = "exception" if exc.status >= HTTPStatus.INTERNAL_SERVER_ERROR else "warning"
    _log_error("Unhandled domain error", request=request, exc=exc, level=level)

    return ResponseBuilder.from_exception(exc, request_id=_request_id(request))


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    _log_error("Unexpected error in handler", request=request, exc=exc, level="exception")

    return ResponseBuilder.internal_error(
        "We're experiencing technical difficulties. Please try again in a few moments.",
        error=ERROR_CODE_INTERNAL_ERROR,
        request_id=_request_id(request),
    )


def configure_exception_handlers(app: FastAPI) -> None:
    """Register every handler on the application."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(PhotoServiceError, photo_service_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
