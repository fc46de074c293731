"""
Centralized API response builder for the HTTP handlers.
"""

from __future__ import annotations

from collections.abc import Iterator
from http import HTTPStatus
from typing import Any

from fastapi.responses import JSONResponse, StreamingResponse
from starlette.background import BackgroundTask

from photo_gallery.core.models.errors import PhotoServiceError
from photo_gallery.core.utils.constants import (
    ERROR_CODE_VALIDATION_FAILED,
    REQUEST_ID_HEADER,
)
from photo_gallery.core.utils.time import utc_now_iso

JsonDict = dict[str, Any]
JsonBody = JsonDict | list[Any]


class ResponseBuilder:
    """Factory for JSON and streaming HTTP responses."""

    @staticmethod
    def _build_headers(request_id: str | None = None) -> dict[str, str]:
        headers: dict[str, str] = {}

        if request_id:
            headers[REQUEST_ID_HEADER] = request_id

        return headers

    @staticmethod
    def _response(
        *,
        status: HTTPStatus,
        body: JsonBody,
        request_id: str | None = None,
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.value,
            content=body,
            headers=ResponseBuilder._build_headers(request_id),
        )

    @staticmethod
    def ok(
        body: JsonBody,
        *,
        request_id: str | None = None,
    ) -> JSONResponse:
        return ResponseBuilder._response(
            status=HTTPStatus.OK,
            body=body,
            request_id=request_id,
        )

    @staticmethod
    def error(
        *,
        status: HTTPStatus,
        message: str,
        error: str | None = None,
        details: JsonBody | None = None,
        request_id: str | None = None,
    ) -> JSONResponse:
        payload: JsonDict = {
            "error": message,
            "code": error or status.name,
            "timestamp": utc_now_iso(),
        }

        if details:
            payload["details"] = details

        if request_id:
            payload["request_id"] = request_id

        return ResponseBuilder._response(
            status=status,
            body=payload,
            request_id=request_id,
        )

    @staticmethod
    def bad_request(
        message: str,
        *,
        error: str | None = None,
        details: JsonBody | None = None,
        request_id: str | None = None,
    ) -> JSONResponse:
        return ResponseBuilder.error(
            status=HTTPStatus.BAD_REQUEST,
            message=message,
            error=error,
            details=details,
            request_id=request_id,
        )

    @staticmethod
    def validation_error(
        *,
        message: str,
        details: JsonBody | None = None,
        request_id: str | None = None,
    ) -> JSONResponse:
        """400 for malformed requests rejected before reaching a service."""
        return ResponseBuilder.error(
            status=HTTPStatus.BAD_REQUEST,
            error=ERROR_CODE_VALIDATION_FAILED,
            message=message,
            details=details,
            request_id=request_id,
        )

    @staticmethod
    def not_found(
        message: str = "Resource not found",
        *,
        error: str | None = None,
        request_id: str | None = None,
    ) -> JSONResponse:
        return ResponseBuilder.error(
            status=HTTPStatus.NOT_FOUND,
            message=message,
            error=error,
            request_id=request_id,
        )

    @staticmethod
    def internal_error(
        message: str = "Internal server error",
        *,
        error: str | None = None,
        request_id: str | None = None,
    ) -> JSONResponse:
        return ResponseBuilder.error(
            status=HTTPStatus.INTERNAL_SERVER_ERROR,
            message=message,
            error=error,
            request_id=request_id,
        )

    @staticmethod
    def from_exception(
        exc: PhotoServiceError,
        *,
        request_id: str | None = None,
    ) -> JSONResponse:
        """Render a domain error with the status its class maps to."""
        return ResponseBuilder.error(
            status=exc.status,
            message=exc.message,
            error=exc.error_code,
            request_id=request_id,
        )

    @staticmethod
    def stream(
        chunks: Iterator[bytes],
        *,
        content_type: str,
        content_length: int | None = None,
        headers: dict[str, str] | None = None,
        background: BackgroundTask | None = None,
        request_id: str | None = None,
    ) -> StreamingResponse:
        response_headers: dict[str, str] = ResponseBuilder._build_headers(request_id)

        if content_length is not None:
            response_headers["Content-Length"] = str(content_length)

        if headers:
            response_headers.update(headers)

        return StreamingResponse(
            chunks,
            status_code=HTTPStatus.OK.value,
            media_type=content_type,
            headers=response_headers,
            background=background,
        )
