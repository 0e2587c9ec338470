"""
Error taxonomy for the gateway.

Every error raised by a handler is a GatewayError and is rendered as
``{"success": false, "error": <message>}`` with the error's status code.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class GatewayError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(GatewayError):
    """A required request field is missing."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConfigurationError(GatewayError):
    """A server-side credential is not configured."""


class UpstreamError(GatewayError):
    """The generation API or the mail relay failed or returned unusable data."""


def _error_body(message: str) -> dict:
    return {"success": False, "error": message}


async def gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
    logger.warning(
        "%s %s failed with %s: %s",
        request.method,
        request.url.path,
        type(exc).__name__,
        exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message))


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    logger.warning(
        "Invalid request body for %s %s: %s", request.method, request.url.path, errors
    )
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        detail = first.get("msg", "invalid value")
        message = f"Invalid request: {location}: {detail}" if location else f"Invalid request: {detail}"
    else:
        message = "Invalid request"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content=_error_body(message)
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GatewayError, gateway_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
