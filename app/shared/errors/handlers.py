"""
Centralized error handlers for FastAPI.

Maps ServiceError kinds to HTTP responses through the translator.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.shared.errors.taxonomy import ErrorKind, ServiceError
from app.shared.errors.translator import ExternalKind, translate

logger = logging.getLogger(__name__)


def _error_response(external: ExternalKind) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(
        status_code=external.status_code,
        content={"error": external.message},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(ServiceError)
    async def handle_service_error(
        request: Request, exc: ServiceError
    ) -> JSONResponse:
        """Translate a ServiceError by its kind."""
        external = translate(exc.kind)
        if external.status_code >= 500:
            logger.error(
                "%s %s failed (%s): %s",
                request.method,
                request.url.path,
                exc.kind.value,
                exc.message,
            )
        else:
            logger.warning(
                "%s %s rejected (%s): %s",
                request.method,
                request.url.path,
                exc.kind.value,
                exc.message,
            )
        return _error_response(external)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Unparseable request bodies are caller faults."""
        logger.warning("Malformed request to %s", request.url.path)
        return _error_response(translate(ErrorKind.INVALID))

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(ExternalKind.SERVER_ERROR)
