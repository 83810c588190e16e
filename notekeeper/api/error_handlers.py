"""Error Handlers — global exception handlers for the Notekeeper API.

Invariants:
    - NotekeeperError → structured JSON; status chosen here from its kind
    - RequestValidationError → field-level error details
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Three-layer handler: domain (NotekeeperError), validation (Pydantic), catch-all (Exception)
    - Foreign notes and missing notes share one kind, hence one status (404)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from notekeeper.core.domain_types import FailureKind
from notekeeper.core.errors import ErrorSeverity, NotekeeperError

logger = logging.getLogger(__name__)

STATUS_BY_KIND: dict[FailureKind, int] = {
    FailureKind.NOT_FOUND_PROFILE: status.HTTP_404_NOT_FOUND,
    FailureKind.NOT_FOUND_NOTE: status.HTTP_404_NOT_FOUND,
    FailureKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    FailureKind.NO_CHANGE: status.HTTP_400_BAD_REQUEST,
    FailureKind.CONFLICT: status.HTTP_409_CONFLICT,
    FailureKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register Notekeeper domain/infrastructure error handler."""

    @app.exception_handler(NotekeeperError)
    async def notekeeper_error_handler(request: Request, exc: NotekeeperError):
        """Handle all Notekeeper domain/infrastructure errors."""
        level = (
            logging.ERROR if exc.kind == FailureKind.INTERNAL else logging.INFO
        )
        logger.log(
            level,
            f"NotekeeperError: {exc.message}",
            extra={**exc.log_extra(), "path": request.url.path},
        )
        return JSONResponse(
            status_code=STATUS_BY_KIND[exc.kind], content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "internal server error",
                    "kind": FailureKind.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "kind": FailureKind.VALIDATION.value,
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
