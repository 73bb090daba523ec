"""Error Handlers — the centralized error chain every failed request ends in.

Invariants:
    - Units run in registration order; the first unit returning a Response wins
    - A unit that raises is logged and skipped — the chain itself never raises
    - Every answer has status >= 400; a unit answering below that is logged and skipped
    - If no unit answers, a generic 500 is returned (no request left hanging)
    - Responses never carry stack traces, driver messages or connection strings

Design Decisions:
    - Three default units: domain (MatchbookError), validation (Pydantic), catch-all
    - Units are plain async callables (request, exc) -> Response | None; returning
      None passes the failure to the next unit
    - Classified errors are caught by FastAPI exception handlers; everything else
      propagates to ErrorBoundaryMiddleware, and both delegate to the same chain
"""

import logging
from collections.abc import Awaitable, Callable, Sequence

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, Response
from fastapi.exceptions import RequestValidationError

from app.core.errors import MatchbookError, ErrorSeverity

logger = logging.getLogger(__name__)

ErrorUnit = Callable[[Request, Exception], Awaitable[Response | None]]


class ErrorChain:
    """Ordered, first-responder-wins sequence of error units."""

    def __init__(self, units: Sequence[ErrorUnit]):
        self.units: tuple[ErrorUnit, ...] = tuple(units)

    async def handle(self, request: Request, exc: Exception) -> Response:
        for unit in self.units:
            try:
                response = await unit(request, exc)
            except Exception:
                logger.error(
                    f"Error unit {getattr(unit, '__name__', unit)!r} failed "
                    f"on {request.url.path}",
                    exc_info=True,
                    extra={"path": request.url.path},
                )
                continue
            if response is None:
                continue
            if response.status_code < 400:
                logger.error(
                    f"Error unit {getattr(unit, '__name__', unit)!r} answered "
                    f"{response.status_code} on {request.url.path}; skipped",
                    extra={"path": request.url.path, "status_code": response.status_code},
                )
                continue
            return response
        return _internal_error_response()


def register_error_chain(app: FastAPI, chain: ErrorChain) -> None:
    """Route classified exceptions raised inside routes through the chain."""
    app.add_exception_handler(MatchbookError, chain.handle)
    app.add_exception_handler(RequestValidationError, chain.handle)


# ─── Default units ──────────────────────────────────────────────

async def handle_domain_error(request: Request, exc: Exception) -> Response | None:
    """Handle all Matchbook domain/infrastructure errors."""
    if not isinstance(exc, MatchbookError):
        return None
    log = logger.error if exc.http_status >= 500 else logger.warning
    log(
        f"MatchbookError: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_request_validation_error(
    request: Request, exc: Exception,
) -> Response | None:
    """Handle Pydantic request-parsing errors with structured response."""
    if not isinstance(exc, RequestValidationError):
        return None
    logger.warning(
        f"Validation error on {request.url.path}: {exc.errors()}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_build_validation_error_response(exc),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> Response:
    """Catch-all — never leaks internal details."""
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=exc,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return _internal_error_response()


DEFAULT_ERROR_UNITS: tuple[ErrorUnit, ...] = (
    handle_domain_error,
    handle_request_validation_error,
    handle_unexpected_error,
)


def _internal_error_response() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
                "category": "internal",
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
            "category": "validation",
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
