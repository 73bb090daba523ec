"""Middleware Units — pre-request transforms and the outermost error boundary.

Invariants:
    - Pre-request units see (request, call_next) only, never an error
    - StaticAssetMiddleware short-circuits GET/HEAD for known documents and
      files under the static directory; it never serves outside that directory
    - ErrorBoundaryMiddleware is the only unit that catches exceptions; it hands
      them to the ErrorChain and always returns a response

Design Decisions:
    - BaseHTTPMiddleware subclasses declared through starlette Middleware(...):
      the composer decides order, units stay unaware of each other
    - Request logging re-raises after logging so failures still reach the boundary
"""

import logging
import time
from collections.abc import Mapping
from pathlib import Path

from fastapi import Request
from fastapi.responses import FileResponse, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from app.api.error_handlers import ErrorChain

logger = logging.getLogger(__name__)

DEFAULT_PAGES: dict[str, str] = {
    "/": "index.html",
    "/user": "user.html",
    "/match-four": "match-four.html",
    "/match-three": "match-three.html",
}


class StaticAssetMiddleware(BaseHTTPMiddleware):
    """Serve fixed documents and static files before any API routing."""

    def __init__(
        self, app: ASGIApp, directory: Path, pages: Mapping[str, str] | None = None,
    ):
        super().__init__(app)
        self.directory = Path(directory).resolve()
        self.pages = dict(DEFAULT_PAGES if pages is None else pages)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        if request.method in ("GET", "HEAD"):
            asset = self.resolve(request.url.path)
            if asset is not None:
                return FileResponse(asset)
        return await call_next(request)

    def resolve(self, path: str) -> Path | None:
        """Map a URL path to an existing file under the static directory."""
        if path in self.pages:
            candidate = (self.directory / self.pages[path]).resolve()
        else:
            relative = path.lstrip("/")
            if not relative:
                return None
            candidate = (self.directory / relative).resolve()
        if not candidate.is_relative_to(self.directory):
            return None
        return candidate if candidate.is_file() else None


class RequestStateMiddleware(BaseHTTPMiddleware):
    """Thread the application secret into request-scoped state."""

    def __init__(self, app: ASGIApp, secret: str):
        super().__init__(app)
        self._secret = secret

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        request.state.app_secret = self._secret
        return await call_next(request)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and duration of every routed request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.warning(
                f"{request.method} {request.url.path} failed",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "duration_ms": _elapsed_ms(started),
                },
            )
            raise
        logger.info(
            f"{request.method} {request.url.path} {response.status_code}",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": _elapsed_ms(started),
            },
        )
        return response


class ErrorBoundaryMiddleware(BaseHTTPMiddleware):
    """Outermost unit: any exception that escaped the app goes to the chain."""

    def __init__(self, app: ASGIApp, chain: ErrorChain):
        super().__init__(app)
        self.chain = chain

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return await self.chain.handle(request, exc)


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
