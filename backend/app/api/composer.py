"""Application Composer — builds one FastAPI app from controllers, middleware and error units.

Invariants:
    - Construction walks CONSTRUCTING → REGISTERING_MIDDLEWARE →
      REGISTERING_CONTROLLERS → REGISTERING_ERROR_HANDLERS → READY, in one pass
    - Duplicate path prefixes abort construction before any router is mounted
    - Request order: error boundary → static assets → request state →
      user middleware (registration order) → controller
    - start() moves READY → LISTENING once; the post-start hook fires once,
      only after the port is bound

Design Decisions:
    - Registrations and middleware kept as tuples: nothing is added after construction
    - Starlette's add_middleware makes the latest unit outermost, so units are
      added in reverse to keep registration order equal to evaluation order
    - uvicorn Server subclass for the post-bind hook: lifespan startup runs
      before the socket is bound, so it cannot observe a successful bind
"""

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

import uvicorn
from fastapi import APIRouter, FastAPI
from starlette.middleware import Middleware

from app.api.error_handlers import (
    DEFAULT_ERROR_UNITS, ErrorChain, ErrorUnit, register_error_chain,
)
from app.api.middleware import (
    DEFAULT_PAGES, ErrorBoundaryMiddleware, RequestStateMiddleware,
    StaticAssetMiddleware,
)
from app.core.composition import advance_phase, check_unique_prefixes
from app.core.domain_types import CompositionPhase

logger = logging.getLogger(__name__)


class ControllerLike(Protocol):
    path: str
    router: APIRouter


@dataclass(frozen=True)
class ControllerRegistration:
    """A mounted unit: prefix plus router."""
    path: str
    router: APIRouter


@dataclass
class ApplicationConfig:
    secret: str
    controllers: Sequence[ControllerLike]
    port: int | None = None
    host: str = "127.0.0.1"
    middleware: Sequence[Middleware] = ()
    error_handlers: Sequence[ErrorUnit] | None = None
    static_dir: Path | None = None
    pages: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_PAGES))
    lifespan: Callable[[FastAPI], Any] | None = None
    title: str = "Matchbook API"


class _NotifyingServer(uvicorn.Server):
    """uvicorn server that calls on_started once the sockets are bound."""

    def __init__(self, config: uvicorn.Config, on_started: Callable[[], None]):
        super().__init__(config)
        self._on_started = on_started

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        if not self.should_exit:
            self._on_started()


class Application:
    DEFAULT_PORT = 9000

    def __init__(self, config: ApplicationConfig):
        self.phase = CompositionPhase.CONSTRUCTING
        self.secret = config.secret
        self.port = Application.DEFAULT_PORT if config.port is None else config.port
        self.host = config.host

        self.api = FastAPI(title=config.title, lifespan=config.lifespan)
        self.api.state.app_secret = self.secret

        self.middleware = self._register_middleware(
            config.middleware, config.static_dir, config.pages,
        )
        self.registrations = self._register_controllers(config.controllers)
        self.error_chain = self._register_error_handlers(config.error_handlers)
        self._advance(CompositionPhase.READY)

        self.post_start_hook: Callable[[], None] = lambda: logger.info(
            f"App listening on {self.host}:{self.port}",
        )

    def start(self) -> None:
        """Bind the port and serve until the process is stopped."""
        self._advance(CompositionPhase.LISTENING)
        server = _NotifyingServer(
            uvicorn.Config(self.api, host=self.host, port=self.port, log_config=None),
            on_started=self.post_start_hook,
        )
        server.run()

    # ─── Registration phases ────────────────────────────────────

    def _register_middleware(
        self,
        middleware: Sequence[Middleware],
        static_dir: Path | None,
        pages: Mapping[str, str],
    ) -> tuple[Middleware, ...]:
        self._advance(CompositionPhase.REGISTERING_MIDDLEWARE)
        units = (Middleware(RequestStateMiddleware, secret=self.secret), *middleware)
        for unit in reversed(units):
            self.api.add_middleware(unit.cls, *unit.args, **unit.kwargs)
        if static_dir is not None:
            self.api.add_middleware(
                StaticAssetMiddleware, directory=static_dir, pages=pages,
            )
        return units

    def _register_controllers(
        self, controllers: Sequence[ControllerLike],
    ) -> tuple[ControllerRegistration, ...]:
        self._advance(CompositionPhase.REGISTERING_CONTROLLERS)
        prefixes = check_unique_prefixes(c.path for c in controllers)
        registrations = tuple(
            ControllerRegistration(prefix, controller.router)
            for prefix, controller in zip(prefixes, controllers)
        )
        for registration in registrations:
            self.api.include_router(registration.router, prefix=registration.path)
        return registrations

    def _register_error_handlers(
        self, error_handlers: Sequence[ErrorUnit] | None,
    ) -> ErrorChain:
        self._advance(CompositionPhase.REGISTERING_ERROR_HANDLERS)
        chain = ErrorChain(
            DEFAULT_ERROR_UNITS if error_handlers is None else error_handlers,
        )
        register_error_chain(self.api, chain)
        self.api.add_middleware(ErrorBoundaryMiddleware, chain=chain)
        return chain

    def _advance(self, target: CompositionPhase) -> None:
        self.phase = advance_phase(self.phase, target)
