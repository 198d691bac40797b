"""
api.main
========

FastAPI application: middleware, error handlers and routers.

Run with ``agentdesk serve`` or ``uvicorn api.main:app``.
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from agentdesk import __version__
from agentdesk.errors import AgentDeskError
from agentdesk.seed import seed_demo_agents
from agentdesk.settings import Settings, settings
from .agents import router as agents_router
from .deps import get_service
from .schemas import send_error, send_success

INTERNAL_ERROR = "Internal server error"
ROUTE_NOT_FOUND = "Route not found"

logger = logging.getLogger(__name__)


def create_app(config: Settings = settings) -> FastAPI:
    """Build the application; tests pass their own :class:`Settings`."""
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting AgentDesk API")
        if config.seed_demo_data:
            seed_demo_agents(app.dependency_overrides.get(get_service, get_service)())
        yield
        logger.info("Shutting down AgentDesk API")

    app = FastAPI(
        title="AgentDesk API",
        version=__version__,
        description="Administrative API for agents and their status workflow.",
        lifespan=lifespan,
    )

    # --- CORS ----------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "Accept"],
    )

    # --- request timing ------------------------------------------------
    @app.middleware("http")
    async def performance_monitor(request: Request, call_next):
        start = time.perf_counter()
        try:
            return await call_next(request)
        finally:
            duration = (time.perf_counter() - start) * 1000
            logger.info(f"{request.method} {request.url.path} - {duration:.0f}ms")

    # --- error handlers ------------------------------------------------
    @app.exception_handler(AgentDeskError)
    async def agent_error_handler(request: Request, exc: AgentDeskError):
        logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
        return send_error(exc.message, exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        problems = []
        for err in exc.errors():
            where = ".".join(str(p) for p in err["loc"] if p != "body")
            problems.append(f"{where}: {err['msg']}" if where else err["msg"])
        return send_error(f"Invalid request: {'; '.join(problems)}", 400)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        message = ROUTE_NOT_FOUND if exc.status_code == 404 else str(exc.detail)
        return send_error(message, exc.status_code)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return send_error(INTERNAL_ERROR, 500)

    # --- routers -------------------------------------------------------
    app.include_router(agents_router)

    # ---------- health-check ----------
    @app.get("/")
    def root():
        return send_success("AgentDesk API is alive", {"version": __version__})

    return app


app = create_app()
