import random
import time
import uuid
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.routes import api_router, router as root_router
from .api.schemas import failure
from .config import settings
from .errors import PortfolioError
from .logging import setup_logging
from .mcp.server import build_mcp_server
from .seed import seed_store
from .store import EntityStore

log = structlog.get_logger()

_HTTP_CODES = {404: "NOT_FOUND", 405: "METHOD_NOT_ALLOWED"}


def _validation_reasons(exc: RequestValidationError) -> list[str]:
    reasons = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()))
        reasons.append(f"{loc}: {err.get('msg')}")
    return reasons


def _install_error_handlers(app: FastAPI):
    @app.exception_handler(PortfolioError)
    async def portfolio_error(request: Request, exc: PortfolioError):
        body = exc.to_dict()
        return JSONResponse(
            status_code=exc.status_code,
            content=failure(body["code"], body["message"], body.get("details")),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=422,
            content=failure("VALIDATION_ERROR", "Request validation failed", _validation_reasons(exc)),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        message = exc.detail
        if exc.status_code == 404 and request.url.path.startswith("/api"):
            message = "API endpoint not found"
        return JSONResponse(
            status_code=exc.status_code,
            content=failure(_HTTP_CODES.get(exc.status_code, "HTTP_ERROR"), str(message)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        log.exception("unhandled_error", method=request.method, path=request.url.path)
        return JSONResponse(
            status_code=500,
            content=failure("INTERNAL_ERROR", str(exc) or "Internal server error"),
        )


def create_app(store: EntityStore | None = None, seed_on_startup: bool | None = None) -> FastAPI:
    """Build the API around ``store`` (a fresh one by default).

    The demo book is seeded in the lifespan hook, so a TestClient used without
    a ``with`` block starts from whatever is already in the store.
    """
    store = store if store is not None else EntityStore()
    should_seed = settings.seed_on_startup if seed_on_startup is None else seed_on_startup

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if should_seed:
            rng = random.Random(settings.seed_random_seed)
            seed_store(store, rng, settings.seed_client_count)
        log.info("service_started", environment=settings.app_env, **store.counts())
        yield

    app = FastAPI(
        title="Portfolio Management System",
        description="Clients, accounts, portfolios, holdings, transactions and securities for a wealth book.",
        lifespan=lifespan,
    )
    app.state.store = store
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)
        started = time.perf_counter()
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        log.info(
            "http_request",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        return response

    _install_error_handlers(app)
    app.include_router(root_router)
    app.include_router(api_router, prefix=settings.api_prefix)

    if settings.mcp_enabled:
        mcp_server = build_mcp_server(store, settings.mcp_server_name)
        app.mount("/mcp", mcp_server.sse_app(mount_path="/mcp"))
    return app


setup_logging()
app = create_app()
