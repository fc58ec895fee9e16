"""
PetCarePlus Backend: FastAPI Application Factory
==================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() wires middleware, exception handlers, routers and the
       optional static frontend; `app` is the module-level instance.
Who:   uvicorn (`uvicorn petcareplus.main:app --port 3000`), the
       `petcareplus` console script, and the test suite.

Application Architecture:
    ┌─────────────────────────────────────────────────────────────┐
    │                        FastAPI App                          │
    │                                                             │
    │  Middleware Chain (outermost first):                        │
    │  Request ID → Access Log → GZip → CORS → Session            │
    │  → Principal → Unhandled Error                              │
    │                                                             │
    │  Routes:                                                    │
    │  /api/login, /api/logout                                    │
    │  /api/owners, /api/pets, /api/appointments  (CRUD)          │
    │  /api/weather/fetch, /api/weather/logs                      │
    │  /api/export/owners.csv                                     │
    │  /  (static frontend, when FRONTEND_DIR exists)             │
    │                                                             │
    │  Exception Handlers → {"error": <message>}                  │
    │  PetCarePlusError → its status_code                         │
    │  RequestValidationError → 400, anything else → 500          │
    └─────────────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, warn about development defaults,
              check database connectivity (logged, not fatal)
    Shutdown: dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

from petcareplus import __version__
from petcareplus.config import settings
from petcareplus.database import check_connection, dispose_engine
from petcareplus.exceptions import DatabaseError, PetCarePlusError
from petcareplus.middleware.errors import UnhandledErrorMiddleware
from petcareplus.middleware.logging import RequestLoggingMiddleware
from petcareplus.middleware.principal import PrincipalMiddleware
from petcareplus.middleware.request_id import RequestIDMiddleware, request_id_var
from petcareplus.routes import appointments, auth, export, owners, pets, weather

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the whole process, once, at startup.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s to stdout.
    Third-party loggers that log every operation are held at WARNING.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("PetCarePlus backend starting up...")

    for warning in settings.warn_on_development_defaults():
        logger.warning("Configuration: %s", warning)

    await check_connection()

    logger.info("PetCarePlus backend running on http://%s:%d", settings.host, settings.port)

    yield

    logger.info("PetCarePlus backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to `{"error": <message>}` responses.

    Handler table:
        DatabaseError           → 500 "Database error" (context logged only)
        PetCarePlusError        → exc.status_code, exc.message
        RequestValidationError  → 400 "Invalid request body"
        Starlette HTTPException → its status, its detail (404 for unknown routes)
        Exception (fallback)    → 500 "Internal server error"
    """

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error on %s %s | Context: %s",
                     rid, request.method, request.url.path, exc.context)
        return _error(500, exc.message)

    @app.exception_handler(PetCarePlusError)
    async def handle_app_error(request: Request, exc: PetCarePlusError):
        rid = request_id_var.get("")
        if exc.status_code >= 500:
            logger.error("[%s] %s: %s | Context: %s",
                         rid, type(exc).__name__, exc.message, exc.context)
        else:
            logger.info("[%s] %s: %s", rid, type(exc).__name__, exc.message)
        return _error(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        logger.info("[%s] Rejected request body: %s", request_id_var.get(""), exc.errors())
        return _error(400, "Invalid request body")

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Last resort for errors raised by the middleware itself; route errors
        are answered by UnhandledErrorMiddleware.
        """
        logger.error(
            "[%s] Unhandled error on %s %s: %s",
            request_id_var.get(""),
            request.method,
            request.url.path,
            str(exc),
            exc_info=True,
        )
        return _error(500, "Internal server error")


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="PetCarePlus API",
        description=(
            "Veterinary clinic records: owners, pets and appointments behind "
            "session login with guest/user/admin roles, plus a weather log and "
            "an owners CSV export."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: the order below executes as
    # RequestID → Logging → GZip → CORS → Session → Principal → Errors → route.
    app.add_middleware(UnhandledErrorMiddleware)
    app.add_middleware(PrincipalMiddleware)

    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret,
        session_cookie=settings.session_cookie,
        max_age=settings.session_max_age,
        same_site="lax",
        https_only=False,
    )

    origins = settings.cors_origins_list
    app.add_middleware(
        CORSMiddleware,
        # "*" with credentials: reflect the caller's origin instead
        allow_origins=[] if origins == ["*"] else origins,
        allow_origin_regex=".*" if origins == ["*"] else None,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "Content-Disposition"],
    )

    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(auth.router)
    app.include_router(owners.router)
    app.include_router(pets.router)
    app.include_router(appointments.router)
    app.include_router(weather.router)
    app.include_router(export.router)

    # Static frontend last, so /api routes always win
    frontend = Path(settings.frontend_dir)
    if frontend.is_dir():
        app.mount("/", StaticFiles(directory=str(frontend), html=True), name="frontend")

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve `app` on settings.host:settings.port."""
    uvicorn.run("petcareplus.main:app", host=settings.host, port=settings.port)
