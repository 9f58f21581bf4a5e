"""
Modern Restaurant - reservation API and website server
"""

from contextlib import asynccontextmanager
from typing import Optional
import logging
import sys

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
import structlog

from modern_restaurant.config import Settings, get_settings
from modern_restaurant.database import Database
from modern_restaurant.exceptions import register_exception_handlers
from modern_restaurant.api import reservations
from modern_restaurant.store import ReservationStore

VERSION = "1.0.0"

logger = structlog.get_logger()


def configure_logging(settings: Settings) -> None:
    """Configure structured logging"""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=settings.log_level.upper(),
    )

    if settings.log_format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application; the store is created when the app starts"""
    settings = settings or get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager"""
        logger.info("Starting Modern Restaurant API", version=VERSION)

        database = Database(settings.database_url, echo=settings.database_echo)
        if settings.create_tables:
            await database.create_all()
        app.state.database = database
        app.state.store = ReservationStore(database)
        logger.info("Reservations table ready")

        try:
            yield
        finally:
            await database.dispose()
            logger.info("Database connection closed")
            logger.info("Shutting down Modern Restaurant API")

    app = FastAPI(
        title="Modern Restaurant",
        description="Restaurant website and table reservation API",
        version=VERSION,
        lifespan=lifespan,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Health check endpoints
    @app.get("/api/health")
    async def health():
        """Basic health check"""
        return {"status": "ok", "message": "Server is running"}

    @app.get("/api/health/ready")
    async def ready(store: ReservationStore = Depends(reservations.get_store)):
        """Readiness check with database verification"""
        checks = {}

        try:
            await store.ping()
            checks["database"] = "ok"
        except Exception as e:
            logger.error("Readiness check failed", check="database", error=str(e))
            checks["database"] = "failed"

        all_ok = all(v == "ok" for v in checks.values())

        return JSONResponse(
            status_code=200 if all_ok else 503,
            content={
                "status": "ready" if all_ok else "not_ready",
                "checks": checks,
            },
        )

    app.include_router(reservations.router, prefix="/api/reservations", tags=["Reservations"])

    # Website files go last so the API routes take precedence
    if settings.static_dir:
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "modern_restaurant.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_debug,
    )
