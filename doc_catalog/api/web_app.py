# Standard library
from contextlib import asynccontextmanager

# Third party
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

# Local imports
from doc_catalog.core.config import settings
from doc_catalog.core.exceptions import CatalogError
from doc_catalog.core.logging import get_logger
from doc_catalog.middleware import RequestLoggingMiddleware
import doc_catalog.api as api


logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI application startup and shutdown events"""
    # Startup
    logger.info("Doc catalog API starting up...")

    # Test database connection
    try:
        from doc_catalog.db.base import get_db_session

        session_gen = get_db_session()
        session = next(session_gen)
        session.execute(text("SELECT 1")).fetchone()
        session.close()
        logger.info("Database connection successful")
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        raise

    yield  # This is where FastAPI serves the application

    # Shutdown
    logger.info("Doc catalog API shutting down...")


def register_exception_handlers(app: FastAPI) -> None:
    """Map catalog errors to HTTP responses"""

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        request_id = getattr(request.state, "request_id", "-")
        logger.warning(
            f"[{request_id}] {type(exc).__name__} on {request.method} {request.url.path}: "
            f"{exc.message} (key={exc.key})"
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        request_id = getattr(request.state, "request_id", "-")
        logger.error(
            f"[{request_id}] Unhandled error on {request.method} {request.url.path}: {exc}",
            exc_info=exc,
        )
        return JSONResponse(status_code=500, content={"message": "Internal server error"})


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""

    app = FastAPI(
        title="Doc Catalog",
        description="Documentation catalog for UI components: docs, code snippets, categories and UI variants.",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        default_response_class=JSONResponse,
    )

    # Mount catalog APIs
    for name, router in api.catalog_routers:
        app.include_router(router, prefix=settings.API_PREFIX, tags=[name])

    app.include_router(api.health_router)

    register_exception_handlers(app)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add request logging middleware
    app.add_middleware(RequestLoggingMiddleware)

    return app


app = create_app()
