"""
FastAPI application entry point.

This module creates and configures the FastAPI application.
Using an application factory pattern (create_app function) because:
- Easier to test with a container pointed at an in-memory database
- Explicit about initialization order

For local development:
    uvicorn src.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.routes import coach, employees, health
from .container import Container
from .infrastructure.database.client import create_schema

# Configure logging
logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup creates the schema (when enabled) and brings the coach bean up,
    which runs its startup hook. Shutdown runs the cleanup hooks and disposes
    the engine, if a request or the schema step ever created one.
    """
    container: Container = app.state.container
    settings = container.settings()

    logger.info(
        "CRUD Demo API starting",
        extra={"version": settings.api_version, "database": settings.database_backend}
    )

    missing_fields = settings.validate_required_fields()
    if missing_fields:
        logger.error(
            "Missing required configuration",
            extra={"missing_fields": missing_fields}
        )

    if settings.database_create_schema:
        create_schema(container.engine())

    container.coach.init()

    yield

    container.shutdown_resources()
    container.session_factory.reset()
    logger.info("CRUD Demo API shutting down")


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Application factory.

    Pass a pre-configured container to override settings or providers
    (tests do this); otherwise one is built from the environment.
    """
    if container is None:
        container = Container()

    settings = container.settings()
    logging.getLogger().setLevel(settings.log_level.upper())

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        description="""
        Demo CRUD service.

        - `GET /dailyworkout`: workout from the container-managed coach
        - `/api/employees`: list, read, add, update and delete employees
        """,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(
        health.router,
        prefix="/health",
        tags=["Health"],
    )

    app.include_router(
        coach.router,
        tags=["Coach"],
    )

    app.include_router(
        employees.router,
        prefix="/api/employees",
        tags=["Employees"],
    )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request, exc):
        """
        Catch-all exception handler.

        We log the full error server-side but return a generic message.
        """
        logger.error(
            "Unhandled exception",
            extra={
                "path": request.url.path,
                "method": request.method,
                "error": str(exc),
            },
            exc_info=exc,
        )

        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error."}
        )

    logger.info(
        "FastAPI application created",
        extra={"title": settings.api_title, "version": settings.api_version}
    )

    return app


# Create the application instance
# This is what uvicorn imports
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = app.state.container.settings()

    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
        log_level=settings.log_level.lower(),
    )
