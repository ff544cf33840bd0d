"""
Main FastAPI application entry point.

Wires settings, CORS, the v1 routers and the health endpoint. In
development the schema is created on startup; elsewhere it is managed
outside the application.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from firedesk.core.config import settings
from firedesk.core.container import get_database, get_logger
from firedesk.presentation.routers.api.v1 import v1_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    - Startup: create tables (development only)
    - Shutdown: dispose the connection pool
    """
    logger = get_logger()
    database = get_database()

    if settings.is_development:
        await database.create_all()

    logger.info(
        "application_started",
        app=settings.app_name,
        version=settings.app_version,
        environment=settings.environment.value,
    )

    yield

    await database.close()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.app_name,
    description="Fire-safety equipment dashboard API",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(v1_router)


@app.get("/health")
async def health() -> JSONResponse:
    """
    Health check endpoint for monitoring and load balancers.

    Returns:
        JSONResponse: 200 when the database answers, 503 otherwise.
    """
    if await get_database().check_connection():
        return JSONResponse(content={"status": "healthy", "database": "ok"})
    return JSONResponse(
        status_code=503,
        content={"status": "degraded", "database": "unavailable"},
    )
