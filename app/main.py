"""FastAPI application entry point.

HR Dashboard API - REST endpoints for employee records, attendance, leave,
payroll, performance reviews, tasks, announcements and events, backed by an
in-memory store that lives for the lifetime of the process.
"""

import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.errors import register_exception_handlers
from app.middleware import log_api_requests
from config.settings import Settings, settings
from repositories.storage import MemStorage
from routers import router as api_router
from schemas.common import HealthResponse

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
    ],
)

logger = logging.getLogger(__name__)


def create_app(config: Settings = settings) -> FastAPI:
    """Build the application.

    Args:
        config: Settings to use; defaults to the environment-loaded settings.

    Returns:
        A configured FastAPI application. Its storage is created when the
        lifespan starts and dropped when it ends.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        storage = MemStorage(timezone=config.timezone)
        if config.seed_sample_data:
            await storage.seed_sample_data()
        app.state.storage = storage
        logger.info("In-memory storage ready")
        try:
            yield
        finally:
            app.state.storage = None
            logger.info("In-memory storage released")

    app = FastAPI(
        title=config.app_name,
        description="""
    REST API for the HR administration dashboard.

    ## Features

    - Users and employee records
    - Documents, attendance and leave requests
    - Payroll and performance reviews
    - Activity feed, tasks, announcements and events

    All data is kept in memory and discarded on restart.
    """,
        version=config.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_api_requests)

    register_exception_handlers(app)

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["Health"],
        summary="Health Check",
        description="Check if the service is running.",
    )
    async def health_check() -> HealthResponse:
        """Return service health status."""
        return HealthResponse(
            status="healthy",
            service="hr-dashboard-api",
            version=config.app_version,
        )

    # Include API routers
    app.include_router(
        api_router,
        prefix="/api",
    )

    return app


app = create_app()

logger.info("HR Dashboard API initialized")
