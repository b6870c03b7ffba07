# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Optional
import logging

# External package imports
import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import auth_router, device_router, events_router, health_router
from .api.v1.errors import register_exception_handlers
from .core.config import Settings, get_settings
from .di.base_container import BaseContainer
from .di.container import DIContainer
from .infrastructure.db.mongo_connection import close_database, ensure_indexes

logger = logging.getLogger(__name__)

ENV_PATH = Path(__file__).resolve().parent.parent / ".env"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Ensures MongoDB indexes when the container is backed by a database and
    closes the client on shutdown.
    """
    container: BaseContainer = app.state.container
    uses_database = container.has("database")

    if uses_database:
        try:
            await ensure_indexes(container.get("database"))
        except Exception as e:
            # The app still serves; unique-key races are no longer guarded
            logger.error(f"Failed to ensure MongoDB indexes: {e}", exc_info=True)

    yield

    if uses_database:
        close_database()
    logger.info("Application shutdown complete")


def create_application(container: Optional[BaseContainer] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Dependency container (built once, shared by all requests)
    - CORS middleware configuration
    - Error mapping and API route registration

    Args:
        container: Pre-built container; a MongoDB-backed DIContainer when omitted

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    load_dotenv(ENV_PATH)

    if container is None:
        container = DIContainer()
    settings: Settings = container.get(Settings)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    application = FastAPI(
        title="Sensor Telemetry API",
        version="1.0.0",
        description="User accounts, device ownership and sensor event ingestion",
        lifespan=lifespan,
    )
    application.state.container = container

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    # Register API routers
    application.include_router(health_router)
    application.include_router(auth_router, prefix="/api/v1/auth")
    application.include_router(device_router, prefix="/api/v1/devices")
    application.include_router(events_router, prefix="/api/v1/devices")

    return application


def run() -> None:
    """Console entry point: serve the application with uvicorn"""
    load_dotenv(ENV_PATH)
    settings = get_settings()
    uvicorn.run(
        "telemetry.main:create_application",
        factory=True,
        host=settings.host,
        port=settings.port,
    )
