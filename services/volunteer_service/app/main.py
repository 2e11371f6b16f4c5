"""FastAPI application for the Volunteer Service."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from libs.common.error_handler import add_exception_handlers
from libs.common.logging import configure_logging, get_logger
from libs.db.config import engine
from libs.db.session import create_tables
from services.volunteer_service.errors import AwardsError
from services.volunteer_service.routers import (
    auth_router,
    awards_router,
    volunteer_router,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await create_tables(engine)
    logger.info("Volunteer service started")
    yield
    await engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the Volunteer Service FastAPI app."""
    configure_logging("volunteer_service")

    app = FastAPI(
        title="Volunteer Award Tracker",
        version="0.1.0",
        description="Volunteer hours tracking with age-group award tiers (bronze, silver, gold).",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Consistent error bodies for invalid award input
    add_exception_handlers(app, client_errors=(AwardsError,))

    @app.get("/health", tags=["system"])
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "ok", "service": "volunteer"}

    app.include_router(auth_router)
    app.include_router(volunteer_router)
    app.include_router(awards_router)

    return app


app = create_app()
