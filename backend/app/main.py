"""FastAPI application."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.app.api.errors import register_exception_handlers
from backend.app.api.routes.destinations import router as destinations_router
from backend.app.api.routes.health import router as health_router
from backend.app.api.routes.metrics import router as metrics_router
from backend.app.api.routes.reviews import router as reviews_router
from backend.app.api.routes.saved import router as saved_router
from backend.app.api.routes.stats import router as stats_router
from backend.app.api.routes.trips import router as trips_router
from backend.app.api.routes.users import router as users_router
from backend.app.config import get_settings
from backend.app.db.engine import create_async_engine_from_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the database engine on startup and dispose of it on shutdown."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    app.state.engine = create_async_engine_from_settings(settings)
    logger.info(f"[startup] {settings.app_name} engine ready")

    try:
        yield
    finally:
        await app.state.engine.dispose()
        logger.info("[shutdown] engine disposed")


app = FastAPI(title="TravelMate API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[get_settings().cors_origin],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Register routes
app.include_router(health_router, tags=["health"])
app.include_router(metrics_router, tags=["metrics"])
app.include_router(trips_router)
app.include_router(destinations_router)
app.include_router(saved_router)
app.include_router(reviews_router)
app.include_router(stats_router)
app.include_router(users_router)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "TravelMate API", "version": "0.1.0"}
