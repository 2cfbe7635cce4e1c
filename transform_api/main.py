"""
FastAPI application entry point.
Challenge: Mount routes, middleware (Prometheus), error handlers, startup timezone load.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app

from transform_api.api.error_handlers import register_error_handlers
from transform_api.api.router import api_router
from transform_api.config import get_settings
from transform_api.core.errors import EnvironmentFailure
from transform_api.core.observability import setup_logging
from transform_api.core.timezones import load_location

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: load timezone rules once so requests only read them."""
    settings = get_settings()
    try:
        load_location(settings.timezone_name)
    except EnvironmentFailure as exc:
        # Keep serving; /json answers 500 and /health/ready 503 until the zone resolves
        logger.error("Timezone unavailable at startup: %s", exc.detail)
    logger.info("Starting server...")
    yield
    logger.info("Server closed")


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app = FastAPI(
        title=settings.app_name,
        description="Stateless transforms: JSON user record enrichment and JPEG to PNG conversion.",
        version="1.0.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # CORS for browser clients
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Prometheus metrics at /metrics
    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    app.include_router(api_router)
    register_error_handlers(app)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
