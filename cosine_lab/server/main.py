"""Main entry point for the Cosine Lab server."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from cosine_lab import __version__
from cosine_lab.server.config import get_settings
from cosine_lab.server.dependencies import get_vector_bridge
from cosine_lab.server.routers import ai, health, static, vectors
from cosine_lab.utils.config import validate_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle manager: check config and set up the AI bridge at startup."""
    settings = get_settings()

    logger.info("=" * 60)
    logger.info("Cosine Lab server starting...")
    logger.info("=" * 60)

    for warning in validate_config(settings):
        logger.warning(f"Config: {warning}")

    bridge = get_vector_bridge()
    if bridge.available:
        logger.info(f"AI bridge ready: {getattr(bridge, 'model_name', None)}")
    else:
        logger.warning("AI bridge unavailable. Only manual mode will work.")

    logger.info("=" * 60)
    logger.info(f"Server ready! Visit http://localhost:{settings.server.port}")
    logger.info("=" * 60)

    yield

    logger.info("Server shutting down...")


app = FastAPI(
    title="Cosine Lab",
    description="Compute and visualize the cosine similarity of two vectors",
    version=__version__,
    lifespan=lifespan,
)

# Include routers
app.include_router(health.router, prefix="/api", tags=["health"])
app.include_router(vectors.router, prefix="/api", tags=["vectors"])
app.include_router(ai.router, prefix="/api", tags=["ai"])
app.include_router(static.router, tags=["frontend"])

# Mount static files
static.mount_static(app)


def run() -> None:
    """Run the server with uvicorn using the configured host, port and logging."""
    import uvicorn

    from cosine_lab.utils.logger import setup_logging

    settings = get_settings()
    setup_logging(
        log_level=settings.logging.level,
        log_dir=settings.logging.log_dir,
        log_format=settings.logging.format,
    )

    uvicorn.run(
        "cosine_lab.server.main:app",
        host=settings.server.host,
        port=settings.server.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
