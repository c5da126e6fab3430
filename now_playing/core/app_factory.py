"""Application factory for creating and configuring the FastAPI app."""

from fastapi import FastAPI

from now_playing import __version__
from now_playing.config import get_settings
from now_playing.core.lifespan import lifespan
from now_playing.core.middleware import setup_middleware
from now_playing.middleware.error_handlers import register_error_handlers
from now_playing.routers import health_router, now_playing_router


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="Now Playing API",
        description="""
        Reports the track currently playing on a Spotify account.

        - `/api/nowPlaying` - current track as a fixed five-field JSON object
        - `/health` - basic health check
        - `/health/ready` - readiness probe (credentials configured?)
        """,
        version=__version__,
        lifespan=lifespan,
        license_info={
            "name": "MIT",
        },
    )

    setup_middleware(app, settings)
    register_error_handlers(app)

    app.include_router(health_router.router, tags=["health"])
    app.include_router(now_playing_router.router, prefix="/api", tags=["now-playing"])

    return app
