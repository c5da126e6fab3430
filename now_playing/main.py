"""Main FastAPI application entry point."""

from pathlib import Path

from dotenv import load_dotenv

from now_playing.config import get_settings
from now_playing.core.app_factory import create_app
from now_playing.logging_config import setup_logging

# Load environment variables from .env file
load_dotenv(Path(__file__).parent.parent / ".env")

# Configure structured logging (JSON to file + console)
settings = get_settings()
setup_logging(settings.log_level, settings.log_dir)

# Create application
app = create_app()


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Now Playing API", "endpoint": "/api/nowPlaying", "docs": "/docs"}


def run() -> None:
    """Console script entry point."""
    import uvicorn

    uvicorn.run(
        "now_playing.main:app",
        host=settings.api_host,
        port=settings.api_port,
    )


if __name__ == "__main__":
    run()
