"""Health endpoints."""

from datetime import UTC, datetime

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from now_playing import __version__
from now_playing.config import Settings, get_settings
from now_playing.models import DetailedHealthResponse, HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check endpoint.

    Returns simple status for Docker healthcheck and basic monitoring.
    For configuration status, use `/health/ready`.
    """
    return HealthResponse(status="ok", version=__version__)


@router.get("/health/ready", response_model=DetailedHealthResponse)
async def readiness_check(settings: Settings = Depends(get_settings)):
    """Readiness probe - are the Spotify credentials configured?

    Does not call Spotify; a configured but revoked refresh token still
    reports ready.

    **Returns:**
    - 200: All credentials are present
    - 503: At least one credential is missing
    """
    credentials = settings.credentials
    checks = {
        "client_id": "ok" if credentials.client_id else "missing",
        "client_secret": "ok" if credentials.client_secret.get_secret_value() else "missing",
        "refresh_token": "ok" if credentials.refresh_token.get_secret_value() else "missing",
    }
    all_healthy = credentials.is_complete

    return JSONResponse(
        status_code=200 if all_healthy else 503,
        content=DetailedHealthResponse(
            status="healthy" if all_healthy else "unhealthy",
            version=__version__,
            timestamp=datetime.now(UTC),
            checks=checks,
        ).model_dump(mode="json"),
    )
