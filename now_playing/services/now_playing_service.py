"""The now-playing pipeline: token exchange, fetch, normalize."""

import httpx

from now_playing.config import Settings
from now_playing.exceptions import ExchangeException, FetchException
from now_playing.logging_config import get_logger, log_with_context
from now_playing.models import Degraded, DegradedReason, Fault, PipelineResult
from now_playing.services import normalizer, spotify_service

logger = get_logger(__name__)


async def get_now_playing(client: httpx.AsyncClient, settings: Settings) -> PipelineResult:
    """
    Run the whole pipeline once.

    Upstream failures degrade to the default payload instead of raising;
    the reason is kept on the result so callers can tell "nothing playing"
    apart from "Spotify could not be reached".

    Args:
        client: Shared HTTP client from dependency injection.
        settings: Settings holding credentials and endpoint URLs.

    Returns:
        Success, Degraded or Fault. Never raises.
    """
    try:
        return await _run_pipeline(client, settings)
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Now-playing pipeline failed unexpectedly",
            error=str(e),
            error_type=type(e).__name__,
            event_type="pipeline_fault",
        )
        logger.error("Exception traceback:", exc_info=True)
        return Fault(e)


async def _run_pipeline(client: httpx.AsyncClient, settings: Settings) -> PipelineResult:
    try:
        access_token = await spotify_service.exchange_refresh_token(client, settings)
    except ExchangeException as e:
        _log_degraded(DegradedReason.TOKEN_EXCHANGE_FAILED, e)
        return Degraded(DegradedReason.TOKEN_EXCHANGE_FAILED, e.message)

    try:
        raw = await spotify_service.fetch_currently_playing(client, access_token, settings)
    except FetchException as e:
        _log_degraded(DegradedReason.FETCH_FAILED, e)
        return Degraded(DegradedReason.FETCH_FAILED, e.message)

    return normalizer.normalize_playback(raw)


def _log_degraded(reason: DegradedReason, exc: ExchangeException | FetchException) -> None:
    log_with_context(
        logger,
        "warning",
        "Spotify request failed, serving default payload",
        reason=reason.value,
        error_code=exc.code.value,
        error=exc.message,
        upstream_status=exc.details.get("upstream_status"),
        event_type="now_playing_degraded",
    )
