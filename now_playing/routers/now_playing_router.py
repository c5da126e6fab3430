"""Now-playing API route."""

import httpx
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from now_playing.config import Settings, get_settings
from now_playing.dependencies import get_http_client
from now_playing.middleware.error_handlers import INTERNAL_ERROR_BODY
from now_playing.models import ErrorResponse, Fault, NowPlayingItem
from now_playing.services import now_playing_service

router = APIRouter()

OUTCOME_HEADER = "X-Now-Playing-Outcome"


@router.get(
    "/nowPlaying",
    summary="Get the currently playing track",
    description="""
    Reports the track currently playing on the configured Spotify account.

    Always answers 200 with the same five fields. When nothing is playing or
    Spotify cannot be reached, the default payload is returned
    (`title="No Title"`, `artist="No Artist"`, empty URLs, `isPlaying=false`)
    and the `X-Now-Playing-Outcome` header names the reason.
    """,
    response_model=NowPlayingItem,
    responses={
        200: {"description": "Current track, or the default payload"},
        500: {"model": ErrorResponse, "description": "Unexpected server fault"},
    },
)
async def now_playing(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    result = await now_playing_service.get_now_playing(client, settings)
    headers = {OUTCOME_HEADER: result.outcome}

    if isinstance(result, Fault):
        return JSONResponse(status_code=500, content=INTERNAL_ERROR_BODY, headers=headers)

    return JSONResponse(status_code=200, content=result.item.to_response(), headers=headers)
