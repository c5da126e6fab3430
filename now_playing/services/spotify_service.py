"""Spotify Web API service."""

from typing import Any

import httpx

from now_playing.config import Settings
from now_playing.exceptions import ExchangeException, FetchException
from now_playing.logging_config import get_logger, log_with_context

logger = get_logger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded;charset=UTF-8"

# Failures while building or sending a request (bad URL, header not encodable)
REQUEST_ERRORS = (httpx.HTTPError, httpx.InvalidURL, UnicodeError)


async def exchange_refresh_token(client: httpx.AsyncClient, settings: Settings) -> str:
    """
    Exchange the configured refresh token for a fresh access token.

    A new token is requested on every call; nothing is cached.

    Args:
        client: Shared HTTP client from dependency injection.
        settings: Settings holding the Spotify credentials.

    Returns:
        Access token string.

    Raises:
        ExchangeException: If the request fails, the status is not 2xx,
            or the body has no access_token.
    """
    credentials = settings.credentials

    try:
        response = await client.post(
            settings.spotify_token_url,
            auth=(credentials.client_id, credentials.client_secret.get_secret_value()),
            data={
                "grant_type": "refresh_token",
                "refresh_token": credentials.refresh_token.get_secret_value(),
            },
            headers={"Content-Type": FORM_CONTENT_TYPE},
        )
    except REQUEST_ERRORS as e:
        raise ExchangeException(f"Spotify token request failed: {e}") from e

    if not response.is_success:
        raise ExchangeException(
            f"Failed to fetch access token: {response.text}",
            details={"upstream_status": response.status_code, "response_text": response.text},
        )

    try:
        access_token = response.json()["access_token"]
    except (ValueError, KeyError, TypeError) as e:
        raise ExchangeException(
            "Invalid Spotify token response",
            details={"upstream_status": response.status_code, "response_text": response.text},
        ) from e

    if not isinstance(access_token, str) or not access_token:
        raise ExchangeException(
            "Spotify token response has an empty access_token",
            details={"upstream_status": response.status_code, "response_text": response.text},
        )

    log_with_context(logger, "debug", "Spotify access token refreshed", event_type="spotify_token_refreshed")
    return access_token


async def fetch_currently_playing(
    client: httpx.AsyncClient, access_token: str, settings: Settings
) -> dict[str, Any] | None:
    """
    Get the raw currently-playing state from Spotify.

    Args:
        client: Shared HTTP client from dependency injection.
        access_token: Bearer token from exchange_refresh_token().
        settings: Settings holding the endpoint URL.

    Returns:
        Decoded JSON body, or None when nothing is playing (HTTP 204).

    Raises:
        FetchException: If the request fails, the status is not 2xx,
            or the body is empty, not JSON or JSON null.
    """
    try:
        response = await client.get(
            settings.spotify_now_playing_url,
            headers={"Authorization": f"Bearer {access_token}"},
        )
    except REQUEST_ERRORS as e:
        raise FetchException(f"Spotify currently-playing request failed: {e}") from e

    if response.status_code == 204:
        return None

    if not response.is_success:
        raise FetchException(
            f"Failed to fetch currently playing song: {response.text}",
            details={"upstream_status": response.status_code, "response_text": response.text},
        )

    if not response.text.strip():
        raise FetchException("Response body is empty", details={"upstream_status": response.status_code})

    try:
        data = response.json()
    except ValueError as e:
        raise FetchException(
            f"Invalid JSON in currently-playing response: {e}",
            details={"upstream_status": response.status_code, "response_text": response.text},
        ) from e

    # Only a 204 means nothing is playing
    if data is None:
        raise FetchException(
            "Currently-playing response body is JSON null",
            details={"upstream_status": response.status_code, "response_text": response.text},
        )

    return data
