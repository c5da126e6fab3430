"""Unit tests for the now-playing pipeline."""

from unittest.mock import patch

import httpx
import pytest

from now_playing.models import Degraded, DegradedReason, Fault, NowPlayingItem, Success
from now_playing.services import now_playing_service


@pytest.mark.asyncio
async def test_get_now_playing_success(mock_http_client, test_settings, token_response, spotify_playback_payload):
    """Test the full pipeline produces a normalized item."""
    mock_http_client.post.return_value = token_response
    mock_http_client.get.return_value = httpx.Response(200, json=spotify_playback_payload)

    result = await now_playing_service.get_now_playing(mock_http_client, test_settings)

    assert isinstance(result, Success)
    assert result.outcome == "ok"
    assert result.item.title == "T"
    # Token from the exchange is used for the fetch
    assert mock_http_client.get.call_args.kwargs["headers"] == {"Authorization": "Bearer test-access-token"}


@pytest.mark.asyncio
async def test_get_now_playing_token_failure(mock_http_client, test_settings):
    """Test a failed exchange degrades and skips the fetch."""
    mock_http_client.post.return_value = httpx.Response(400, json={"error": "invalid_grant"})

    result = await now_playing_service.get_now_playing(mock_http_client, test_settings)

    assert isinstance(result, Degraded)
    assert result.reason == DegradedReason.TOKEN_EXCHANGE_FAILED
    assert result.item == NowPlayingItem.default()
    mock_http_client.get.assert_not_called()


@pytest.mark.asyncio
async def test_get_now_playing_fetch_failure(mock_http_client, test_settings, token_response):
    """Test a failed fetch degrades instead of raising."""
    mock_http_client.post.return_value = token_response
    mock_http_client.get.return_value = httpx.Response(503, text="Service Unavailable")

    result = await now_playing_service.get_now_playing(mock_http_client, test_settings)

    assert isinstance(result, Degraded)
    assert result.reason == DegradedReason.FETCH_FAILED
    assert result.outcome == "fetch_failed"


@pytest.mark.asyncio
async def test_get_now_playing_nothing_playing(mock_http_client, test_settings, token_response):
    """Test 204 is reported as nothing playing, not as a failure."""
    mock_http_client.post.return_value = token_response
    mock_http_client.get.return_value = httpx.Response(204)

    result = await now_playing_service.get_now_playing(mock_http_client, test_settings)

    assert result == Degraded(DegradedReason.NOTHING_PLAYING)


@pytest.mark.asyncio
async def test_get_now_playing_unexpected_error(mock_http_client, test_settings):
    """Test unexpected exceptions become a Fault instead of escaping."""
    with patch(
        "now_playing.services.spotify_service.exchange_refresh_token",
        side_effect=RuntimeError("boom"),
    ):
        result = await now_playing_service.get_now_playing(mock_http_client, test_settings)

    assert isinstance(result, Fault)
    assert result.outcome == "fault"
    assert str(result.error) == "boom"


@pytest.mark.asyncio
async def test_get_now_playing_non_ascii_token(test_settings):
    """Test an unsendable access token degrades instead of faulting."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"access_token": "tök"})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        result = await now_playing_service.get_now_playing(client, test_settings)

    assert isinstance(result, Degraded)
    assert result.reason == DegradedReason.FETCH_FAILED


@pytest.mark.asyncio
async def test_get_now_playing_json_null_body(mock_http_client, test_settings, token_response):
    """Test a JSON null body is reported as a fetch failure."""
    mock_http_client.post.return_value = token_response
    mock_http_client.get.return_value = httpx.Response(200, text="null")

    result = await now_playing_service.get_now_playing(mock_http_client, test_settings)

    assert result.reason == DegradedReason.FETCH_FAILED
