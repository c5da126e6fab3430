"""Pytest configuration and shared fixtures."""

from unittest.mock import AsyncMock

import httpx
import pytest
from fastapi.testclient import TestClient

from now_playing.config import Settings, get_settings
from now_playing.dependencies import get_http_client
from now_playing.main import app as fastapi_app


@pytest.fixture
def test_settings(tmp_path):
    """Settings instance with test values, isolated from the process environment."""
    return Settings(
        _env_file=None,
        client_id="test-client-id",
        client_secret="test-client-secret",
        refresh_token="test-refresh-token",
        log_dir=tmp_path / "logs",
    )


@pytest.fixture
def mock_http_client():
    """Mock httpx.AsyncClient for Spotify calls."""
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get = AsyncMock()
    mock_client.post = AsyncMock()
    mock_client.aclose = AsyncMock()
    return mock_client


@pytest.fixture
def test_client(test_settings, mock_http_client):
    """FastAPI test client with lifespan context and injected settings/HTTP client."""
    fastapi_app.dependency_overrides[get_settings] = lambda: test_settings
    fastapi_app.dependency_overrides[get_http_client] = lambda: mock_http_client
    try:
        with TestClient(fastapi_app, raise_server_exceptions=False) as client:
            yield client
    finally:
        fastapi_app.dependency_overrides.clear()


@pytest.fixture
def token_response():
    """Successful Spotify token endpoint response."""
    return httpx.Response(
        200,
        json={
            "access_token": "test-access-token",
            "token_type": "Bearer",
            "expires_in": 3600,
            "scope": "user-read-currently-playing",
        },
    )


@pytest.fixture
def spotify_playback_payload():
    """Spotify currently-playing body for a track by one artist."""
    return {
        "timestamp": 1700000000000,
        "progress_ms": 60000,
        "currently_playing_type": "track",
        "is_playing": True,
        "item": {
            "name": "T",
            "duration_ms": 240000,
            "artists": [{"name": "A", "id": "artist-a"}],
            "album": {
                "name": "Test Album",
                "images": [
                    {"url": "http://img", "height": 640, "width": 640},
                    {"url": "http://img-small", "height": 64, "width": 64},
                ],
            },
            "external_urls": {"spotify": "http://song"},
            "uri": "spotify:track:test123",
        },
    }


@pytest.fixture
def default_payload():
    return {
        "albumImageUrl": "",
        "artist": "No Artist",
        "isPlaying": False,
        "songUrl": "",
        "title": "No Title",
    }
