"""Exceptions raised inside the now-playing pipeline.

None of these reach a client: the pipeline turns them into a degraded
result and logs ``code`` and ``details``.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error logging."""

    NOW_PLAYING_ERROR = "NOW_PLAYING_ERROR"

    # Spotify errors
    SPOTIFY_ERROR = "SPOTIFY_ERROR"
    SPOTIFY_EXCHANGE_ERROR = "SPOTIFY_EXCHANGE_ERROR"
    SPOTIFY_FETCH_ERROR = "SPOTIFY_FETCH_ERROR"

    # Payload errors
    NORMALIZATION_ERROR = "NORMALIZATION_ERROR"


class NowPlayingException(Exception):
    """Base exception for Now Playing errors.

    Args:
        message: Human-readable error message
        code: Error code from ErrorCode enum
        details: Additional context for the log record (upstream status, response text, ...)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.NOW_PLAYING_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)


class SpotifyException(NowPlayingException):
    """Spotify-related errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.SPOTIFY_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, details)


class ExchangeException(SpotifyException):
    """Refresh token could not be exchanged for an access token.

    ``details`` holds the upstream status code and response text when the
    token endpoint answered at all.
    """

    def __init__(self, message: str = "Failed to fetch access token", details: dict[str, Any] | None = None):
        super().__init__(message, code=ErrorCode.SPOTIFY_EXCHANGE_ERROR, details=details)


class FetchException(SpotifyException):
    """Currently-playing request failed or returned an unusable body."""

    def __init__(
        self, message: str = "Failed to fetch currently playing song", details: dict[str, Any] | None = None
    ):
        super().__init__(message, code=ErrorCode.SPOTIFY_FETCH_ERROR, details=details)


class NormalizationException(NowPlayingException):
    """Playback payload has an unexpected structure."""

    def __init__(self, message: str = "Unexpected playback payload", details: dict[str, Any] | None = None):
        super().__init__(message, code=ErrorCode.NORMALIZATION_ERROR, details=details)
