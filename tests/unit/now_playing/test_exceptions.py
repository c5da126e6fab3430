"""Tests for custom exception classes."""

from now_playing.exceptions import (
    ErrorCode,
    ExchangeException,
    FetchException,
    NormalizationException,
    NowPlayingException,
    SpotifyException,
)


class TestErrorCodes:
    """Tests for ErrorCode enum."""

    def test_error_code_values(self):
        """Test that error codes have correct values."""
        assert ErrorCode.NOW_PLAYING_ERROR == "NOW_PLAYING_ERROR"
        assert ErrorCode.SPOTIFY_EXCHANGE_ERROR == "SPOTIFY_EXCHANGE_ERROR"
        assert ErrorCode.SPOTIFY_FETCH_ERROR == "SPOTIFY_FETCH_ERROR"
        assert ErrorCode.NORMALIZATION_ERROR == "NORMALIZATION_ERROR"


class TestNowPlayingException:
    """Tests for NowPlayingException."""

    def test_basic(self):
        """Test creating basic exception."""
        exc = NowPlayingException(message="Test error")

        assert exc.message == "Test error"
        assert exc.code == ErrorCode.NOW_PLAYING_ERROR
        assert exc.details == {}
        assert str(exc) == "Test error"

    def test_with_details(self):
        """Test exception with details."""
        exc = NowPlayingException(message="Test error", code=ErrorCode.SPOTIFY_ERROR, details={"key": "value"})

        assert exc.code == ErrorCode.SPOTIFY_ERROR
        assert exc.details["key"] == "value"


class TestSpotifyExceptions:
    """Tests for the Spotify exception family."""

    def test_exchange_exception(self):
        """Test exchange errors carry upstream details."""
        exc = ExchangeException(details={"upstream_status": 400, "response_text": "invalid_grant"})

        assert isinstance(exc, SpotifyException)
        assert exc.code == ErrorCode.SPOTIFY_EXCHANGE_ERROR
        assert exc.message == "Failed to fetch access token"
        assert exc.details["response_text"] == "invalid_grant"

    def test_fetch_exception(self):
        """Test fetch error defaults."""
        exc = FetchException()

        assert isinstance(exc, SpotifyException)
        assert exc.code == ErrorCode.SPOTIFY_FETCH_ERROR
        assert exc.message == "Failed to fetch currently playing song"

    def test_normalization_exception(self):
        """Test normalization errors are not Spotify errors."""
        exc = NormalizationException()

        assert isinstance(exc, NowPlayingException)
        assert not isinstance(exc, SpotifyException)
        assert exc.code == ErrorCode.NORMALIZATION_ERROR
