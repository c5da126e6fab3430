"""Map Spotify's currently-playing payload onto the fixed NowPlayingItem shape."""

from typing import Any

from pydantic import ValidationError

from now_playing.exceptions import NormalizationException
from now_playing.logging_config import get_logger, log_with_context
from now_playing.models import Degraded, DegradedReason, NowPlayingItem, SpotifyPlaybackState, Success

logger = get_logger(__name__)


def _derive_item(raw: Any) -> NowPlayingItem | None:
    """Build the item from a raw payload.

    Returns None when the payload carries no track with an album
    (ads, podcast episodes, empty player).

    Raises:
        NormalizationException: If the payload does not have the expected structure.
    """
    if not isinstance(raw, dict):
        raise NormalizationException(
            "Playback payload is not a JSON object", details={"payload_type": type(raw).__name__}
        )

    track = raw.get("item")
    if not track:
        return None
    if not isinstance(track, dict):
        raise NormalizationException("Playback item is not a JSON object", details={"item_type": type(track).__name__})
    if not track.get("album"):
        return None

    try:
        state = SpotifyPlaybackState.model_validate(raw)
    except ValidationError as e:
        raise NormalizationException(
            "Playback payload failed validation",
            details={"errors": e.errors(include_url=False, include_input=False)},
        ) from e

    images = state.item.album.images
    # A broken cover image only blanks the image URL
    first_image = images[0] if images else None
    return NowPlayingItem(
        album_image_url=(first_image.url or "") if first_image else "",
        artist=", ".join(artist.name for artist in state.item.artists),
        is_playing=state.is_playing,
        song_url=state.item.external_urls.spotify,
        title=state.item.name,
    )


def normalize_playback(raw: Any) -> Success | Degraded:
    """Normalize a currently-playing payload.

    Never raises: anything that is not a well-formed track turns into a
    Degraded result, whose item is the default payload.

    Args:
        raw: Decoded JSON body, or None when nothing is playing.
    """
    if raw is None:
        return Degraded(DegradedReason.NOTHING_PLAYING)

    try:
        item = _derive_item(raw)
    except NormalizationException as e:
        log_with_context(
            logger,
            "warning",
            "Unexpected Spotify playback payload",
            error_code=e.code.value,
            error=e.message,
            details=e.details,
            event_type="normalization_failed",
        )
        return Degraded(DegradedReason.MALFORMED_PAYLOAD, e.message)

    if item is None:
        return Degraded(DegradedReason.NO_TRACK)

    return Success(item)


def to_now_playing_item(raw: Any) -> NowPlayingItem:
    """Normalize a payload straight to an item (the default one when degraded)."""
    return normalize_playback(raw).item
