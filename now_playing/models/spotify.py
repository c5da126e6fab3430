"""Pydantic models for the Spotify payloads and the normalized now-playing item."""

from pydantic import BaseModel, ConfigDict, Field


class SpotifyImage(BaseModel):
    url: str | None = None


class SpotifyArtist(BaseModel):
    name: str


class SpotifyAlbum(BaseModel):
    images: list[SpotifyImage | None]


class SpotifyExternalUrls(BaseModel):
    spotify: str


class SpotifyTrack(BaseModel):
    """Track object from the currently-playing response (only the fields we read)."""

    name: str
    artists: list[SpotifyArtist]
    album: SpotifyAlbum
    external_urls: SpotifyExternalUrls


class SpotifyPlaybackState(BaseModel):
    """Body of GET /v1/me/player/currently-playing."""

    is_playing: bool
    item: SpotifyTrack


class NowPlayingItem(BaseModel):
    """Normalized now-playing payload returned to the frontend.

    Field order matches the serialized key order, and every field always has a
    value: missing upstream data is replaced by the defaults from ``default()``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    album_image_url: str = Field(alias="albumImageUrl")
    artist: str
    is_playing: bool = Field(alias="isPlaying")
    song_url: str = Field(alias="songUrl")
    title: str

    @classmethod
    def default(cls) -> "NowPlayingItem":
        """Payload used whenever nothing (usable) is playing."""
        return cls(
            album_image_url="",
            artist="No Artist",
            is_playing=False,
            song_url="",
            title="No Title",
        )

    def to_response(self) -> dict[str, str | bool]:
        """Serialize with the camelCase keys the frontend expects."""
        return self.model_dump(by_alias=True)
