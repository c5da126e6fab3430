from pathlib import Path

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent  # now-playing/

SPOTIFY_TOKEN_URL = "https://accounts.spotify.com/api/token"
SPOTIFY_NOW_PLAYING_URL = "https://api.spotify.com/v1/me/player/currently-playing"


class SpotifyCredentials(BaseModel):
    """The three secrets needed to mint access tokens for one Spotify account."""

    model_config = ConfigDict(frozen=True)

    client_id: str
    client_secret: SecretStr
    refresh_token: SecretStr

    @property
    def is_complete(self) -> bool:
        return bool(
            self.client_id and self.client_secret.get_secret_value() and self.refresh_token.get_secret_value()
        )


class Settings(BaseSettings):
    """Application settings.

    Spotify credentials are read from CLIENT_ID / CLIENT_SECRET / REFRESH_TOKEN
    (or their SPOTIFY_-prefixed variants). They are deliberately not required:
    a missing or wrong credential shows up as a failed token exchange, and the
    endpoint then answers with the "nothing playing" payload.
    """

    # API server settings
    api_host: str = Field(default="127.0.0.1", min_length=1, description="API server host")
    api_port: int = Field(ge=1, le=65535, default=8000, description="API server port")

    # Spotify credentials
    client_id: str = Field(
        default="",
        validation_alias=AliasChoices("client_id", "spotify_client_id"),
        description="Spotify OAuth client ID",
    )
    client_secret: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=AliasChoices("client_secret", "spotify_client_secret"),
        description="Spotify OAuth client secret",
    )
    refresh_token: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=AliasChoices("refresh_token", "spotify_refresh_token"),
        description="Long-lived Spotify refresh token",
    )

    # Upstream endpoints
    spotify_token_url: str = Field(default=SPOTIFY_TOKEN_URL, pattern=r"^https?://")
    spotify_now_playing_url: str = Field(default=SPOTIFY_NOW_PLAYING_URL, pattern=r"^https?://")

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")
    log_dir: Path = Field(default=BASE_DIR / "logs", description="Directory for the JSON log file")

    # Comma separated list of origins allowed to call the API from a browser
    cors_origins: str = Field(default="*", description="Allowed CORS origins")

    model_config = SettingsConfigDict(
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("client_id", mode="after")
    @classmethod
    def strip_client_id(cls, v: str) -> str:
        return v.strip()

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log_level names a standard logging level."""
        v = v.strip().upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"log_level must be a standard logging level, got {v!r}")
        return v

    @property
    def credentials(self) -> SpotifyCredentials:
        """Spotify credentials as an immutable value."""
        return SpotifyCredentials(
            client_id=self.client_id,
            client_secret=self.client_secret,
            refresh_token=self.refresh_token,
        )

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Singleton settings instance (cached for performance)
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance for dependency injection.

    This function creates a singleton to avoid re-reading .env file
    on every request. Use this with FastAPI's Depends() for
    dependency injection; tests swap it out through
    ``app.dependency_overrides[get_settings]``.

    Returns:
        Cached Settings instance
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
