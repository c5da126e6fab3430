"""Now Playing models"""

from now_playing.models.base_models import DetailedHealthResponse, ErrorResponse, HealthResponse
from now_playing.models.result import Degraded, DegradedReason, Fault, PipelineResult, Success
from now_playing.models.spotify import NowPlayingItem, SpotifyPlaybackState

__all__ = [
    "Degraded",
    "DegradedReason",
    "DetailedHealthResponse",
    "ErrorResponse",
    "Fault",
    "HealthResponse",
    "NowPlayingItem",
    "PipelineResult",
    "SpotifyPlaybackState",
    "Success",
]
