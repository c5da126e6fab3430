"""Outcome of one run of the now-playing pipeline.

A run ends in exactly one of three states:

- ``Success``: a track was playing and the payload was normalized.
- ``Degraded``: an expected non-success (nothing playing, upstream failure,
  unusable payload). The client still gets a 200 with the default payload.
- ``Fault``: an unexpected exception. The client gets a 500.
"""

from dataclasses import dataclass, field
from enum import Enum

from now_playing.models.spotify import NowPlayingItem


class DegradedReason(str, Enum):
    """Why a pipeline run fell back to the default payload."""

    NOTHING_PLAYING = "nothing_playing"
    NO_TRACK = "no_track"
    TOKEN_EXCHANGE_FAILED = "token_exchange_failed"
    FETCH_FAILED = "fetch_failed"
    MALFORMED_PAYLOAD = "malformed_payload"


@dataclass(frozen=True)
class Success:
    item: NowPlayingItem

    @property
    def outcome(self) -> str:
        return "ok"


@dataclass(frozen=True)
class Degraded:
    reason: DegradedReason
    detail: str | None = None
    item: NowPlayingItem = field(default_factory=NowPlayingItem.default)

    @property
    def outcome(self) -> str:
        return self.reason.value


@dataclass(frozen=True)
class Fault:
    error: Exception

    @property
    def outcome(self) -> str:
        return "fault"


PipelineResult = Success | Degraded | Fault
