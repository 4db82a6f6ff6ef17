"""Immutable value objects for the music bounded context."""

from __future__ import annotations

from enum import Enum


class LoopMode(Enum):
    """Loop mode settings for queue playback.

    Only two modes exist; there is no per-track repeat.
    """

    NONE = "none"
    QUEUE = "queue"

    def toggled(self) -> LoopMode:
        """Flip between NONE and QUEUE."""
        return LoopMode.QUEUE if self is LoopMode.NONE else LoopMode.NONE

    @property
    def is_looping(self) -> bool:
        return self is LoopMode.QUEUE


class LoadType(Enum):
    """Shape of a search backend response."""

    TRACK = "track"  # Direct link to a single track
    SEARCH = "search"  # Ranked candidate list
    PLAYLIST = "playlist"
    EMPTY = "empty"


class PlaybackState(Enum):
    """Coarse player state as shown to users."""

    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"

    @classmethod
    def from_flags(cls, *, playing: bool, paused: bool) -> PlaybackState:
        if paused:
            return cls.PAUSED
        if playing:
            return cls.PLAYING
        return cls.IDLE
