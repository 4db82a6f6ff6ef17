"""
Music Bounded Context

Tracks, search results, loop modes and the lifecycle notifications of a playback session.
"""

from discord_lavalink_bot.domain.music.entities import ResolveResult, Track
from discord_lavalink_bot.domain.music.events import (
    LifecycleNotification,
    NodeConnected,
    NodeErrored,
    QueueEnded,
    TrackStarted,
)
from discord_lavalink_bot.domain.music.value_objects import LoadType, LoopMode, PlaybackState

__all__ = [
    # Entities
    "Track",
    "ResolveResult",
    # Value Objects
    "LoadType",
    "LoopMode",
    "PlaybackState",
    # Notifications
    "LifecycleNotification",
    "NodeConnected",
    "NodeErrored",
    "TrackStarted",
    "QueueEnded",
]
