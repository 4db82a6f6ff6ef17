"""
Application Commands (CQRS Write Side)

Message parsing, routing and the handlers that mutate a guild's playback session.
"""

from discord_lavalink_bot.application.commands.models import (
    GuildCommand,
    IncomingMessage,
    ParsedCommand,
)
from discord_lavalink_bot.application.commands.play_track import PlayTrackHandler
from discord_lavalink_bot.application.commands.playback_controls import (
    PausePlaybackHandler,
    ResumePlaybackHandler,
    SetVolumeHandler,
    SkipTrackHandler,
    StopPlaybackHandler,
)
from discord_lavalink_bot.application.commands.queue_controls import (
    ClearQueueHandler,
    RemoveTrackHandler,
    ShuffleQueueHandler,
    ToggleLoopHandler,
)
from discord_lavalink_bot.application.commands.router import CommandRouter, parse_command

__all__ = [
    # Models
    "IncomingMessage",
    "ParsedCommand",
    "GuildCommand",
    # Routing
    "CommandRouter",
    "parse_command",
    # Playback
    "PlayTrackHandler",
    "SkipTrackHandler",
    "StopPlaybackHandler",
    "PausePlaybackHandler",
    "ResumePlaybackHandler",
    "SetVolumeHandler",
    # Queue
    "ShuffleQueueHandler",
    "ToggleLoopHandler",
    "RemoveTrackHandler",
    "ClearQueueHandler",
]
