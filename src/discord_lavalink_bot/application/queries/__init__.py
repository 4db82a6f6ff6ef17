"""
Application Queries (CQRS Read Side)

Read-only handlers that describe a guild's playback session.
"""

from discord_lavalink_bot.application.queries.get_current import GetCurrentTrackHandler
from discord_lavalink_bot.application.queries.get_queue import GetQueueHandler
from discord_lavalink_bot.application.queries.get_status import GetHelpHandler, GetStatusHandler

__all__ = [
    "GetQueueHandler",
    "GetCurrentTrackHandler",
    "GetStatusHandler",
    "GetHelpHandler",
]
