"""Voice presence checks for Discord cogs."""

from discord_lavalink_bot.infrastructure.discord.guards.voice_guards import (
    author_voice_channel_id,
    is_bot_disconnect,
)

__all__ = [
    "author_voice_channel_id",
    "is_bot_disconnect",
]
