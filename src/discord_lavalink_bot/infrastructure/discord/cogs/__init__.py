"""Discord cogs - message and lifecycle listeners."""

from discord_lavalink_bot.infrastructure.discord.cogs.command_cog import CommandCog
from discord_lavalink_bot.infrastructure.discord.cogs.lifecycle_cog import LifecycleCog

__all__ = [
    "CommandCog",
    "LifecycleCog",
]
