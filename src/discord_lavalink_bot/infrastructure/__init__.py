"""Infrastructure layer - external systems integration.

This layer contains implementations for:
- Discord (bot, cogs, adapters)
- Lavalink (wavelink players and node search, Spotify link expansion)
- Health (aiohttp liveness endpoint)
"""

from discord_lavalink_bot.infrastructure.discord.bot import create_bot
from discord_lavalink_bot.infrastructure.health.health_server import HealthServer
from discord_lavalink_bot.infrastructure.lavalink.wavelink_client import (
    WavelinkAudioClient,
    WavelinkSearchBackend,
)

__all__ = [
    "create_bot",
    "HealthServer",
    "WavelinkAudioClient",
    "WavelinkSearchBackend",
]
