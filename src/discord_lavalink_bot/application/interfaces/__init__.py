"""
Application Interfaces (Ports)

Abstract interfaces that define contracts between the application
layer and infrastructure adapters. These are the "ports" in
hexagonal architecture.
"""

from discord_lavalink_bot.application.interfaces.audio_client import (
    AudioClient,
    PlaybackSession,
    SearchBackend,
)
from discord_lavalink_bot.application.interfaces.command_handler import CommandHandler
from discord_lavalink_bot.application.interfaces.notifier import (
    Notifier,
    Reply,
    ReplyField,
    ReplyKind,
)

__all__ = [
    "AudioClient",
    "PlaybackSession",
    "SearchBackend",
    "CommandHandler",
    "Notifier",
    "Reply",
    "ReplyField",
    "ReplyKind",
]
