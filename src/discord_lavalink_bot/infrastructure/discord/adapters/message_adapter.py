"""Convert discord.py messages into platform-neutral inbound messages."""

from __future__ import annotations

import discord

from ....application.commands.models import IncomingMessage
from ..guards.voice_guards import author_voice_channel_id


def to_incoming_message(message: discord.Message) -> IncomingMessage:
    return IncomingMessage(
        guild_id=message.guild.id if message.guild else None,
        channel_id=message.channel.id,
        author_id=message.author.id,
        author_name=message.author.display_name,
        author_is_bot=message.author.bot,
        author_voice_channel_id=author_voice_channel_id(message),
        content=message.content or "",
    )
