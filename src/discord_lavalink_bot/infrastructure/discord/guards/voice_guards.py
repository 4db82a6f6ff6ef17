"""Voice presence checks for prefix commands."""

from __future__ import annotations

import discord


def author_voice_channel_id(message: discord.Message) -> int | None:
    """Voice channel the author currently sits in, or None.

    Only guild members carry voice state; DMs and webhook authors never do.
    """
    author = message.author
    if not isinstance(author, discord.Member):
        return None

    voice = author.voice
    if voice is None or voice.channel is None:
        return None
    return voice.channel.id


def is_bot_disconnect(
    member: discord.Member,
    before: discord.VoiceState,
    after: discord.VoiceState,
    bot_user: discord.abc.User | None,
) -> bool:
    """True when this voice update is the bot itself leaving voice."""
    if bot_user is None or member.id != bot_user.id:
        return False
    return before.channel is not None and after.channel is None
