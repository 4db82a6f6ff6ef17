"""Discord implementation of the Notifier port."""

from __future__ import annotations

import logging

import discord

from ....application.interfaces.notifier import Notifier, Reply, ReplyKind
from ....domain.shared.messages import LogTemplates

logger = logging.getLogger(__name__)

_COLORS: dict[ReplyKind, discord.Color] = {
    ReplyKind.SUCCESS: discord.Color.green(),
    ReplyKind.ERROR: discord.Color.red(),
    ReplyKind.INFO: discord.Color.blurple(),
}


def render_embed(reply: Reply) -> discord.Embed:
    embed = discord.Embed(
        title=reply.title,
        description=reply.description or None,
        color=_COLORS[reply.kind],
    )
    for field in reply.fields:
        embed.add_field(name=field.name, value=field.value, inline=field.inline)
    if reply.footer:
        embed.set_footer(text=reply.footer)
    return embed


class DiscordChannelNotifier(Notifier):
    """Sends replies as embeds to a text channel looked up by id."""

    def __init__(self, client: discord.Client) -> None:
        self._client = client

    async def send(self, channel_id: int, reply: Reply) -> None:
        channel = self._client.get_channel(channel_id)
        if channel is None:
            try:
                channel = await self._client.fetch_channel(channel_id)
            except (discord.NotFound, discord.Forbidden):
                channel = None

        if not isinstance(channel, discord.abc.Messageable):
            logger.warning(LogTemplates.NOTIFIER_CHANNEL_NOT_FOUND, channel_id)
            return

        await channel.send(embed=render_embed(reply))
