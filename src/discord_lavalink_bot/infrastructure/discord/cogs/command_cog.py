"""Prefix command listener that hands chat messages to the command router."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import discord
from discord.ext import commands

from discord_lavalink_bot.domain.shared.messages import ErrorMessages

from ..adapters.message_adapter import to_incoming_message

if TYPE_CHECKING:
    from ....config.container import Container

logger = logging.getLogger(__name__)


class CommandCog(commands.Cog):
    def __init__(self, bot: commands.Bot, container: Container) -> None:
        self.bot = bot
        self.container = container

    @commands.Cog.listener()
    async def on_message(self, message: discord.Message) -> None:
        if message.author.bot or not message.content:
            return

        router = self.container.command_router
        if not message.content.startswith(router.prefix):
            return

        await router.route(to_incoming_message(message))


async def setup(bot: commands.Bot) -> None:
    container = getattr(bot, "container", None)
    if container is None:
        raise RuntimeError(ErrorMessages.CONTAINER_NOT_FOUND)

    await bot.add_cog(CommandCog(bot, container))
