"""
Queue Control Commands

Shuffle, loop, remove and clear handlers.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...domain.music.value_objects import LoopMode
from ...domain.shared.messages import DiscordUIMessages, LogTemplates
from ...utils.reply import parse_int
from ..interfaces.command_handler import CommandHandler

if TYPE_CHECKING:
    from ..interfaces.notifier import Reply
    from .models import GuildCommand

logger = logging.getLogger(__name__)


class ShuffleQueueHandler(CommandHandler):

    async def handle(self, command: GuildCommand) -> Reply:
        session = self._sessions.get(command.guild_id)
        if session is None:
            return self._nothing_playing()

        if not session.queue:
            return self._formatter.error(DiscordUIMessages.STATE_NOT_ENOUGH_TRACKS_TO_SHUFFLE)

        await session.shuffle()
        logger.info(LogTemplates.QUEUE_SHUFFLED, command.guild_id)
        return self._formatter.success(DiscordUIMessages.ACTION_SHUFFLED)


class ToggleLoopHandler(CommandHandler):
    """Flip the loop mode between ``none`` and ``queue``."""

    async def handle(self, command: GuildCommand) -> Reply:
        session = self._sessions.get(command.guild_id)
        if session is None:
            return self._nothing_playing()

        new_mode = session.loop_mode.toggled()
        await session.set_loop_mode(new_mode)
        logger.info(LogTemplates.LOOP_MODE_CHANGED, new_mode.value, command.guild_id)

        if new_mode is LoopMode.QUEUE:
            return self._formatter.success(DiscordUIMessages.ACTION_LOOP_ENABLED)
        return self._formatter.success(DiscordUIMessages.ACTION_LOOP_DISABLED)


class RemoveTrackHandler(CommandHandler):
    """Remove the track at a 1-based queue position."""

    async def handle(self, command: GuildCommand) -> Reply:
        session = self._sessions.get(command.guild_id)
        if session is None:
            return self._nothing_playing()

        length = len(session.queue)
        position = parse_int(command.first_arg)
        if position is None or not 1 <= position <= length:
            return self._formatter.error(DiscordUIMessages.ERROR_POSITION_RANGE.format(length=length))

        removed = await session.remove_at(position - 1)
        logger.info(LogTemplates.QUEUE_REMOVED, removed.title, command.guild_id)
        return self._formatter.success(
            DiscordUIMessages.ACTION_TRACK_REMOVED.format(track_title=removed.title)
        )


class ClearQueueHandler(CommandHandler):

    async def handle(self, command: GuildCommand) -> Reply:
        session = self._sessions.get(command.guild_id)
        if session is None:
            return self._nothing_playing()

        if not session.queue:
            return self._formatter.error(DiscordUIMessages.STATE_QUEUE_ALREADY_EMPTY)

        count = await session.clear()
        logger.info(LogTemplates.QUEUE_CLEARED, count, command.guild_id)
        return self._formatter.success(DiscordUIMessages.ACTION_QUEUE_CLEARED)
