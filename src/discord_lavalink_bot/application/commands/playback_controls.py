"""
Playback Control Commands

Skip, stop, pause, resume and volume handlers.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...domain.shared.constants import LimitConstants
from ...domain.shared.messages import DiscordUIMessages, LogTemplates
from ...utils.reply import parse_int
from ..interfaces.command_handler import CommandHandler

if TYPE_CHECKING:
    from ..interfaces.notifier import Reply
    from .models import GuildCommand

logger = logging.getLogger(__name__)


class SkipTrackHandler(CommandHandler):
    """Stop the current track so the library advances to the next queued one."""

    async def handle(self, command: GuildCommand) -> Reply:
        session = self._sessions.get(command.guild_id)
        if session is None:
            return self._nothing_playing()

        if not session.queue:
            return self._formatter.error(DiscordUIMessages.STATE_NO_MORE_TRACKS)

        skipped = session.current
        await session.skip()
        logger.info(
            LogTemplates.PLAYBACK_SKIPPED, skipped.title if skipped else None, command.guild_id
        )
        return self._formatter.success(DiscordUIMessages.ACTION_SKIPPED)


class StopPlaybackHandler(CommandHandler):
    """Destroy the player, drop every queued track and forget the session."""

    async def handle(self, command: GuildCommand) -> Reply:
        if self._sessions.get(command.guild_id) is None:
            return self._nothing_playing()

        await self._sessions.destroy(command.guild_id)
        return self._formatter.success(DiscordUIMessages.ACTION_STOPPED)


class PausePlaybackHandler(CommandHandler):

    async def handle(self, command: GuildCommand) -> Reply:
        session = self._sessions.get(command.guild_id)
        if session is None:
            return self._nothing_playing()

        if session.is_paused:
            return self._formatter.error(DiscordUIMessages.STATE_ALREADY_PAUSED)

        await session.set_paused(True)
        logger.info(LogTemplates.PLAYBACK_PAUSED, command.guild_id)
        return self._formatter.success(DiscordUIMessages.ACTION_PAUSED)


class ResumePlaybackHandler(CommandHandler):

    async def handle(self, command: GuildCommand) -> Reply:
        session = self._sessions.get(command.guild_id)
        if session is None:
            return self._nothing_playing()

        if not session.is_paused:
            return self._formatter.error(DiscordUIMessages.STATE_ALREADY_PLAYING)

        await session.set_paused(False)
        logger.info(LogTemplates.PLAYBACK_RESUMED, command.guild_id)
        return self._formatter.success(DiscordUIMessages.ACTION_RESUMED)


class SetVolumeHandler(CommandHandler):
    """Set the player volume to a whole percentage in [0, 100]."""

    async def handle(self, command: GuildCommand) -> Reply:
        session = self._sessions.get(command.guild_id)
        if session is None:
            return self._nothing_playing()

        volume = parse_int(command.first_arg)
        if volume is None or not LimitConstants.MIN_VOLUME <= volume <= LimitConstants.MAX_VOLUME:
            return self._formatter.error(DiscordUIMessages.ERROR_VOLUME_RANGE)

        await session.set_volume(volume)
        logger.info(LogTemplates.PLAYBACK_VOLUME_SET, volume, command.guild_id)
        return self._formatter.success(DiscordUIMessages.ACTION_VOLUME_SET.format(volume=volume))
