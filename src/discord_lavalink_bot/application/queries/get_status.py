"""Queries that need no voice presence: player status and help."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...domain.shared.messages import DiscordUIMessages
from ..interfaces.command_handler import CommandHandler

if TYPE_CHECKING:
    from ..commands.models import GuildCommand
    from ..interfaces.notifier import Reply


class GetStatusHandler(CommandHandler):
    """State, volume, loop mode, queue length and current track."""

    async def handle(self, command: GuildCommand) -> Reply:
        session = self._sessions.get(command.guild_id)
        if session is None:
            return self._formatter.error(DiscordUIMessages.STATE_NO_ACTIVE_PLAYER)

        return self._formatter.player_status(session)


class GetHelpHandler(CommandHandler):

    async def handle(self, command: GuildCommand) -> Reply:
        return self._formatter.help()
