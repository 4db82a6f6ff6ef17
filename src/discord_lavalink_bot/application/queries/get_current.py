"""Query for the currently playing track."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...domain.shared.messages import DiscordUIMessages
from ..interfaces.command_handler import CommandHandler

if TYPE_CHECKING:
    from ..commands.models import GuildCommand
    from ..interfaces.notifier import Reply


class GetCurrentTrackHandler(CommandHandler):

    async def handle(self, command: GuildCommand) -> Reply:
        session = self._sessions.get(command.guild_id)
        if session is None or session.current is None:
            return self._formatter.error(DiscordUIMessages.STATE_NOTHING_CURRENTLY_PLAYING)

        return self._formatter.now_playing(session.current)
