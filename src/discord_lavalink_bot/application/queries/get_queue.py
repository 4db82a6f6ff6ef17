"""Query for listing the current and upcoming tracks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...domain.shared.messages import DiscordUIMessages
from ..interfaces.command_handler import CommandHandler

if TYPE_CHECKING:
    from ..commands.models import GuildCommand
    from ..interfaces.notifier import Reply


class GetQueueHandler(CommandHandler):

    async def handle(self, command: GuildCommand) -> Reply:
        session = self._sessions.get(command.guild_id)
        if session is None:
            return self._nothing_playing()

        upcoming = list(session.queue)
        current = session.current
        if current is None and not upcoming:
            return self._formatter.error(DiscordUIMessages.STATE_QUEUE_EMPTY)

        return self._formatter.queue_list(current, upcoming)
