"""Base contract for session-bound command handlers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ...domain.shared.messages import DiscordUIMessages

if TYPE_CHECKING:
    from ..commands.models import GuildCommand
    from ..services.reply_formatter import ReplyFormatter
    from ..services.session_manager import SessionManager
    from .notifier import Reply


class CommandHandler(ABC):
    """Fetch the guild's session, validate, perform one action, return one reply."""

    def __init__(self, *, session_manager: SessionManager, formatter: ReplyFormatter) -> None:
        self._sessions = session_manager
        self._formatter = formatter

    @abstractmethod
    async def handle(self, command: GuildCommand) -> Reply:
        ...

    def _nothing_playing(self) -> Reply:
        return self._formatter.error(DiscordUIMessages.STATE_NOTHING_PLAYING)
