"""
Command Router

Parses prefixed chat messages and dispatches them to exactly one handler.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...domain.shared.constants import CommandNames
from ...domain.shared.exceptions import ExternalServiceError
from ...domain.shared.messages import DiscordUIMessages, LogTemplates
from ..queries.get_current import GetCurrentTrackHandler
from ..queries.get_queue import GetQueueHandler
from ..queries.get_status import GetHelpHandler, GetStatusHandler
from .models import GuildCommand, IncomingMessage, ParsedCommand
from .play_track import PlayTrackHandler
from .playback_controls import (
    PausePlaybackHandler,
    ResumePlaybackHandler,
    SetVolumeHandler,
    SkipTrackHandler,
    StopPlaybackHandler,
)
from .queue_controls import (
    ClearQueueHandler,
    RemoveTrackHandler,
    ShuffleQueueHandler,
    ToggleLoopHandler,
)

if TYPE_CHECKING:
    from ..interfaces.audio_client import SearchBackend
    from ..interfaces.notifier import Notifier, Reply
    from ..services.reply_formatter import ReplyFormatter
    from ..services.session_manager import SessionManager
    from ..interfaces.command_handler import CommandHandler

logger = logging.getLogger(__name__)


def parse_command(content: str, prefix: str) -> ParsedCommand | None:
    """Split ``<prefix><name> [args...]`` into a lowercased name and its arguments.

    Returns None when the content is not addressed to the bot.
    """
    if not content or not content.startswith(prefix):
        return None

    tokens = content[len(prefix):].split()
    if not tokens:
        return None

    name = tokens[0].lower()
    name = CommandNames.ALIASES.get(name, name)
    return ParsedCommand(name=name, args=tuple(tokens[1:]))


class CommandRouter:
    """Routes inbound messages to the handler for their command.

    Every dispatched command yields exactly one reply to the originating
    channel. Unknown commands yield none.
    """

    def __init__(
        self,
        *,
        prefix: str,
        session_manager: SessionManager,
        search_backend: SearchBackend,
        formatter: ReplyFormatter,
        notifier: Notifier,
    ) -> None:
        self._prefix = prefix
        self._formatter = formatter
        self._notifier = notifier

        deps = {"session_manager": session_manager, "formatter": formatter}
        self._handlers: dict[str, CommandHandler] = {
            CommandNames.PLAY: PlayTrackHandler(search_backend=search_backend, **deps),
            CommandNames.SKIP: SkipTrackHandler(**deps),
            CommandNames.STOP: StopPlaybackHandler(**deps),
            CommandNames.PAUSE: PausePlaybackHandler(**deps),
            CommandNames.RESUME: ResumePlaybackHandler(**deps),
            CommandNames.VOLUME: SetVolumeHandler(**deps),
            CommandNames.SHUFFLE: ShuffleQueueHandler(**deps),
            CommandNames.LOOP: ToggleLoopHandler(**deps),
            CommandNames.REMOVE: RemoveTrackHandler(**deps),
            CommandNames.CLEAR: ClearQueueHandler(**deps),
            CommandNames.QUEUE: GetQueueHandler(**deps),
            CommandNames.NOW_PLAYING: GetCurrentTrackHandler(**deps),
            CommandNames.STATUS: GetStatusHandler(**deps),
            CommandNames.HELP: GetHelpHandler(**deps),
        }

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def command_names(self) -> frozenset[str]:
        return frozenset(self._handlers)

    async def route(self, message: IncomingMessage) -> Reply | None:
        """Handle one message. Returns the reply that was sent, if any."""
        if message.author_is_bot or message.guild_id is None:
            return None

        parsed = parse_command(message.content, self._prefix)
        if parsed is None:
            return None

        handler = self._handlers.get(parsed.name)
        if handler is None:
            logger.debug(LogTemplates.COMMAND_IGNORED_UNKNOWN, parsed.name, message.guild_id)
            return None

        logger.debug(
            LogTemplates.COMMAND_RECEIVED,
            parsed.name,
            message.author_id,
            message.guild_id,
            parsed.args,
        )

        if parsed.name in CommandNames.VOICE_REQUIRED and message.author_voice_channel_id is None:
            logger.debug(
                LogTemplates.COMMAND_REFUSED_NO_VOICE,
                parsed.name,
                message.author_id,
                message.guild_id,
            )
            reply = self._formatter.error(DiscordUIMessages.STATE_NEED_TO_BE_IN_VOICE)
        else:
            reply = await self._dispatch(handler, parsed, message)

        await self._send(message, parsed.name, reply)
        return reply

    async def _dispatch(
        self, handler: CommandHandler, parsed: ParsedCommand, message: IncomingMessage
    ) -> Reply:
        command = GuildCommand.from_message(message, parsed)
        try:
            return await handler.handle(command)
        except ExternalServiceError as exc:
            logger.error(
                LogTemplates.COMMAND_EXTERNAL_FAILURE, parsed.name, message.guild_id, exc.message
            )
            return self._formatter.error(DiscordUIMessages.ERROR_TRY_AGAIN_LATER)
        except Exception:
            logger.exception(LogTemplates.COMMAND_UNEXPECTED_ERROR, parsed.name, message.guild_id)
            return self._formatter.error(DiscordUIMessages.ERROR_UNEXPECTED)

    async def _send(self, message: IncomingMessage, name: str, reply: Reply) -> None:
        try:
            await self._notifier.send(message.channel_id, reply)
        except Exception as exc:
            logger.warning(LogTemplates.COMMAND_REPLY_FAILED, name, message.guild_id, exc)
