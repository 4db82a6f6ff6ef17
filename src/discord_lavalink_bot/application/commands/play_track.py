"""
Play Track Command

Resolve a query, enqueue the result and start playback when idle.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...domain.shared.exceptions import ExternalServiceError
from ...domain.shared.messages import DiscordUIMessages, LogTemplates
from ..interfaces.command_handler import CommandHandler

if TYPE_CHECKING:
    from ...domain.music.entities import Track
    from ..interfaces.audio_client import SearchBackend
    from ..interfaces.notifier import Reply
    from ..services.reply_formatter import ReplyFormatter
    from ..services.session_manager import SessionManager
    from .models import GuildCommand

logger = logging.getLogger(__name__)


class PlayTrackHandler(CommandHandler):
    """Handler for ``play <query>``.

    Nothing touches the session manager until the query has resolved to
    at least one track, so an empty query or a miss never creates a
    player.
    """

    def __init__(
        self,
        *,
        session_manager: SessionManager,
        formatter: ReplyFormatter,
        search_backend: SearchBackend,
    ) -> None:
        super().__init__(session_manager=session_manager, formatter=formatter)
        self._search = search_backend

    async def handle(self, command: GuildCommand) -> Reply:
        query = command.argument_text
        if not query:
            return self._formatter.error(DiscordUIMessages.ERROR_QUERY_REQUIRED)

        if command.voice_channel_id is None:
            return self._formatter.error(DiscordUIMessages.STATE_NEED_TO_BE_IN_VOICE)

        try:
            result = await self._search.resolve(query)
        except ExternalServiceError as exc:
            logger.warning(LogTemplates.PLAYBACK_RESOLVE_FAILED, query, command.guild_id, exc)
            return self._formatter.error(DiscordUIMessages.ERROR_PLAY_FAILED)

        if result.is_empty:
            logger.debug(LogTemplates.SEARCH_NO_MATCH, query)
            return self._formatter.error(DiscordUIMessages.ERROR_NO_RESULTS)

        candidates = result.tracks if result.is_playlist else result.tracks[:1]
        tracks: list[Track] = [
            track.with_requester(command.user_id, command.user_name) for track in candidates
        ]

        try:
            session = await self._sessions.get_or_create(
                command.guild_id,
                voice_channel_id=command.voice_channel_id,
                text_channel_id=command.channel_id,
            )

            position = 0
            for track in tracks:
                position = await session.enqueue(track)

            if session.is_idle:
                await session.start()
                logger.info(LogTemplates.PLAYBACK_STARTED, command.guild_id)
        except ExternalServiceError as exc:
            logger.warning(LogTemplates.PLAYBACK_RESOLVE_FAILED, query, command.guild_id, exc)
            return self._formatter.error(DiscordUIMessages.ERROR_PLAY_FAILED)

        if result.is_playlist:
            playlist_name = result.playlist_name or query
            logger.info(
                LogTemplates.QUEUE_PLAYLIST_ENQUEUED, playlist_name, len(tracks), command.guild_id
            )
            return self._formatter.added_playlist(playlist_name, len(tracks))

        logger.info(LogTemplates.QUEUE_ENQUEUED, tracks[0].title, position, command.guild_id)
        return self._formatter.added_to_queue(tracks[0], position)
