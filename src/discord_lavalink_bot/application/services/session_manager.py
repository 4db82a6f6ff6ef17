"""Explicit guild → playback session registry."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from ...domain.shared.types import DiscordSnowflake
    from ..interfaces.audio_client import AudioClient, PlaybackSession

logger = logging.getLogger(__name__)


class SessionManager:
    """Owns the mapping from guild id to its playback session.

    Handlers never reach into the audio library's own player registry;
    every lookup, creation and teardown goes through this object.
    """

    def __init__(self, *, audio_client: AudioClient) -> None:
        self._audio_client = audio_client
        self._sessions: dict[int, PlaybackSession] = {}

    def get(self, guild_id: DiscordSnowflake) -> PlaybackSession | None:
        return self._sessions.get(guild_id)

    def __contains__(self, guild_id: object) -> bool:
        return guild_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)

    async def get_or_create(
        self,
        guild_id: DiscordSnowflake,
        *,
        voice_channel_id: DiscordSnowflake,
        text_channel_id: DiscordSnowflake,
    ) -> PlaybackSession:
        """Return the guild's session, joining voice first if there is none."""
        session = self._sessions.get(guild_id)
        if session is not None:
            return session

        session = await self._audio_client.create_session(
            guild_id, voice_channel_id, text_channel_id
        )
        self._sessions[guild_id] = session
        logger.info(LogTemplates.SESSION_CREATED, guild_id, voice_channel_id, text_channel_id)
        return session

    async def destroy(self, guild_id: DiscordSnowflake) -> PlaybackSession | None:
        """Tear down and forget the guild's session.

        The session is removed from the registry even if the library
        raises while disconnecting.
        """
        session = self._sessions.pop(guild_id, None)
        if session is None:
            logger.debug(LogTemplates.SESSION_NOT_FOUND, guild_id)
            return None

        try:
            await session.destroy()
        finally:
            logger.info(LogTemplates.SESSION_DESTROYED, guild_id)
        return session

    def forget(self, guild_id: DiscordSnowflake) -> PlaybackSession | None:
        """Drop the mapping without touching the player (it is already gone)."""
        return self._sessions.pop(guild_id, None)

    async def destroy_all(self) -> None:
        for guild_id in list(self._sessions):
            try:
                await self.destroy(guild_id)
            except Exception as exc:
                logger.warning(LogTemplates.SESSION_DESTROY_FAILED, guild_id, exc)
