"""Wavelink-backed audio client, playback session and search backend."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING, Any

import discord
import wavelink

from ...application.interfaces.audio_client import AudioClient, PlaybackSession, SearchBackend
from ...domain.music.entities import ResolveResult, Track
from ...domain.music.value_objects import LoadType, LoopMode
from ...domain.shared.exceptions import ExternalServiceError
from ...domain.shared.messages import ErrorMessages, LogTemplates
from ...utils.reply import is_url, truncate

if TYPE_CHECKING:
    from ...config.settings import LavalinkSettings
    from ...domain.shared.types import DiscordSnowflake

logger = logging.getLogger(__name__)

SERVICE_NAME = "lavalink"
UNKNOWN_TITLE = "Unknown title"

_LOOP_TO_QUEUE_MODE: dict[LoopMode, wavelink.QueueMode] = {
    LoopMode.NONE: wavelink.QueueMode.normal,
    LoopMode.QUEUE: wavelink.QueueMode.loop_all,
}


def track_from_playable(playable: wavelink.Playable) -> Track:
    """Build a domain Track from a wavelink Playable, keeping it as the handle."""
    extras = playable.extras
    requester_id = getattr(extras, "requester_id", None)
    requester_name = getattr(extras, "requester_name", None)

    return Track(
        title=truncate(playable.title or UNKNOWN_TITLE, 500),
        uri=playable.uri,
        author=playable.author or None,
        duration_seconds=max(playable.length or 0, 0) // 1000,
        identifier=playable.identifier,
        is_stream=bool(playable.is_stream),
        requester_id=int(requester_id) if requester_id else None,
        requester_name=requester_name or None,
        handle=playable,
    )


def playable_for(track: Track) -> wavelink.Playable:
    """Return the Playable behind a Track, tagged with its requester."""
    playable = track.handle
    if not isinstance(playable, wavelink.Playable):
        raise TypeError(f"Track {track.title!r} has no wavelink handle")

    if track.requester_id is not None:
        playable.extras = {
            "requester_id": track.requester_id,
            "requester_name": track.requester_name or "",
        }
    return playable


@contextlib.contextmanager
def _player_call(operation: str, guild_id: int) -> Iterator[None]:
    try:
        yield
    except (wavelink.WavelinkException, discord.DiscordException) as exc:
        raise ExternalServiceError(
            SERVICE_NAME,
            ErrorMessages.PLAYER_CALL_FAILED.format(
                operation=operation, guild_id=guild_id, error=exc
            ),
        ) from exc


class WavelinkPlaybackSession(PlaybackSession):
    """PlaybackSession over a connected ``wavelink.Player``."""

    def __init__(
        self,
        player: wavelink.Player,
        *,
        guild_id: DiscordSnowflake,
        voice_channel_id: DiscordSnowflake,
        text_channel_id: DiscordSnowflake,
    ) -> None:
        super().__init__(
            guild_id=guild_id,
            voice_channel_id=voice_channel_id,
            text_channel_id=text_channel_id,
        )
        self._player = player

    @property
    def player(self) -> wavelink.Player:
        return self._player

    @property
    def queue(self) -> Sequence[Track]:
        return [track_from_playable(playable) for playable in self._player.queue]

    @property
    def current(self) -> Track | None:
        playable = self._player.current
        return track_from_playable(playable) if playable is not None else None

    @property
    def is_playing(self) -> bool:
        return bool(self._player.playing)

    @property
    def is_paused(self) -> bool:
        return bool(self._player.paused)

    @property
    def volume(self) -> int:
        return int(self._player.volume)

    @property
    def loop_mode(self) -> LoopMode:
        if self._player.queue.mode == wavelink.QueueMode.loop_all:
            return LoopMode.QUEUE
        return LoopMode.NONE

    async def enqueue(self, track: Track) -> int:
        self._player.queue.put(playable_for(track))
        return len(self._player.queue)

    async def start(self) -> None:
        with _player_call("play", self.guild_id):
            await self._player.play(self._player.queue.get())

    async def set_paused(self, paused: bool) -> None:
        with _player_call("pause", self.guild_id):
            await self._player.pause(paused)

    async def skip(self) -> None:
        with _player_call("skip", self.guild_id):
            await self._player.skip(force=True)

    async def set_volume(self, volume: int) -> None:
        with _player_call("set_volume", self.guild_id):
            await self._player.set_volume(volume)

    async def set_loop_mode(self, mode: LoopMode) -> None:
        self._player.queue.mode = _LOOP_TO_QUEUE_MODE[mode]

    async def shuffle(self) -> None:
        self._player.queue.shuffle()

    async def remove_at(self, index: int) -> Track:
        track = track_from_playable(self._player.queue[index])
        self._player.queue.delete(index)
        return track

    async def clear(self) -> int:
        count = len(self._player.queue)
        self._player.queue.clear()
        return count

    async def destroy(self) -> None:
        self._player.queue.clear()
        with _player_call("disconnect", self.guild_id):
            await self._player.disconnect()


class WavelinkAudioClient(AudioClient):
    """Connects the node pool and joins voice channels as wavelink players."""

    def __init__(self, *, client: discord.Client, settings: LavalinkSettings) -> None:
        self._client = client
        self._settings = settings

    async def connect(self) -> None:
        nodes = [
            wavelink.Node(
                uri=node.uri,
                password=node.password.get_secret_value(),
                identifier=node.name,
            )
            for node in self._settings.nodes
        ]
        logger.info(LogTemplates.NODE_CONNECTING, len(nodes))
        try:
            await wavelink.Pool.connect(nodes=nodes, client=self._client)
        except wavelink.WavelinkException as exc:
            logger.exception(LogTemplates.NODE_CONNECT_FAILED)
            raise ExternalServiceError(SERVICE_NAME, ErrorMessages.NODE_UNAVAILABLE) from exc

    async def close(self) -> None:
        await wavelink.Pool.close()
        logger.info(LogTemplates.NODES_CLOSED)

    async def create_session(
        self,
        guild_id: DiscordSnowflake,
        voice_channel_id: DiscordSnowflake,
        text_channel_id: DiscordSnowflake,
    ) -> WavelinkPlaybackSession:
        player = await self._connect_player(guild_id, voice_channel_id)
        player.autoplay = wavelink.AutoPlayMode.partial
        return WavelinkPlaybackSession(
            player,
            guild_id=guild_id,
            voice_channel_id=voice_channel_id,
            text_channel_id=text_channel_id,
        )

    async def _connect_player(
        self, guild_id: DiscordSnowflake, voice_channel_id: DiscordSnowflake
    ) -> wavelink.Player:
        guild = self._client.get_guild(guild_id)
        if guild is not None and isinstance(guild.voice_client, wavelink.Player):
            logger.debug(LogTemplates.SESSION_REUSED, guild_id)
            return guild.voice_client

        channel = self._client.get_channel(voice_channel_id)
        if not isinstance(channel, discord.VoiceChannel | discord.StageChannel):
            raise ExternalServiceError(
                SERVICE_NAME,
                ErrorMessages.VOICE_CHANNEL_NOT_FOUND.format(channel_id=voice_channel_id),
            )

        try:
            return await channel.connect(cls=wavelink.Player, self_deaf=self._settings.self_deaf)
        except (
            wavelink.WavelinkException,
            discord.DiscordException,
            asyncio.TimeoutError,
        ) as exc:
            raise ExternalServiceError(
                SERVICE_NAME,
                ErrorMessages.VOICE_CONNECT_FAILED.format(channel_id=voice_channel_id, error=exc),
            ) from exc


class WavelinkSearchBackend(SearchBackend):
    """Resolves queries on the Lavalink node.

    URLs load directly; anything else is searched with the configured
    source prefix (``ytmsearch`` by default).
    """

    def __init__(self, *, source: str = "ytmsearch") -> None:
        self._source = source

    async def resolve(self, query: str) -> ResolveResult:
        try:
            results: Any = await wavelink.Playable.search(query, source=self._source)
        except wavelink.WavelinkException as exc:
            raise ExternalServiceError(
                SERVICE_NAME, ErrorMessages.SEARCH_FAILED.format(query=query, error=exc)
            ) from exc

        if not results:
            return ResolveResult.empty()

        if isinstance(results, wavelink.Playlist):
            return ResolveResult(
                load_type=LoadType.PLAYLIST,
                tracks=tuple(track_from_playable(p) for p in results.tracks),
                playlist_name=results.name,
            )

        return ResolveResult(
            load_type=LoadType.TRACK if is_url(query) else LoadType.SEARCH,
            tracks=tuple(track_from_playable(p) for p in results),
        )
