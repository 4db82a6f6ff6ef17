"""Port interfaces for the external audio node client."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

from discord_lavalink_bot.domain.shared.types import DiscordSnowflake, VolumePercent

if TYPE_CHECKING:
    from ...domain.music.entities import ResolveResult, Track
    from ...domain.music.value_objects import LoopMode


class PlaybackSession(ABC):
    """Per-guild playback session owned by the audio client library.

    The queue holds the tracks waiting to play; the current track is not
    part of it. Any call that reaches the audio node may raise
    ``ExternalServiceError``.
    """

    def __init__(
        self,
        *,
        guild_id: DiscordSnowflake,
        voice_channel_id: DiscordSnowflake,
        text_channel_id: DiscordSnowflake,
    ) -> None:
        self.guild_id = guild_id
        self.voice_channel_id = voice_channel_id
        self.text_channel_id = text_channel_id

    # ── State ───────────────────────────────────────────────────────

    @property
    @abstractmethod
    def queue(self) -> Sequence["Track"]:
        """Snapshot of the upcoming tracks in play order."""
        ...

    @property
    @abstractmethod
    def current(self) -> "Track | None":
        ...

    @property
    @abstractmethod
    def is_playing(self) -> bool:
        ...

    @property
    @abstractmethod
    def is_paused(self) -> bool:
        ...

    @property
    @abstractmethod
    def volume(self) -> VolumePercent:
        ...

    @property
    @abstractmethod
    def loop_mode(self) -> "LoopMode":
        ...

    @property
    def is_idle(self) -> bool:
        """Neither playing nor paused."""
        return not self.is_playing and not self.is_paused

    # ── Mutations ───────────────────────────────────────────────────

    @abstractmethod
    async def enqueue(self, track: "Track") -> int:
        """Append a track and return the queue length after insertion."""
        ...

    @abstractmethod
    async def start(self) -> None:
        """Start playing the next queued track."""
        ...

    @abstractmethod
    async def set_paused(self, paused: bool) -> None:
        ...

    @abstractmethod
    async def skip(self) -> None:
        """Stop the current track so the library advances to the next one."""
        ...

    @abstractmethod
    async def set_volume(self, volume: VolumePercent) -> None:
        ...

    @abstractmethod
    async def set_loop_mode(self, mode: "LoopMode") -> None:
        ...

    @abstractmethod
    async def shuffle(self) -> None:
        ...

    @abstractmethod
    async def remove_at(self, index: int) -> "Track":
        """Remove and return the track at a 0-based queue index."""
        ...

    @abstractmethod
    async def clear(self) -> int:
        """Empty the queue and return how many tracks were removed."""
        ...

    @abstractmethod
    async def destroy(self) -> None:
        """Stop playback, clear the queue and leave the voice channel."""
        ...


class AudioClient(ABC):
    """Interface for the audio node connection."""

    @abstractmethod
    async def connect(self) -> None:
        """Connect to every configured audio node."""
        ...

    @abstractmethod
    async def close(self) -> None:
        ...

    @abstractmethod
    async def create_session(
        self,
        guild_id: DiscordSnowflake,
        voice_channel_id: DiscordSnowflake,
        text_channel_id: DiscordSnowflake,
    ) -> PlaybackSession:
        """Join the voice channel and return a session bound to the text channel."""
        ...


class SearchBackend(ABC):
    """Interface for resolving user queries into tracks."""

    @abstractmethod
    async def resolve(self, query: str) -> "ResolveResult":
        """Resolve a URL or free-text query.

        Raises ``ExternalServiceError`` when the backend cannot be reached.
        """
        ...
