"""Core domain entities for the music bounded context."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from discord_lavalink_bot.domain.music.value_objects import LoadType
from discord_lavalink_bot.domain.shared.types import (
    DiscordSnowflake,
    DurationSeconds,
    NonEmptyStr,
    TrackTitleStr,
)


class Track(BaseModel):
    """Immutable value object representing a playable track.

    ``handle`` carries the audio library's own track object so the
    infrastructure layer can hand it back for playback. It is never
    serialised or compared.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    title: TrackTitleStr
    uri: str | None = None
    author: str | None = None
    duration_seconds: DurationSeconds = 0
    identifier: str | None = None
    is_stream: bool = False

    # Request metadata (set when queued)
    requester_id: DiscordSnowflake | None = None
    requester_name: NonEmptyStr | None = None

    handle: Any = Field(default=None, exclude=True, repr=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Track):
            return NotImplemented
        return self.model_dump() == other.model_dump()

    def __hash__(self) -> int:
        return hash((self.identifier, self.title, self.uri, self.requester_id))

    @property
    def duration_formatted(self) -> str:
        """Format duration as MM:SS or HH:MM:SS."""
        if self.is_stream:
            return "LIVE"

        hours, remainder = divmod(self.duration_seconds, 3600)
        minutes, seconds = divmod(remainder, 60)

        if hours > 0:
            return f"{hours}:{minutes:02d}:{seconds:02d}"
        return f"{minutes}:{seconds:02d}"

    @property
    def display_title(self) -> str:
        """Markdown link to the track when a URI is known."""
        if self.uri:
            return f"[{self.title}]({self.uri})"
        return self.title

    def with_requester(self, user_id: DiscordSnowflake, user_name: NonEmptyStr) -> Track:
        """Return a copy of this track with requester metadata populated."""
        return self.model_copy(update={"requester_id": user_id, "requester_name": user_name})


class ResolveResult(BaseModel):
    """Outcome of resolving a user query through a search backend."""

    model_config = ConfigDict(frozen=True)

    load_type: LoadType
    tracks: tuple[Track, ...] = ()
    playlist_name: str | None = None

    @classmethod
    def empty(cls) -> ResolveResult:
        return cls(load_type=LoadType.EMPTY)

    @property
    def is_empty(self) -> bool:
        return self.load_type is LoadType.EMPTY or not self.tracks

    @property
    def is_playlist(self) -> bool:
        return self.load_type is LoadType.PLAYLIST
