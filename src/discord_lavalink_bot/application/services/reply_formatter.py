"""Builds every chat reply the bot sends."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from ...domain.music.value_objects import LoopMode, PlaybackState
from ...domain.shared.constants import CommandNames, UIConstants
from ...domain.shared.messages import DiscordUIMessages
from ...utils.reply import truncate
from ..interfaces.notifier import Reply, ReplyField

if TYPE_CHECKING:
    from ...domain.music.entities import Track
    from ..interfaces.audio_client import PlaybackSession


class ReplyFormatter:
    """Single formatting component shared by handlers and the event relay."""

    def __init__(self, *, prefix: str = "!") -> None:
        self._prefix = prefix

    @property
    def prefix(self) -> str:
        return self._prefix

    # ── Plain replies ───────────────────────────────────────────────

    def success(self, message: str) -> Reply:
        return Reply.success(message)

    def error(self, message: str) -> Reply:
        return Reply.error(message, title=DiscordUIMessages.EMBED_ERROR)

    # ── Track replies ───────────────────────────────────────────────

    def now_playing(self, track: Track) -> Reply:
        return Reply.info(
            track.display_title,
            title=DiscordUIMessages.EMBED_NOW_PLAYING,
            fields=self._track_fields(track),
        )

    def added_to_queue(self, track: Track, position: int) -> Reply:
        return Reply.success(
            DiscordUIMessages.ACTION_ADDED_TO_QUEUE.format(
                track_title=truncate(track.title, UIConstants.TITLE_TRUNCATION),
                position=position,
            ),
            title=DiscordUIMessages.EMBED_ADDED_TO_QUEUE,
            fields=(ReplyField(name=DiscordUIMessages.FIELD_DURATION, value=track.duration_formatted),),
        )

    def added_playlist(self, playlist_name: str, count: int) -> Reply:
        return Reply.success(
            DiscordUIMessages.ACTION_ADDED_PLAYLIST.format(
                count=count,
                playlist_name=truncate(playlist_name, UIConstants.TITLE_TRUNCATION),
            ),
            title=DiscordUIMessages.EMBED_ADDED_PLAYLIST,
        )

    def queue_list(self, current: Track | None, upcoming: Sequence[Track]) -> Reply:
        total = len(upcoming)
        limit = UIConstants.QUEUE_PREVIEW_LIMIT

        fields: list[ReplyField] = []
        if current is not None:
            fields.append(
                ReplyField(
                    name=DiscordUIMessages.FIELD_NOW_PLAYING,
                    value=self._line(current),
                    inline=False,
                )
            )

        if upcoming:
            lines = [f"`{i}.` {self._line(track)}" for i, track in enumerate(upcoming[:limit], start=1)]
            if total > limit:
                lines.append(DiscordUIMessages.QUEUE_MORE_TRACKS.format(count=total - limit))
            fields.append(
                ReplyField(
                    name=DiscordUIMessages.FIELD_UP_NEXT,
                    value=truncate("\n".join(lines), UIConstants.EMBED_FIELD_LIMIT),
                    inline=False,
                )
            )

        return Reply.info(
            title=DiscordUIMessages.EMBED_QUEUE.format(total_tracks=total),
            fields=tuple(fields),
        )

    def player_status(self, session: PlaybackSession) -> Reply:
        state = PlaybackState.from_flags(playing=session.is_playing, paused=session.is_paused)
        state_label = {
            PlaybackState.PLAYING: DiscordUIMessages.STATUS_PLAYING,
            PlaybackState.PAUSED: DiscordUIMessages.STATUS_PAUSED,
            PlaybackState.IDLE: DiscordUIMessages.STATUS_IDLE,
        }[state]
        current = session.current

        return Reply.info(
            title=DiscordUIMessages.EMBED_PLAYER_STATUS,
            fields=(
                ReplyField(name=DiscordUIMessages.FIELD_STATE, value=state_label),
                ReplyField(name=DiscordUIMessages.FIELD_VOLUME, value=f"{session.volume}%"),
                ReplyField(name=DiscordUIMessages.FIELD_LOOP, value=self._loop_label(session.loop_mode)),
                ReplyField(name=DiscordUIMessages.FIELD_QUEUE_LENGTH, value=str(len(session.queue))),
                ReplyField(
                    name=DiscordUIMessages.FIELD_CURRENT_TRACK,
                    value=self._line(current) if current else DiscordUIMessages.NOTHING,
                    inline=False,
                ),
            ),
        )

    def help(self) -> Reply:
        lines = [
            f"`{self._prefix}{usage}`: {description}"
            for usage, description in CommandNames.HELP_ENTRIES
        ]
        return Reply.info("\n".join(lines), title=DiscordUIMessages.EMBED_HELP)

    def queue_ended(self) -> Reply:
        return Reply.info(
            DiscordUIMessages.ACTION_QUEUE_ENDED,
            title=DiscordUIMessages.EMBED_QUEUE_ENDED,
        )

    # ── Helpers ─────────────────────────────────────────────────────

    @staticmethod
    def _line(track: Track) -> str:
        title = truncate(track.title, UIConstants.TITLE_TRUNCATION)
        if track.uri:
            title = f"[{title}]({track.uri})"
        return f"{title} `[{track.duration_formatted}]`"

    @staticmethod
    def _loop_label(mode: LoopMode) -> str:
        return mode.value.capitalize()

    @staticmethod
    def _track_fields(track: Track) -> tuple[ReplyField, ...]:
        return (
            ReplyField(name=DiscordUIMessages.FIELD_AUTHOR, value=track.author or "-"),
            ReplyField(name=DiscordUIMessages.FIELD_DURATION, value=track.duration_formatted),
            ReplyField(
                name=DiscordUIMessages.FIELD_REQUESTED_BY,
                value=track.requester_name or DiscordUIMessages.UNKNOWN_REQUESTER,
            ),
        )
