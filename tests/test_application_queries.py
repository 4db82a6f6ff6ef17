"""
Unit Tests for Application Layer Queries

Tests for:
- GetQueueHandler
- GetCurrentTrackHandler
- GetStatusHandler, GetHelpHandler
"""

import pytest

from discord_lavalink_bot.application.interfaces.notifier import ReplyKind
from discord_lavalink_bot.application.queries import (
    GetCurrentTrackHandler,
    GetHelpHandler,
    GetQueueHandler,
    GetStatusHandler,
)
from discord_lavalink_bot.domain.music.value_objects import LoopMode
from discord_lavalink_bot.domain.shared.messages import DiscordUIMessages


def _field(reply, name):
    return next(f.value for f in reply.fields if f.name == name)


# =============================================================================
# GetQueue Query Tests
# =============================================================================


class TestGetQueueHandler:
    """Unit tests for GetQueueHandler."""

    @pytest.mark.asyncio
    async def test_no_session(self, handler_deps, make_command):
        reply = await GetQueueHandler(**handler_deps).handle(make_command())

        assert reply.description == DiscordUIMessages.STATE_NOTHING_PLAYING

    @pytest.mark.asyncio
    async def test_nothing_current_and_empty(self, handler_deps, active_session, make_command):
        await active_session()

        reply = await GetQueueHandler(**handler_deps).handle(make_command())

        assert reply.description == DiscordUIMessages.STATE_QUEUE_EMPTY

    @pytest.mark.asyncio
    async def test_lists_current_and_upcoming(
        self, handler_deps, active_session, make_track, make_command
    ):
        session = await active_session()
        session.current_track = make_track("Now")
        session.tracks.extend([make_track("Next One"), make_track("Next Two")])

        reply = await GetQueueHandler(**handler_deps).handle(make_command())

        assert reply.kind is ReplyKind.INFO
        assert reply.title == "📋 Queue (2 tracks)"
        assert "Now" in _field(reply, DiscordUIMessages.FIELD_NOW_PLAYING)
        up_next = _field(reply, DiscordUIMessages.FIELD_UP_NEXT)
        assert up_next.index("Next One") < up_next.index("Next Two")

    @pytest.mark.asyncio
    async def test_current_only(self, handler_deps, active_session, sample_track, make_command):
        session = await active_session()
        session.current_track = sample_track

        reply = await GetQueueHandler(**handler_deps).handle(make_command())

        assert reply.title == "📋 Queue (0 tracks)"
        assert [f.name for f in reply.fields] == [DiscordUIMessages.FIELD_NOW_PLAYING]


# =============================================================================
# GetCurrentTrack Query Tests
# =============================================================================


class TestGetCurrentTrackHandler:
    """Unit tests for GetCurrentTrackHandler."""

    @pytest.mark.asyncio
    async def test_no_session(self, handler_deps, make_command):
        reply = await GetCurrentTrackHandler(**handler_deps).handle(make_command())

        assert reply.description == DiscordUIMessages.STATE_NOTHING_CURRENTLY_PLAYING

    @pytest.mark.asyncio
    async def test_session_without_track(self, handler_deps, active_session, make_command):
        await active_session()

        reply = await GetCurrentTrackHandler(**handler_deps).handle(make_command())

        assert reply.description == DiscordUIMessages.STATE_NOTHING_CURRENTLY_PLAYING

    @pytest.mark.asyncio
    async def test_shows_current(self, handler_deps, active_session, make_track, make_command):
        session = await active_session()
        session.current_track = make_track("Shown", requester_name="Tester")

        reply = await GetCurrentTrackHandler(**handler_deps).handle(make_command())

        assert reply.title == DiscordUIMessages.EMBED_NOW_PLAYING
        assert "Shown" in reply.description
        assert _field(reply, DiscordUIMessages.FIELD_REQUESTED_BY) == "Tester"


# =============================================================================
# GetStatus / GetHelp Query Tests
# =============================================================================


class TestGetStatusHandler:
    """Unit tests for GetStatusHandler."""

    @pytest.mark.asyncio
    async def test_no_session(self, handler_deps, make_command):
        reply = await GetStatusHandler(**handler_deps).handle(make_command(voice=False))

        assert reply.description == DiscordUIMessages.STATE_NO_ACTIVE_PLAYER

    @pytest.mark.asyncio
    async def test_reports_player_state(self, handler_deps, active_session, make_track, make_command):
        session = await active_session()
        session.current_track = make_track("Current")
        session.playing = True
        session.paused = True
        session.player_volume = 40
        session.mode = LoopMode.QUEUE
        session.tracks.extend([make_track("A"), make_track("B")])

        reply = await GetStatusHandler(**handler_deps).handle(make_command())

        assert reply.title == DiscordUIMessages.EMBED_PLAYER_STATUS
        assert _field(reply, DiscordUIMessages.FIELD_STATE) == DiscordUIMessages.STATUS_PAUSED
        assert _field(reply, DiscordUIMessages.FIELD_VOLUME) == "40%"
        assert _field(reply, DiscordUIMessages.FIELD_LOOP) == "Queue"
        assert _field(reply, DiscordUIMessages.FIELD_QUEUE_LENGTH) == "2"
        assert "Current" in _field(reply, DiscordUIMessages.FIELD_CURRENT_TRACK)

    @pytest.mark.asyncio
    async def test_idle_player(self, handler_deps, active_session, make_command):
        await active_session()

        reply = await GetStatusHandler(**handler_deps).handle(make_command())

        assert _field(reply, DiscordUIMessages.FIELD_STATE) == DiscordUIMessages.STATUS_IDLE
        assert _field(reply, DiscordUIMessages.FIELD_LOOP) == "None"
        assert _field(reply, DiscordUIMessages.FIELD_CURRENT_TRACK) == DiscordUIMessages.NOTHING


class TestGetHelpHandler:
    """Unit tests for GetHelpHandler."""

    @pytest.mark.asyncio
    async def test_lists_every_command_with_prefix(self, handler_deps, make_command):
        reply = await GetHelpHandler(**handler_deps).handle(make_command(voice=False))

        assert reply.title == DiscordUIMessages.EMBED_HELP
        lines = reply.description.splitlines()
        assert len(lines) == 14
        assert lines[0] == "`!play <query>`: Play a song or playlist"
        assert lines[-1] == "`!help`: Show this help message"
