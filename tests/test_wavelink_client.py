"""
Unit Tests for the Wavelink Adapter

Tests for:
- Playable <-> Track conversion
- WavelinkPlaybackSession player calls
- WavelinkAudioClient node pool and voice connection
- WavelinkSearchBackend load type mapping

wavelink objects are replaced with MagicMock(spec=...) stand-ins; no node is contacted.
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import discord
import pytest
import wavelink
from conftest import GUILD_ID, TEXT_CHANNEL_ID, USER_ID, VOICE_CHANNEL_ID

from discord_lavalink_bot.config.settings import LavalinkSettings
from discord_lavalink_bot.domain.music.entities import Track
from discord_lavalink_bot.domain.music.value_objects import LoadType, LoopMode
from discord_lavalink_bot.domain.shared.exceptions import ExternalServiceError
from discord_lavalink_bot.infrastructure.lavalink.wavelink_client import (
    WavelinkAudioClient,
    WavelinkPlaybackSession,
    WavelinkSearchBackend,
    playable_for,
    track_from_playable,
)


def make_playable(title="Song", *, length=185_000, is_stream=False, **extras):
    playable = MagicMock(spec=wavelink.Playable)
    playable.title = title
    playable.uri = f"https://youtube.com/watch?v={title.lower()}"
    playable.author = "Artist"
    playable.length = length
    playable.identifier = title.lower()
    playable.is_stream = is_stream
    playable.extras = SimpleNamespace(**extras)
    return playable


@pytest.fixture
def player():
    player = MagicMock(spec=wavelink.Player)
    player.queue = MagicMock()
    player.queue.mode = wavelink.QueueMode.normal
    player.play = AsyncMock()
    player.pause = AsyncMock()
    player.skip = AsyncMock()
    player.set_volume = AsyncMock()
    player.disconnect = AsyncMock()
    return player


@pytest.fixture
def session(player):
    return WavelinkPlaybackSession(
        player,
        guild_id=GUILD_ID,
        voice_channel_id=VOICE_CHANNEL_ID,
        text_channel_id=TEXT_CHANNEL_ID,
    )


# =============================================================================
# Conversion Tests
# =============================================================================


class TestTrackConversion:
    """Tests for track_from_playable and playable_for."""

    def test_converts_milliseconds_and_keeps_handle(self):
        playable = make_playable("Song", length=185_999)

        track = track_from_playable(playable)

        assert track.title == "Song"
        assert track.duration_seconds == 185
        assert track.duration_formatted == "3:05"
        assert track.handle is playable
        assert track.requester_id is None

    def test_stream_is_live(self):
        track = track_from_playable(make_playable("Radio", length=0, is_stream=True))

        assert track.duration_formatted == "LIVE"

    def test_reads_requester_from_extras(self):
        playable = make_playable(requester_id=str(USER_ID), requester_name="Tester")

        track = track_from_playable(playable)

        assert track.requester_id == USER_ID
        assert track.requester_name == "Tester"

    def test_missing_title_gets_placeholder(self):
        track = track_from_playable(make_playable(title=""))

        assert track.title == "Unknown title"

    def test_playable_for_tags_requester(self):
        playable = make_playable()
        track = track_from_playable(playable).with_requester(USER_ID, "Tester")

        assert playable_for(track) is playable
        assert playable.extras == {"requester_id": USER_ID, "requester_name": "Tester"}

    def test_playable_for_requires_handle(self):
        with pytest.raises(TypeError):
            playable_for(Track(title="Orphan"))


# =============================================================================
# Playback Session Tests
# =============================================================================


class TestWavelinkPlaybackSession:
    """Unit tests for WavelinkPlaybackSession."""

    @pytest.mark.asyncio
    async def test_enqueue_puts_playable(self, session, player):
        playable = make_playable()
        player.queue.__len__.return_value = 4

        position = await session.enqueue(track_from_playable(playable))

        player.queue.put.assert_called_once_with(playable)
        assert position == 4

    @pytest.mark.asyncio
    async def test_start_plays_next_from_queue(self, session, player):
        nxt = make_playable("Next")
        player.queue.get.return_value = nxt

        await session.start()

        player.play.assert_awaited_once_with(nxt)

    @pytest.mark.asyncio
    async def test_pause_resume_volume_skip(self, session, player):
        await session.set_paused(True)
        await session.set_paused(False)
        await session.set_volume(30)
        await session.skip()

        assert [c.args for c in player.pause.await_args_list] == [(True,), (False,)]
        player.set_volume.assert_awaited_once_with(30)
        player.skip.assert_awaited_once_with(force=True)

    @pytest.mark.asyncio
    async def test_loop_mode_maps_to_queue_mode(self, session, player):
        assert session.loop_mode is LoopMode.NONE

        await session.set_loop_mode(LoopMode.QUEUE)

        assert player.queue.mode == wavelink.QueueMode.loop_all
        assert session.loop_mode is LoopMode.QUEUE

    @pytest.mark.asyncio
    async def test_remove_at_returns_removed_track(self, session, player):
        target = make_playable("Target")
        player.queue.__getitem__.return_value = target

        removed = await session.remove_at(2)

        player.queue.__getitem__.assert_called_once_with(2)
        player.queue.delete.assert_called_once_with(2)
        assert removed.title == "Target"

    @pytest.mark.asyncio
    async def test_clear_returns_count(self, session, player):
        player.queue.__len__.return_value = 3

        assert await session.clear() == 3
        player.queue.clear.assert_called_once()

    @pytest.mark.asyncio
    async def test_destroy_clears_and_disconnects(self, session, player):
        await session.destroy()

        player.queue.clear.assert_called_once()
        player.disconnect.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_library_error_becomes_external_service_error(self, session, player):
        player.pause.side_effect = wavelink.WavelinkException("node gone")

        with pytest.raises(ExternalServiceError) as exc_info:
            await session.set_paused(True)

        assert exc_info.value.service == "lavalink"
        assert "pause" in exc_info.value.message

    def test_state_properties(self, session, player):
        player.playing = True
        player.paused = False
        player.volume = 70
        player.current = None
        player.queue.__iter__.return_value = iter([make_playable("A"), make_playable("B")])

        assert session.is_playing
        assert not session.is_paused
        assert session.volume == 70
        assert session.current is None
        assert [t.title for t in session.queue] == ["A", "B"]


# =============================================================================
# Audio Client Tests
# =============================================================================


@pytest.fixture
def discord_client():
    return MagicMock(spec=discord.Client)


class TestWavelinkAudioClient:
    """Unit tests for WavelinkAudioClient."""

    @pytest.mark.asyncio
    async def test_connect_builds_one_node_per_setting(self, discord_client):
        settings = LavalinkSettings(
            nodes=[{"name": "a", "host": "h1", "port": 2333}, {"name": "b", "host": "h2", "secure": True}]
        )
        client = WavelinkAudioClient(client=discord_client, settings=settings)

        with (
            patch.object(wavelink, "Node") as mock_node,
            patch.object(wavelink.Pool, "connect", new=AsyncMock()) as mock_connect,
        ):
            await client.connect()

        assert [c.kwargs["uri"] for c in mock_node.call_args_list] == [
            "http://h1:2333",
            "https://h2:13592",
        ]
        assert [c.kwargs["identifier"] for c in mock_node.call_args_list] == ["a", "b"]
        assert mock_connect.await_args.kwargs["client"] is discord_client

    @pytest.mark.asyncio
    async def test_connect_failure_raises_external_error(self, discord_client):
        client = WavelinkAudioClient(client=discord_client, settings=LavalinkSettings())

        with (
            patch.object(wavelink, "Node"),
            patch.object(
                wavelink.Pool,
                "connect",
                new=AsyncMock(side_effect=wavelink.WavelinkException("refused")),
            ),
        ):
            with pytest.raises(ExternalServiceError):
                await client.connect()

    @pytest.mark.asyncio
    async def test_create_session_joins_voice(self, discord_client, player):
        channel = MagicMock(spec=discord.VoiceChannel)
        channel.connect = AsyncMock(return_value=player)
        discord_client.get_guild.return_value = SimpleNamespace(voice_client=None)
        discord_client.get_channel.return_value = channel
        client = WavelinkAudioClient(client=discord_client, settings=LavalinkSettings())

        session = await client.create_session(GUILD_ID, VOICE_CHANNEL_ID, TEXT_CHANNEL_ID)

        channel.connect.assert_awaited_once_with(cls=wavelink.Player, self_deaf=True)
        assert session.player is player
        assert session.text_channel_id == TEXT_CHANNEL_ID
        assert player.autoplay == wavelink.AutoPlayMode.partial

    @pytest.mark.asyncio
    async def test_create_session_reuses_connected_player(self, discord_client, player):
        discord_client.get_guild.return_value = SimpleNamespace(voice_client=player)
        client = WavelinkAudioClient(client=discord_client, settings=LavalinkSettings())

        session = await client.create_session(GUILD_ID, VOICE_CHANNEL_ID, TEXT_CHANNEL_ID)

        assert session.player is player
        discord_client.get_channel.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_voice_channel(self, discord_client):
        discord_client.get_guild.return_value = None
        discord_client.get_channel.return_value = None
        client = WavelinkAudioClient(client=discord_client, settings=LavalinkSettings())

        with pytest.raises(ExternalServiceError):
            await client.create_session(GUILD_ID, VOICE_CHANNEL_ID, TEXT_CHANNEL_ID)

    @pytest.mark.asyncio
    async def test_voice_connect_timeout(self, discord_client):
        channel = MagicMock(spec=discord.VoiceChannel)
        channel.connect = AsyncMock(side_effect=TimeoutError())
        discord_client.get_guild.return_value = None
        discord_client.get_channel.return_value = channel
        client = WavelinkAudioClient(client=discord_client, settings=LavalinkSettings())

        with pytest.raises(ExternalServiceError):
            await client.create_session(GUILD_ID, VOICE_CHANNEL_ID, TEXT_CHANNEL_ID)


# =============================================================================
# Search Backend Tests
# =============================================================================


class TestWavelinkSearchBackend:
    """Unit tests for WavelinkSearchBackend."""

    @pytest.mark.asyncio
    async def test_search_uses_configured_source(self):
        backend = WavelinkSearchBackend(source="scsearch")

        with patch.object(
            wavelink.Playable, "search", new=AsyncMock(return_value=[make_playable("Hit")])
        ) as mock_search:
            result = await backend.resolve("some words")

        mock_search.assert_awaited_once_with("some words", source="scsearch")
        assert result.load_type is LoadType.SEARCH
        assert result.tracks[0].title == "Hit"

    @pytest.mark.asyncio
    async def test_url_is_track_load(self):
        with patch.object(
            wavelink.Playable, "search", new=AsyncMock(return_value=[make_playable("Direct")])
        ):
            result = await WavelinkSearchBackend().resolve("https://youtu.be/abc")

        assert result.load_type is LoadType.TRACK

    @pytest.mark.asyncio
    async def test_playlist(self):
        playlist = MagicMock(spec=wavelink.Playlist)
        playlist.name = "Album"
        playlist.tracks = [make_playable("One"), make_playable("Two")]

        with patch.object(wavelink.Playable, "search", new=AsyncMock(return_value=playlist)):
            result = await WavelinkSearchBackend().resolve("https://youtube.com/playlist?list=x")

        assert result.is_playlist
        assert result.playlist_name == "Album"
        assert [t.title for t in result.tracks] == ["One", "Two"]

    @pytest.mark.asyncio
    async def test_no_results(self):
        with patch.object(wavelink.Playable, "search", new=AsyncMock(return_value=[])):
            result = await WavelinkSearchBackend().resolve("zzzz")

        assert result.is_empty

    @pytest.mark.asyncio
    async def test_load_failure(self):
        with patch.object(
            wavelink.Playable,
            "search",
            new=AsyncMock(side_effect=wavelink.WavelinkException("load failed")),
        ):
            with pytest.raises(ExternalServiceError):
                await WavelinkSearchBackend().resolve("song")
