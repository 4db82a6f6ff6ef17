import random

import pytest

from discord_lavalink_bot.application.commands.models import GuildCommand, IncomingMessage
from discord_lavalink_bot.application.interfaces.audio_client import (
    AudioClient,
    PlaybackSession,
    SearchBackend,
)
from discord_lavalink_bot.application.interfaces.notifier import Notifier
from discord_lavalink_bot.domain.music.entities import ResolveResult, Track
from discord_lavalink_bot.domain.music.value_objects import LoadType, LoopMode

GUILD_ID = 111111111111111111
TEXT_CHANNEL_ID = 222222222222222222
VOICE_CHANNEL_ID = 333333333333333333
USER_ID = 444444444444444444

# ============================================================================
# In-memory fakes
# ============================================================================


class FakePlaybackSession(PlaybackSession):
    """In-memory session that mimics the audio library's player."""

    def __init__(self, *, guild_id=GUILD_ID, voice_channel_id=VOICE_CHANNEL_ID,
                 text_channel_id=TEXT_CHANNEL_ID):
        super().__init__(
            guild_id=guild_id,
            voice_channel_id=voice_channel_id,
            text_channel_id=text_channel_id,
        )
        self.tracks: list[Track] = []
        self.current_track: Track | None = None
        self.playing = False
        self.paused = False
        self.player_volume = 100
        self.mode = LoopMode.NONE
        self.destroyed = False
        self.calls: list[str] = []

    @property
    def queue(self):
        return list(self.tracks)

    @property
    def current(self):
        return self.current_track

    @property
    def is_playing(self):
        return self.playing

    @property
    def is_paused(self):
        return self.paused

    @property
    def volume(self):
        return self.player_volume

    @property
    def loop_mode(self):
        return self.mode

    async def enqueue(self, track):
        self.calls.append("enqueue")
        self.tracks.append(track)
        return len(self.tracks)

    async def start(self):
        self.calls.append("start")
        self.current_track = self.tracks.pop(0)
        self.playing = True

    async def set_paused(self, paused):
        self.calls.append("set_paused")
        self.paused = paused

    async def skip(self):
        self.calls.append("skip")
        self.current_track = self.tracks.pop(0) if self.tracks else None

    async def set_volume(self, volume):
        self.calls.append("set_volume")
        self.player_volume = volume

    async def set_loop_mode(self, mode):
        self.calls.append("set_loop_mode")
        self.mode = mode

    async def shuffle(self):
        self.calls.append("shuffle")
        random.shuffle(self.tracks)

    async def remove_at(self, index):
        self.calls.append("remove_at")
        return self.tracks.pop(index)

    async def clear(self):
        self.calls.append("clear")
        count = len(self.tracks)
        self.tracks.clear()
        return count

    async def destroy(self):
        self.calls.append("destroy")
        self.tracks.clear()
        self.current_track = None
        self.playing = False
        self.destroyed = True


class FakeAudioClient(AudioClient):
    def __init__(self):
        self.created: list[FakePlaybackSession] = []
        self.fail_with: Exception | None = None

    async def connect(self):
        pass

    async def close(self):
        pass

    async def create_session(self, guild_id, voice_channel_id, text_channel_id):
        if self.fail_with is not None:
            raise self.fail_with
        session = FakePlaybackSession(
            guild_id=guild_id,
            voice_channel_id=voice_channel_id,
            text_channel_id=text_channel_id,
        )
        self.created.append(session)
        return session


class FakeSearchBackend(SearchBackend):
    def __init__(self, result: ResolveResult | None = None):
        self.result = result or ResolveResult.empty()
        self.fail_with: Exception | None = None
        self.queries: list[str] = []

    async def resolve(self, query):
        self.queries.append(query)
        if self.fail_with is not None:
            raise self.fail_with
        return self.result


class FakeNotifier(Notifier):
    def __init__(self):
        self.sent: list[tuple[int, object]] = []

    async def send(self, channel_id, reply):
        self.sent.append((channel_id, reply))


# ============================================================================
# Domain Fixtures
# ============================================================================


@pytest.fixture
def make_track():
    """Factory for tracks with distinct titles."""

    def _make(title="Test Track", **kwargs):
        kwargs.setdefault("uri", f"https://example.com/{title.replace(' ', '-').lower()}")
        kwargs.setdefault("author", "Test Artist")
        kwargs.setdefault("duration_seconds", 180)
        kwargs.setdefault("identifier", title.lower())
        return Track(title=title, **kwargs)

    return _make


@pytest.fixture
def sample_track(make_track):
    return make_track("Test Track")


@pytest.fixture
def search_result(sample_track):
    return ResolveResult(load_type=LoadType.SEARCH, tracks=(sample_track,))


# ============================================================================
# Application Fixtures
# ============================================================================


@pytest.fixture
def audio_client():
    return FakeAudioClient()


@pytest.fixture
def search_backend():
    return FakeSearchBackend()


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def formatter():
    from discord_lavalink_bot.application.services.reply_formatter import ReplyFormatter

    return ReplyFormatter(prefix="!")


@pytest.fixture
def session_manager(audio_client):
    from discord_lavalink_bot.application.services.session_manager import SessionManager

    return SessionManager(audio_client=audio_client)


@pytest.fixture
def active_session(session_manager):
    """Register a playing session for GUILD_ID and return it."""

    async def _create():
        session = await session_manager.get_or_create(
            GUILD_ID, voice_channel_id=VOICE_CHANNEL_ID, text_channel_id=TEXT_CHANNEL_ID
        )
        return session

    return _create


@pytest.fixture
def handler_deps(session_manager, formatter):
    return {"session_manager": session_manager, "formatter": formatter}


@pytest.fixture
def router(session_manager, search_backend, formatter, notifier):
    from discord_lavalink_bot.application.commands.router import CommandRouter

    return CommandRouter(
        prefix="!",
        session_manager=session_manager,
        search_backend=search_backend,
        formatter=formatter,
        notifier=notifier,
    )


@pytest.fixture
def make_message():
    """Factory for inbound messages from a user sitting in voice."""

    def _make(content, *, voice=True, **kwargs):
        kwargs.setdefault("guild_id", GUILD_ID)
        kwargs.setdefault("channel_id", TEXT_CHANNEL_ID)
        kwargs.setdefault("author_id", USER_ID)
        kwargs.setdefault("author_name", "Tester")
        kwargs.setdefault("author_voice_channel_id", VOICE_CHANNEL_ID if voice else None)
        return IncomingMessage(content=content, **kwargs)

    return _make


@pytest.fixture
def make_command():
    """Factory for guild commands with the author in voice."""

    def _make(*args, voice=True):
        return GuildCommand(
            guild_id=GUILD_ID,
            channel_id=TEXT_CHANNEL_ID,
            user_id=USER_ID,
            user_name="Tester",
            voice_channel_id=VOICE_CHANNEL_ID if voice else None,
            args=tuple(args),
        )

    return _make
