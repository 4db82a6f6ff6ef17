"""Centralized constants for limits, UI sizing, and command vocabulary."""

from __future__ import annotations


class LimitConstants:
    """Numeric limits enforced by command validation."""

    MIN_VOLUME = 0
    MAX_VOLUME = 100
    EVENT_RELAY_QUEUE_SIZE = 1000


class UIConstants:
    """Sizing for chat replies."""

    TITLE_TRUNCATION = 90
    QUEUE_PREVIEW_LIMIT = 10
    EMBED_FIELD_LIMIT = 1024


class LogLevels:
    """Valid logging level names."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    ALL = frozenset({DEBUG, INFO, WARNING, ERROR, CRITICAL})


class CommandNames:
    """Fixed chat command vocabulary."""

    PLAY = "play"
    PAUSE = "pause"
    RESUME = "resume"
    SKIP = "skip"
    STOP = "stop"
    QUEUE = "queue"
    NOW_PLAYING = "nowplaying"
    NOW_PLAYING_ALIAS = "np"
    VOLUME = "volume"
    SHUFFLE = "shuffle"
    LOOP = "loop"
    REMOVE = "remove"
    CLEAR = "clear"
    STATUS = "status"
    HELP = "help"

    ALIASES: dict[str, str] = {NOW_PLAYING_ALIAS: NOW_PLAYING}

    # Commands that require the author to be in a voice channel.
    VOICE_REQUIRED = frozenset(
        {PLAY, SKIP, STOP, PAUSE, RESUME, QUEUE, NOW_PLAYING, VOLUME, SHUFFLE, LOOP, REMOVE, CLEAR}
    )

    # (usage, description) pairs shown by the help command, in display order.
    HELP_ENTRIES: tuple[tuple[str, str], ...] = (
        ("play <query>", "Play a song or playlist"),
        ("pause", "Pause the current track"),
        ("resume", "Resume the current track"),
        ("skip", "Skip the current track"),
        ("stop", "Stop playback and clear queue"),
        ("queue", "Show the current queue"),
        ("nowplaying", "Show current track info"),
        ("volume <0-100>", "Adjust player volume"),
        ("shuffle", "Shuffle the current queue"),
        ("loop", "Toggle queue loop mode"),
        ("remove <position>", "Remove a track from queue"),
        ("clear", "Clear the current queue"),
        ("status", "Show player status"),
        ("help", "Show this help message"),
    )
