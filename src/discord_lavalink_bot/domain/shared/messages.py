"""Centralized message constants for error messages, log templates, and user feedback."""

from __future__ import annotations


class ErrorMessages:
    """Error messages for exceptions and validation failures."""

    # Settings Validation Errors
    INVALID_LOG_LEVEL = "Invalid log level: {level}. Must be one of {valid_levels}"
    NO_LAVALINK_NODES = "At least one Lavalink node must be configured"
    DUPLICATE_NODE_NAMES = "Lavalink node names must be unique"

    # External Services
    NODE_UNAVAILABLE = "No Lavalink node is available"
    SEARCH_FAILED = "Search failed for {query!r}: {error}"
    VOICE_CONNECT_FAILED = "Could not connect to voice channel {channel_id}: {error}"
    VOICE_CHANNEL_NOT_FOUND = "Voice channel {channel_id} not found"
    PLAYER_CALL_FAILED = "Player call '{operation}' failed in guild {guild_id}: {error}"
    SPOTIFY_LOOKUP_FAILED = "Spotify lookup failed for {url}: {error}"

    # Authentication/Security Errors
    DISCORD_TOKEN_REQUIRED = (
        "No bot token found. Set DISCORD__TOKEN (or DISCORD__BOT_TOKEN) in the environment or .env"
    )
    BOT_NOT_INITIALIZED = "Bot not initialized. Call set_bot() first."
    CONTAINER_NOT_FOUND = "Container not found on bot instance"


class LogTemplates:
    """Log message templates for structured logging.

    Use these with logger.info(), logger.error(), etc. and pass values as parameters
    for proper log formatting and structured logging support.
    """

    # Command Dispatch
    COMMAND_RECEIVED = "Command '%s' from user %s in guild %s (args=%r)"
    COMMAND_IGNORED_UNKNOWN = "Ignoring unknown command '%s' in guild %s"
    COMMAND_REFUSED_NO_VOICE = "Refused '%s' from user %s in guild %s: not in a voice channel"
    COMMAND_EXTERNAL_FAILURE = "External service failure handling '%s' in guild %s: %s"
    COMMAND_UNEXPECTED_ERROR = "Unexpected error handling '%s' in guild %s"
    COMMAND_REPLY_FAILED = "Failed to send reply for '%s' in guild %s: %r"

    # Playback Operations
    PLAYBACK_STARTED = "Started playback in guild %s"
    PLAYBACK_PAUSED = "Paused playback in guild %s"
    PLAYBACK_RESUMED = "Resumed playback in guild %s"
    PLAYBACK_SKIPPED = "Skipped '%s' in guild %s"
    PLAYBACK_VOLUME_SET = "Volume set to %s in guild %s"
    PLAYBACK_RESOLVE_FAILED = "Failed to resolve %r in guild %s: %s"

    # Queue Operations
    QUEUE_ENQUEUED = "Enqueued '%s' at position %s in guild %s"
    QUEUE_PLAYLIST_ENQUEUED = "Enqueued playlist '%s' (%s tracks) in guild %s"
    QUEUE_REMOVED = "Removed '%s' from queue in guild %s"
    QUEUE_CLEARED = "Cleared %s tracks from queue in guild %s"
    QUEUE_SHUFFLED = "Shuffled queue in guild %s"
    LOOP_MODE_CHANGED = "Loop mode changed to %s in guild %s"

    # Session Lifecycle
    SESSION_CREATED = "Created session for guild %s (voice=%s, text=%s)"
    SESSION_REUSED = "Reusing existing player for guild %s"
    SESSION_DESTROYED = "Destroyed session for guild %s"
    SESSION_DESTROY_FAILED = "Error while destroying session for guild %s: %r"
    SESSION_NOT_FOUND = "No session found for guild %s"

    # Lavalink Nodes
    NODE_CONNECTING = "Connecting %d Lavalink node(s)"
    NODE_CONNECT_FAILED = "Failed to connect Lavalink node(s)"
    NODE_CONNECTED = "Lavalink node '%s' connected (resumed=%s)"
    NODE_ERROR = "Lavalink node '%s' error: %s"
    NODES_CLOSED = "Lavalink pool closed"

    # Search
    SEARCH_NO_MATCH = "No match for %r"
    SPOTIFY_ENABLED = "Spotify search backend enabled (playlist limit=%d)"
    SPOTIFY_ENTRY_SKIPPED = "Spotify entry %r resolved to nothing, skipping"

    # Event Relay
    RELAY_STARTED = "Event relay started"
    RELAY_STOPPED = "Event relay stopped"
    RELAY_DROPPED = "Event relay queue full, dropping %s"
    RELAY_HANDLER_FAILED = "Event relay failed handling %s"
    RELAY_NO_CHANNEL = "No text channel bound for guild %s, dropping %s"
    RELAY_QUEUE_END_NO_SESSION = "Queue end for guild %s without a session, ignoring"
    RELAY_QUEUE_END_STALE = "Queue end for guild %s arrived after playback resumed, ignoring"

    # Notifier
    NOTIFIER_CHANNEL_NOT_FOUND = "Channel %s not found or not messageable"

    # Health Endpoint
    HEALTH_LISTENING = "Health endpoint listening on http://%s:%s"
    HEALTH_STOPPED = "Health endpoint stopped"
    HEALTH_START_FAILED = "Could not start health endpoint on %s:%s: %s"
    HEALTH_STOP_FAILED = "Failed stopping health endpoint: %r"

    # Process-level Faults
    UNHANDLED_TASK_EXCEPTION = "Unhandled exception in background task: %s"

    # Supervisor
    SUPERVISOR_STARTING = "Starting bot process: %s"
    SUPERVISOR_EXITED = "Bot process exited with code %s"
    SUPERVISOR_RESTARTING = "Restarting in %.1fs (restart %d/%s)"
    SUPERVISOR_GIVING_UP = "Restart limit reached (%d), giving up"
    SUPERVISOR_BAD_LIMIT = "--max-restarts must be >= 0"

    # Application Lifecycle
    BOT_STARTING = "Starting Discord Lavalink Bot in %s mode"
    BOT_NODES_CONFIGURED = "Lavalink nodes: %s"
    SETTINGS_INVALID = "Invalid configuration:\n%s"
    LOGGING_CONFIG_UNUSABLE = "Could not load %s (%s), falling back to basic config"
    BOT_CONTAINER_INIT_FAILED = "Failed to initialize container: %s"
    BOT_STOPPED = "Bot stopped successfully"
    BOT_KEYBOARD_INTERRUPT = "Received keyboard interrupt, shutting down..."
    BOT_FATAL_ERROR = "Fatal error: %s"
    BOT_SHUTTING_DOWN = "Shutting down bot..."
    BOT_SIGNAL_RECEIVED = "Received %s, shutting down"
    BOT_SHUTDOWN_TIMEOUT = "Graceful shutdown timed out after %ss"
    BOT_CONTAINER_SHUTDOWN_ERROR = "Error during container shutdown: %s"
    BOT_READY = "Bot ready as %s (%s) in %d guilds"

    # Bot Cog Management
    BOT_COG_LOAD_FAILED = "Failed to load cog %s: %s"
    BOT_COGS_LOADED_SUMMARY = "Loaded %d/%d cogs"


class DiscordUIMessages:
    """User-facing Discord messages and responses.

    These strings are shown directly to users in replies.
    Keep them concise, friendly, and include appropriate emoji.
    """

    # Precondition Errors
    STATE_NEED_TO_BE_IN_VOICE = "You must be in a voice channel!"
    STATE_NOTHING_PLAYING = "Nothing is playing!"
    STATE_NOTHING_CURRENTLY_PLAYING = "Nothing is currently playing!"
    STATE_NO_ACTIVE_PLAYER = "No active player found!"
    STATE_NO_MORE_TRACKS = "No more tracks in queue!"
    STATE_QUEUE_EMPTY = "Queue is empty!"
    STATE_QUEUE_ALREADY_EMPTY = "Queue is already empty!"
    STATE_NOT_ENOUGH_TRACKS_TO_SHUFFLE = "Not enough tracks to shuffle!"
    STATE_ALREADY_PAUSED = "Player is already paused!"
    STATE_ALREADY_PLAYING = "Player is already playing!"

    # Input Errors
    ERROR_QUERY_REQUIRED = "Please provide a search query!"
    ERROR_NO_RESULTS = "No results found! Try a different search term."
    ERROR_VOLUME_RANGE = "Volume must be 0-100!"
    ERROR_POSITION_RANGE = "Provide a position between 1 and {length}"

    # External Failures
    ERROR_PLAY_FAILED = "Error while trying to play the track. Try again later."
    ERROR_TRY_AGAIN_LATER = "The audio service is unavailable right now. Try again later."
    ERROR_UNEXPECTED = "An unexpected error occurred while handling that command."

    # Action Messages
    ACTION_SKIPPED = "⏭️ Skipped the current track!"
    ACTION_STOPPED = "⏹️ Stopped music and cleared queue!"
    ACTION_PAUSED = "⏸️ Paused the music!"
    ACTION_RESUMED = "▶️ Resumed the music!"
    ACTION_VOLUME_SET = "🔊 Volume set to {volume}%"
    ACTION_SHUFFLED = "🔀 Queue shuffled!"
    ACTION_LOOP_ENABLED = "🔁 Enabled loop mode!"
    ACTION_LOOP_DISABLED = "➡️ Disabled loop mode!"
    ACTION_TRACK_REMOVED = "🗑️ Removed **{track_title}** from the queue!"
    ACTION_QUEUE_CLEARED = "🗑️ Cleared the queue!"
    ACTION_ADDED_TO_QUEUE = "Added **{track_title}** to the queue (position {position})."
    ACTION_ADDED_PLAYLIST = "Added **{count}** tracks from **{playlist_name}** to the queue."
    ACTION_QUEUE_ENDED = "Queue ended. Leaving the voice channel."

    # Embed Titles
    EMBED_NOW_PLAYING = "🎵 Now Playing"
    EMBED_ADDED_TO_QUEUE = "✅ Added to Queue"
    EMBED_ADDED_PLAYLIST = "📃 Playlist Added"
    EMBED_QUEUE = "📋 Queue ({total_tracks} tracks)"
    EMBED_PLAYER_STATUS = "🎛️ Player Status"
    EMBED_HELP = "📖 Commands"
    EMBED_QUEUE_ENDED = "🏁 Queue Ended"
    EMBED_ERROR = "❌ Error"

    # Embed Field Labels
    FIELD_NOW_PLAYING = "Now Playing"
    FIELD_UP_NEXT = "Up Next"
    FIELD_AUTHOR = "Author"
    FIELD_DURATION = "Duration"
    FIELD_REQUESTED_BY = "Requested by"
    FIELD_STATE = "State"
    FIELD_VOLUME = "Volume"
    FIELD_LOOP = "Loop"
    FIELD_QUEUE_LENGTH = "Queue"
    FIELD_CURRENT_TRACK = "Current Track"

    # Status Values
    STATUS_PLAYING = "▶️ Playing"
    STATUS_PAUSED = "⏸️ Paused"
    STATUS_IDLE = "⏹️ Idle"

    QUEUE_MORE_TRACKS = "...and {count} more"
    UNKNOWN_REQUESTER = "Unknown"
    NOTHING = "Nothing"
