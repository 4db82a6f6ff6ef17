"""Dependency Injection Container

Manages the application's dependency graph, providing lazy initialization
and lifecycle management for the session manager, audio adapters, relay,
router and health endpoint. Components are created on-demand and cached
for reuse throughout the application.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..domain.shared.messages import ErrorMessages, LogTemplates

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from discord.ext.commands import Bot

    from ..application.commands.router import CommandRouter
    from ..application.interfaces.audio_client import AudioClient, SearchBackend
    from ..application.interfaces.notifier import Notifier
    from ..application.services.event_relay import EventRelay
    from ..application.services.reply_formatter import ReplyFormatter
    from ..application.services.session_manager import SessionManager
    from ..infrastructure.health.health_server import HealthServer
    from .settings import Settings


@dataclass
class Container:
    """Dependency injection container.

    Components are lazily initialized when first accessed.
    """

    settings: Settings
    _bot: Bot | None = None

    # Infrastructure adapters
    _audio_client: AudioClient | None = None
    _search_backend: SearchBackend | None = None
    _notifier: Notifier | None = None
    _health_server: HealthServer | None = None

    # Application services
    _session_manager: SessionManager | None = None
    _reply_formatter: ReplyFormatter | None = None
    _event_relay: EventRelay | None = None
    _command_router: CommandRouter | None = None

    def set_bot(self, bot: Bot) -> None:
        """Set the Discord bot instance."""
        self._bot = bot

    @property
    def bot(self) -> Bot:
        """Get the Discord bot instance."""
        if self._bot is None:
            raise RuntimeError(ErrorMessages.BOT_NOT_INITIALIZED)
        return self._bot

    # === Infrastructure Adapters ===

    @property
    def audio_client(self) -> AudioClient:
        """Get the Lavalink audio client."""
        if self._audio_client is None:
            from ..infrastructure.lavalink.wavelink_client import WavelinkAudioClient

            self._audio_client = WavelinkAudioClient(
                client=self.bot, settings=self.settings.lavalink
            )
        return self._audio_client

    @property
    def search_backend(self) -> SearchBackend:
        """Get the search backend, with Spotify expansion when credentials are set."""
        if self._search_backend is None:
            from ..infrastructure.lavalink.wavelink_client import WavelinkSearchBackend

            backend: SearchBackend = WavelinkSearchBackend(
                source=self.settings.lavalink.search_source
            )

            spotify = self.settings.spotify
            if spotify.enabled:
                from ..infrastructure.lavalink.spotify_search import SpotifySearchBackend

                backend = SpotifySearchBackend.from_credentials(
                    inner=backend,
                    client_id=spotify.client_id,
                    client_secret=spotify.client_secret.get_secret_value(),
                    playlist_limit=spotify.playlist_limit,
                )

            self._search_backend = backend
        return self._search_backend

    @property
    def notifier(self) -> Notifier:
        """Get the Discord channel notifier."""
        if self._notifier is None:
            from ..infrastructure.discord.adapters.channel_notifier import DiscordChannelNotifier

            self._notifier = DiscordChannelNotifier(self.bot)
        return self._notifier

    @property
    def health_server(self) -> HealthServer:
        """Get the liveness HTTP endpoint."""
        if self._health_server is None:
            from ..infrastructure.health.health_server import HealthServer

            self._health_server = HealthServer(
                host=self.settings.health.host, port=self.settings.health.port
            )
        return self._health_server

    # === Application Services ===

    @property
    def session_manager(self) -> SessionManager:
        """Get the guild session manager."""
        if self._session_manager is None:
            from ..application.services.session_manager import SessionManager

            self._session_manager = SessionManager(audio_client=self.audio_client)
        return self._session_manager

    @property
    def reply_formatter(self) -> ReplyFormatter:
        """Get the reply formatter."""
        if self._reply_formatter is None:
            from ..application.services.reply_formatter import ReplyFormatter

            self._reply_formatter = ReplyFormatter(prefix=self.settings.discord.command_prefix)
        return self._reply_formatter

    @property
    def event_relay(self) -> EventRelay:
        """Get the lifecycle event relay."""
        if self._event_relay is None:
            from ..application.services.event_relay import EventRelay

            self._event_relay = EventRelay(
                session_manager=self.session_manager,
                formatter=self.reply_formatter,
                notifier=self.notifier,
            )
        return self._event_relay

    @property
    def command_router(self) -> CommandRouter:
        """Get the chat command router."""
        if self._command_router is None:
            from ..application.commands.router import CommandRouter

            self._command_router = CommandRouter(
                prefix=self.settings.discord.command_prefix,
                session_manager=self.session_manager,
                search_backend=self.search_backend,
                formatter=self.reply_formatter,
                notifier=self.notifier,
            )
        return self._command_router

    # === Lifecycle ===

    async def initialize(self) -> None:
        """Initialize all async resources."""
        self.event_relay.start()

        if self.settings.health.enabled:
            try:
                await self.health_server.start()
            except OSError as exc:
                logger.warning(
                    LogTemplates.HEALTH_START_FAILED,
                    self.settings.health.host,
                    self.settings.health.port,
                    exc,
                )

        await self.audio_client.connect()

    async def shutdown(self) -> None:
        """Shutdown and cleanup all resources."""
        if self._session_manager is not None:
            await self._session_manager.destroy_all()

        if self._event_relay is not None:
            await self._event_relay.stop()

        if self._health_server is not None:
            try:
                await self._health_server.stop()
            except Exception as exc:
                logger.warning(LogTemplates.HEALTH_STOP_FAILED, exc)

        if self._audio_client is not None:
            await self._audio_client.close()


def create_container(settings: Settings) -> Container:
    """Create a new dependency injection container."""
    return Container(settings)
