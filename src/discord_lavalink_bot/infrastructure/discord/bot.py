"""The Discord client: intents, cog loading and process lifetime."""

from __future__ import annotations

import asyncio
import logging
import signal
from typing import TYPE_CHECKING

import discord
from discord.ext import commands

from discord_lavalink_bot.domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from ...config.container import Container
    from ...config.settings import Settings

logger = logging.getLogger(__name__)

COGS = (
    "discord_lavalink_bot.infrastructure.discord.cogs.command_cog",
    "discord_lavalink_bot.infrastructure.discord.cogs.lifecycle_cog",
)

SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def build_intents() -> discord.Intents:
    """Guild messages with content plus voice states; no privileged member intent."""
    intents = discord.Intents.default()
    intents.guilds = True
    intents.voice_states = True
    intents.message_content = True
    return intents


class MusicBot(commands.Bot):
    """Client that owns the container's lifetime.

    The container is initialised (node connection, relay, health endpoint)
    before any cog is loaded, and shut down before the gateway closes.
    """

    def __init__(self, container: Container, settings: Settings, **kwargs) -> None:
        super().__init__(
            command_prefix=settings.discord.command_prefix,
            intents=build_intents(),
            help_command=None,
            **kwargs,
        )
        self.container = container
        self.settings = settings
        self._shutdown_task: asyncio.Task[None] | None = None
        container.set_bot(self)

    async def setup_hook(self) -> None:
        try:
            await self.container.initialize()
        except Exception as e:
            logger.exception(LogTemplates.BOT_CONTAINER_INIT_FAILED, e)
            raise

        await self._load_cogs()

    async def _load_cogs(self) -> None:
        failed: list[str] = []
        for extension in COGS:
            try:
                await self.load_extension(extension)
            except Exception as e:
                logger.exception(LogTemplates.BOT_COG_LOAD_FAILED, extension, e)
                failed.append(extension)

        logger.info(LogTemplates.BOT_COGS_LOADED_SUMMARY, len(COGS) - len(failed), len(COGS))

    async def on_message(self, message: discord.Message) -> None:
        # CommandCog routes messages; the commands extension stays unused.
        return

    async def on_ready(self) -> None:
        logger.info(LogTemplates.BOT_READY, self.user, self.user.id, len(self.guilds))  # type: ignore[union-attr]

        await self.change_presence(
            activity=discord.Activity(
                type=discord.ActivityType.listening,
                name=f"{self.settings.discord.command_prefix}help",
            )
        )

    async def close(self) -> None:
        logger.info(LogTemplates.BOT_SHUTTING_DOWN)
        try:
            await self.container.shutdown()
        except Exception as e:
            logger.warning(LogTemplates.BOT_CONTAINER_SHUTDOWN_ERROR, e)
        await super().close()

    def run_forever(self, token: str, *, shutdown_timeout: float = 30.0) -> None:
        """Run until the gateway closes or SIGINT/SIGTERM arrives."""
        asyncio.run(self._serve(token, shutdown_timeout))

    async def _serve(self, token: str, shutdown_timeout: float) -> None:
        loop = asyncio.get_running_loop()
        loop.set_exception_handler(log_orphan_task_exception)
        for sig in SHUTDOWN_SIGNALS:
            loop.add_signal_handler(sig, self.request_shutdown, sig, shutdown_timeout)

        async with self:
            await self.start(token)

    def request_shutdown(self, sig: signal.Signals, timeout: float) -> None:
        """Schedule one bounded close; repeated signals are ignored."""
        if self._shutdown_task is not None:
            return
        logger.info(LogTemplates.BOT_SIGNAL_RECEIVED, sig.name)
        self._shutdown_task = asyncio.get_running_loop().create_task(self._close_within(timeout))

    async def _close_within(self, timeout: float) -> None:
        try:
            await asyncio.wait_for(self.close(), timeout=timeout)
        except TimeoutError:
            logger.warning(LogTemplates.BOT_SHUTDOWN_TIMEOUT, timeout)


def log_orphan_task_exception(loop: asyncio.AbstractEventLoop, context: dict) -> None:
    """Event loop exception handler: log faults from unawaited tasks and keep running."""
    message = context.get("message", "")
    exc = context.get("exception")
    exc_info = (type(exc), exc, exc.__traceback__) if exc is not None else None
    logger.error(LogTemplates.UNHANDLED_TASK_EXCEPTION, message, exc_info=exc_info)


def create_bot(container: Container, settings: Settings) -> MusicBot:
    return MusicBot(container=container, settings=settings)
