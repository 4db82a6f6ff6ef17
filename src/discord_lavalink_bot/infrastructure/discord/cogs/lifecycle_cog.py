"""Wavelink event listeners that feed lifecycle notifications to the event relay."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import discord
import wavelink
from discord.ext import commands

from discord_lavalink_bot.domain.music.events import (
    NodeConnected,
    NodeErrored,
    QueueEnded,
    TrackStarted,
)
from discord_lavalink_bot.domain.shared.messages import ErrorMessages, LogTemplates

from ...lavalink.wavelink_client import track_from_playable
from ..guards.voice_guards import is_bot_disconnect

if TYPE_CHECKING:
    from ....config.container import Container

logger = logging.getLogger(__name__)

# Track end reasons after which the player will not continue on its own.
QUEUE_END_REASONS = frozenset({"finished", "loadfailed"})


class LifecycleCog(commands.Cog):
    def __init__(self, bot: commands.Bot, container: Container) -> None:
        self.bot = bot
        self.container = container

    @property
    def _relay(self):
        return self.container.event_relay

    # === Node events ===

    @commands.Cog.listener()
    async def on_wavelink_node_ready(self, payload: wavelink.NodeReadyEventPayload) -> None:
        self._relay.publish(
            NodeConnected(node_name=payload.node.identifier, resumed=bool(payload.resumed))
        )

    @commands.Cog.listener()
    async def on_wavelink_node_closed(
        self, node: wavelink.Node, disconnected: list[wavelink.Player]
    ) -> None:
        self._relay.publish(NodeErrored(node_name=node.identifier, error="connection closed"))

        sessions = self.container.session_manager
        for player in disconnected:
            if player.guild is not None:
                sessions.forget(player.guild.id)

    # === Track events ===

    @commands.Cog.listener()
    async def on_wavelink_track_start(self, payload: wavelink.TrackStartEventPayload) -> None:
        player = payload.player
        if player is None or player.guild is None:
            return

        playable = payload.original or payload.track
        self._relay.publish(
            TrackStarted(guild_id=player.guild.id, track=track_from_playable(playable))
        )

    @commands.Cog.listener()
    async def on_wavelink_track_exception(
        self, payload: wavelink.TrackExceptionEventPayload
    ) -> None:
        player = payload.player
        node_name = player.node.identifier if player is not None else "unknown"
        self._relay.publish(NodeErrored(node_name=node_name, error=str(payload.exception)))

    @commands.Cog.listener()
    async def on_wavelink_track_end(self, payload: wavelink.TrackEndEventPayload) -> None:
        player = payload.player
        if player is None or player.guild is None:
            return

        if str(payload.reason).lower() not in QUEUE_END_REASONS:
            return
        if len(player.queue) > 0 or player.queue.mode != wavelink.QueueMode.normal:
            return

        self._relay.publish(QueueEnded(guild_id=player.guild.id))

    # === Voice events ===

    @commands.Cog.listener()
    async def on_voice_state_update(
        self,
        member: discord.Member,
        before: discord.VoiceState,
        after: discord.VoiceState,
    ) -> None:
        if is_bot_disconnect(member, before, after, self.bot.user):
            if self.container.session_manager.forget(member.guild.id) is not None:
                logger.info(LogTemplates.SESSION_DESTROYED, member.guild.id)


async def setup(bot: commands.Bot) -> None:
    container = getattr(bot, "container", None)
    if container is None:
        raise RuntimeError(ErrorMessages.CONTAINER_NOT_FOUND)

    await bot.add_cog(LifecycleCog(bot, container))
