"""Lifecycle notifications emitted by the audio layer."""

from __future__ import annotations

from datetime import datetime
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from discord_lavalink_bot.domain.music.entities import Track
from discord_lavalink_bot.domain.shared.datetime_utils import utcnow
from discord_lavalink_bot.domain.shared.types import DiscordSnowflake, NonEmptyStr


class LifecycleNotification(BaseModel):
    """Base class for all lifecycle notifications."""

    model_config = ConfigDict(frozen=True)

    event_id: NonEmptyStr = Field(default_factory=lambda: str(uuid4()))
    occurred_at: datetime = Field(default_factory=utcnow)


# === Node Notifications ===


class NodeConnected(LifecycleNotification):
    node_name: str
    resumed: bool = False


class NodeErrored(LifecycleNotification):
    node_name: str
    error: str


# === Session Notifications ===


class TrackStarted(LifecycleNotification):
    guild_id: DiscordSnowflake
    track: Track


class QueueEnded(LifecycleNotification):
    guild_id: DiscordSnowflake
