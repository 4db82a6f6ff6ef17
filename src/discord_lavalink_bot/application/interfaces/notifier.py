"""Port interface for sending replies to chat channels."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

from pydantic import BaseModel, ConfigDict

from discord_lavalink_bot.domain.shared.types import DiscordSnowflake


class ReplyKind(Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


class ReplyField(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    value: str
    inline: bool = True


class Reply(BaseModel):
    """Platform-neutral chat reply."""

    model_config = ConfigDict(frozen=True)

    kind: ReplyKind
    description: str = ""
    title: str | None = None
    fields: tuple[ReplyField, ...] = ()
    footer: str | None = None

    @classmethod
    def success(cls, description: str, **kwargs) -> Reply:
        return cls(kind=ReplyKind.SUCCESS, description=description, **kwargs)

    @classmethod
    def error(cls, description: str, **kwargs) -> Reply:
        return cls(kind=ReplyKind.ERROR, description=description, **kwargs)

    @classmethod
    def info(cls, description: str = "", **kwargs) -> Reply:
        return cls(kind=ReplyKind.INFO, description=description, **kwargs)

    @property
    def is_error(self) -> bool:
        return self.kind is ReplyKind.ERROR


class Notifier(ABC):
    """Sends formatted replies to a chat channel."""

    @abstractmethod
    async def send(self, channel_id: DiscordSnowflake, reply: Reply) -> None:
        """Deliver one reply to the channel."""
        ...
