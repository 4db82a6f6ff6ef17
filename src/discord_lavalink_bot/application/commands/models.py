"""Inbound message and parsed command models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from discord_lavalink_bot.domain.shared.types import DiscordSnowflake


class IncomingMessage(BaseModel):
    """Platform-neutral view of one chat message."""

    model_config = ConfigDict(frozen=True)

    guild_id: DiscordSnowflake | None
    channel_id: DiscordSnowflake
    author_id: DiscordSnowflake
    author_name: str
    author_is_bot: bool = False
    author_voice_channel_id: DiscordSnowflake | None = None
    content: str = ""


class ParsedCommand(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    args: tuple[str, ...] = ()

    @property
    def argument_text(self) -> str:
        return " ".join(self.args).strip()


class GuildCommand(BaseModel):
    """A parsed command bound to the guild, author and channel it came from."""

    model_config = ConfigDict(frozen=True)

    guild_id: DiscordSnowflake
    channel_id: DiscordSnowflake
    user_id: DiscordSnowflake
    user_name: str
    voice_channel_id: DiscordSnowflake | None = None
    args: tuple[str, ...] = ()

    @classmethod
    def from_message(cls, message: IncomingMessage, parsed: ParsedCommand) -> GuildCommand:
        return cls(
            guild_id=message.guild_id,
            channel_id=message.channel_id,
            user_id=message.author_id,
            user_name=message.author_name,
            voice_channel_id=message.author_voice_channel_id,
            args=parsed.args,
        )

    @property
    def first_arg(self) -> str | None:
        return self.args[0] if self.args else None

    @property
    def argument_text(self) -> str:
        return " ".join(self.args).strip()
