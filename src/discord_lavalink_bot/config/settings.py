"""Application Settings and Configuration

Pydantic-based settings management using environment variables.
Settings are loaded from environment variables with support for .env files,
type validation, and sensible defaults. All settings are frozen and immutable
after initialization.
"""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Any, Literal

from pydantic import (
    AliasChoices,
    BaseModel,
    Field,
    SecretStr,
    field_validator,
    model_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.shared.constants import LogLevels
from ..domain.shared.messages import ErrorMessages
from ..domain.shared.types import CommandPrefixStr, PortNumber


class DiscordSettings(BaseModel):
    """Discord bot configuration."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    token: SecretStr = Field(
        default=SecretStr(""), validation_alias=AliasChoices("token", "bot_token", "discord_token")
    )
    command_prefix: CommandPrefixStr = Field(
        default="!",
        validation_alias=AliasChoices("command_prefix", "prefix"),
    )


class LavalinkNodeSettings(BaseModel):
    """Connection parameters for one Lavalink node."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(
        default="Main Node", min_length=1, validation_alias=AliasChoices("name", "identifier")
    )
    host: str = Field(default="lavalink.jirayu.net", min_length=1)
    port: PortNumber = 13592
    password: SecretStr = SecretStr("youshallnotpass")
    secure: bool = False

    @property
    def uri(self) -> str:
        scheme = "https" if self.secure else "http"
        return f"{scheme}://{self.host}:{self.port}"


_SINGLE_NODE_KEYS = ("name", "identifier", "host", "port", "password", "secure")


class LavalinkSettings(BaseModel):
    """Lavalink node pool and search configuration.

    Either ``LAVALINK__NODES`` (a JSON list) or the single-node shorthand
    ``LAVALINK__HOST`` / ``__PORT`` / ``__PASSWORD`` / ``__SECURE``.
    """

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    nodes: tuple[LavalinkNodeSettings, ...] = Field(
        default_factory=lambda: (LavalinkNodeSettings(),)
    )
    search_source: str = Field(
        default="ytmsearch",
        min_length=1,
        validation_alias=AliasChoices("search_source", "default_search_platform"),
    )
    self_deaf: bool = True

    @model_validator(mode="before")
    @classmethod
    def expand_single_node(cls, data: Any) -> Any:
        """Fold single-node shorthand keys into ``nodes``."""
        if not isinstance(data, dict):
            return data

        shorthand = {k: data[k] for k in _SINGLE_NODE_KEYS if k in data}
        if not shorthand:
            return data

        rest = {k: v for k, v in data.items() if k not in _SINGLE_NODE_KEYS}
        if "nodes" not in rest:
            rest["nodes"] = [shorthand]
        return rest

    @field_validator("nodes", mode="before")
    @classmethod
    def parse_nodes(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = json.loads(v)
        if isinstance(v, dict):
            v = [v]
        return v

    @field_validator("nodes")
    @classmethod
    def validate_nodes(
        cls, v: tuple[LavalinkNodeSettings, ...]
    ) -> tuple[LavalinkNodeSettings, ...]:
        if not v:
            raise ValueError(ErrorMessages.NO_LAVALINK_NODES)
        names = [node.name for node in v]
        if len(names) != len(set(names)):
            raise ValueError(ErrorMessages.DUPLICATE_NODE_NAMES)
        return v


class SpotifySettings(BaseModel):
    """Optional Spotify Web API credentials for link expansion."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    client_id: str = Field(
        default="", validation_alias=AliasChoices("client_id", "spotify_client_id")
    )
    client_secret: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=AliasChoices("client_secret", "spotify_client_secret"),
    )
    playlist_limit: int = Field(default=100, ge=1, le=1000)

    @property
    def enabled(self) -> bool:
        return bool(self.client_id and self.client_secret.get_secret_value())


class HealthSettings(BaseModel):
    """Liveness HTTP endpoint configuration."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    enabled: bool = True
    host: str = "0.0.0.0"
    port: PortNumber = 3000


class Settings(BaseSettings):
    """Application settings container.

    Automatically loads configuration from environment variables.

    Environment variable naming:
    - ENVIRONMENT, LOG_LEVEL (top-level)
    - DISCORD__TOKEN, DISCORD__COMMAND_PREFIX (nested with prefix)
    - BOT_TOKEN or TOKEN, used when DISCORD__TOKEN is unset
    - LAVALINK__NODES (JSON list) or LAVALINK__HOST, LAVALINK__PORT, ...
    - SPOTIFY__CLIENT_ID, SPOTIFY__CLIENT_SECRET
    - HEALTH__PORT, or PORT as set by most hosting platforms
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    environment: Literal["development", "production", "test"] = "development"
    log_level: str = "INFO"
    port: PortNumber | None = Field(default=None, exclude=True)
    bot_token: SecretStr | None = Field(
        default=None, exclude=True, validation_alias=AliasChoices("bot_token", "token")
    )

    discord: DiscordSettings = Field(default_factory=DiscordSettings)
    lavalink: LavalinkSettings = Field(default_factory=LavalinkSettings)
    spotify: SpotifySettings = Field(default_factory=SpotifySettings)
    health: HealthSettings = Field(default_factory=HealthSettings)

    @model_validator(mode="before")
    @classmethod
    def apply_platform_port(cls, data: Any) -> Any:
        """Use a bare ``PORT`` for the health endpoint unless HEALTH__PORT is set."""
        if not isinstance(data, dict) or data.get("port") in (None, ""):
            return data

        health = data.get("health")
        if health is None:
            health = {}
        if isinstance(health, dict) and "port" not in health:
            data = {**data, "health": {**health, "port": data["port"]}}
        return data

    @model_validator(mode="before")
    @classmethod
    def apply_bare_token(cls, data: Any) -> Any:
        """Use a bare ``BOT_TOKEN`` or ``TOKEN`` unless DISCORD__TOKEN is set."""
        if not isinstance(data, dict):
            return data
        token = data.get("bot_token") or data.get("token")
        if token in (None, ""):
            return data

        discord = data.get("discord")
        if discord is None:
            discord = {}
        if isinstance(discord, dict) and not any(
            discord.get(key) for key in ("token", "bot_token", "discord_token")
        ):
            data = {**data, "discord": {**discord, "token": token}}
        return data

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        v_upper = v.upper()
        if v_upper not in LogLevels.ALL:
            raise ValueError(
                ErrorMessages.INVALID_LOG_LEVEL.format(level=v, valid_levels=sorted(LogLevels.ALL))
            )
        return v_upper


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are automatically loaded from:
    1. .env file (if present)
    2. Environment variables
    3. Default values
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
