#!/usr/bin/env python3
"""Process entry point: load settings, configure logging, run the bot.

Exit codes: 0 after a clean shutdown or Ctrl-C, 1 for bad configuration,
a missing token, or a fatal error escaping the bot.
"""

from __future__ import annotations

import json
import logging
import logging.config
import os
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from discord_lavalink_bot.domain.shared.messages import ErrorMessages, LogTemplates

LOG_CONFIG_ENV = "LOG_CONFIG"
DEFAULT_LOG_CONFIG = Path(__file__).resolve().parents[2] / "logging_config.json"
FALLBACK_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

logger = logging.getLogger(__name__)


def logging_config_path() -> Path:
    """``$LOG_CONFIG`` when set, else logging_config.json at the repository root."""
    override = os.environ.get(LOG_CONFIG_ENV)
    return Path(override) if override else DEFAULT_LOG_CONFIG


def load_logging_config(path: Path) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        config = json.load(f)
    if not isinstance(config, dict):
        raise ValueError("top level must be an object")
    return config


def setup_logging(log_level: str = "INFO") -> None:
    level_name = log_level.upper()
    if not isinstance(logging.getLevelName(level_name), int):
        level_name = "INFO"

    path = logging_config_path()
    try:
        config = load_logging_config(path)
        config.setdefault("root", {})["level"] = level_name
        logging.config.dictConfig(config)
    except (OSError, ValueError, TypeError) as exc:
        # json.JSONDecodeError is a ValueError; dictConfig raises ValueError too.
        logging.basicConfig(level=level_name, format=FALLBACK_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        logger.warning(LogTemplates.LOGGING_CONFIG_UNUSABLE, path, exc)


def main() -> int:
    from discord_lavalink_bot.config.settings import get_settings

    try:
        settings = get_settings()
    except ValidationError as exc:
        setup_logging()
        logger.error(LogTemplates.SETTINGS_INVALID, exc)
        return 1

    setup_logging(settings.log_level)

    token = settings.discord.token.get_secret_value()
    if not token:
        logger.error(ErrorMessages.DISCORD_TOKEN_REQUIRED)
        return 1

    logger.info(LogTemplates.BOT_STARTING, settings.environment)
    logger.info(
        LogTemplates.BOT_NODES_CONFIGURED,
        ", ".join(f"{node.name} ({node.uri})" for node in settings.lavalink.nodes),
    )

    from discord_lavalink_bot.config.container import create_container
    from discord_lavalink_bot.infrastructure.discord.bot import create_bot

    bot = create_bot(create_container(settings), settings)

    try:
        bot.run_forever(token)
    except KeyboardInterrupt:
        logger.info(LogTemplates.BOT_KEYBOARD_INTERRUPT)
    except Exception as e:
        logger.exception(LogTemplates.BOT_FATAL_ERROR, e)
        return 1

    logger.info(LogTemplates.BOT_STOPPED)
    return 0


def cli() -> None:
    """Console script entry point (used by pyproject.toml [project.scripts])."""
    sys.exit(main())


if __name__ == "__main__":
    cli()  # pragma: no cover
