# ruff: noqa: N999
"""
Domain Layer

Contains pure business logic organized by bounded contexts:
- shared/: Constrained types, message catalogs and exceptions
- music/: Tracks, search results and playback lifecycle notifications
"""

from discord_lavalink_bot.domain.shared.exceptions import DomainError

__all__ = [
    "DomainError",
]
