"""
Shared Domain Kernel

Contains constrained types, message catalogs and exceptions shared across the package.
"""

from discord_lavalink_bot.domain.shared.exceptions import DomainError, ExternalServiceError

__all__ = [
    "DomainError",
    "ExternalServiceError",
]
