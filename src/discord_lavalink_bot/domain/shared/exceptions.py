"""Base exception classes for domain-level errors."""

from __future__ import annotations


class DomainError(Exception):
    """Base exception for all domain-level errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ExternalServiceError(DomainError):
    """Raised when the audio node, voice gateway or search backend fails."""

    def __init__(self, service: str, message: str) -> None:
        super().__init__(message, code="EXTERNAL_SERVICE_ERROR")
        self.service = service
