"""Errors raised by the AI layer.

Each exception carries a stable ``error_code`` so fallback log lines can be
grouped without parsing messages. None of these reach the HTTP caller: the
pipelines catch them and substitute a deterministic fallback.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class AIServiceError(Exception):
    """Base class for AI layer errors."""

    message: str
    error_code: str

    def __str__(self) -> str:
        return f"{self.error_code}: {self.message}"


class ProviderError(AIServiceError):
    """The completion provider could not produce a reply.

    Network, timeout, auth and rate-limit failures all land here; the
    original exception is kept as ``__cause__``.
    """

    def __init__(self, message: str = "Completion provider call failed") -> None:
        super().__init__(message=message, error_code="provider_error")
