"""Hierarchical exception types for the torrentapi client."""

from __future__ import annotations


class RarbgError(Exception):
    """Base exception for all client errors."""


# ── Caller ──────────────────────────────────────────────────────


class UsageError(RarbgError, TypeError):
    """Caller-supplied parameters are not a flat key/value mapping."""


# ── Remote service ──────────────────────────────────────────────


class TransportError(RarbgError):
    """The service answered with a non-success HTTP status, or never answered."""

    def __init__(self, reason: str, status_code: int | None = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.status_code = status_code


class ApplicationError(RarbgError):
    """The service reported an error in an otherwise successful response."""

    def __init__(self, message: str, error_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
