"""Interfaces for the torrentapi client."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from rarbg.shared.models import TransportResponse


@runtime_checkable
class Transport(Protocol):
    """Protocol for the HTTP collaborator that performs GET requests."""

    def get(self, url: str, params: Mapping[str, Any]) -> TransportResponse:
        """Issue a GET request and return the status and decoded JSON body.

        Args:
            url: Absolute endpoint URL.
            params: Query parameters; encoding is up to the transport.

        Returns:
            The response status, reason phrase and decoded body mapping.
        """
        ...
