"""httpx-backed transport for the torrentapi endpoint."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from rarbg.shared.exceptions import TransportError
from rarbg.shared.models import TransportResponse

logger = logging.getLogger(__name__)


class HttpxTransport:
    """Perform blocking GET requests with httpx.

    Implements the ``Transport`` protocol.
    """

    def __init__(self, *, timeout: float = 30.0, user_agent: str = "rarbg-python") -> None:
        self._timeout = timeout
        self._headers = {"User-Agent": user_agent}

    def get(self, url: str, params: Mapping[str, Any]) -> TransportResponse:
        """Send the request and decode the JSON body.

        Raises:
            TransportError: If the request cannot be completed, or a
                successful response carries no JSON object.
        """
        try:
            with httpx.Client(timeout=self._timeout, headers=self._headers) as client:
                resp = client.get(url, params=_encode_params(params))
        except httpx.HTTPError as exc:
            raise TransportError(f"request to {url} failed: {exc!r}") from exc

        logger.debug("GET %s -> %d", url, resp.status_code)

        try:
            body = resp.json()
        except ValueError:
            body = None

        if not isinstance(body, dict):
            if resp.is_success:
                raise TransportError("invalid JSON response", resp.status_code)
            body = {}

        return TransportResponse(
            status_code=resp.status_code,
            reason_phrase=resp.reason_phrase,
            body=body,
        )


def _encode_params(params: Mapping[str, Any]) -> dict[str, str | int | float]:
    """Flatten values into the forms the service parses.

    Lists become ``;``-separated strings (``category=44;45``) and booleans
    become ``1``/``0``.
    """
    encoded: dict[str, str | int | float] = {}
    for key, value in params.items():
        if isinstance(value, (list, tuple)):
            encoded[key] = ";".join(str(_scalar(v)) for v in value)
        else:
            encoded[key] = _scalar(value)
    return encoded


def _scalar(value: Any) -> str | int | float:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float, str)):
        return value
    return str(value)
