"""Authorization token lifecycle for the torrentapi endpoint."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from rarbg.api.interfaces import Transport
from rarbg.api.responses import raise_for_response
from rarbg.shared.enums import TokenState
from rarbg.shared.exceptions import ApplicationError
from rarbg.shared.models import Token

logger = logging.getLogger(__name__)

# Seconds a token is treated as valid after issue.
TOKEN_EXPIRATION = 800
# Token grants and the calls that follow share one rate-limit window.
TOKEN_COOLDOWN = 2


class TokenManager:
    """Acquire, cache and renew the token for a single client instance.

    Not thread-safe: two threads sharing a manager can both see an expired
    token and both request a new one.
    """

    def __init__(
        self,
        transport: Transport,
        endpoint: str,
        *,
        expiration: float = TOKEN_EXPIRATION,
        cooldown: float = TOKEN_COOLDOWN,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._transport = transport
        self._endpoint = endpoint
        self._expiration = expiration
        self._cooldown = cooldown
        self._clock = clock
        self._sleep = sleep
        self._token: Token | None = None

    @property
    def token(self) -> Token | None:
        return self._token

    @property
    def state(self) -> TokenState:
        if self._token is None:
            return TokenState.NO_TOKEN
        if self.is_expired():
            return TokenState.EXPIRED
        return TokenState.VALID

    def is_expired(self) -> bool:
        """Return True when no token is held or the held one is too old."""
        if self._token is None:
            return True
        return self._token.age(self._clock()) >= self._expiration

    def invalidate(self) -> None:
        """Forget the held token so the next call acquires a fresh one."""
        self._token = None

    def ensure_valid_token(self) -> str:
        """Return a usable token value, acquiring one first if necessary.

        Raises:
            TransportError: If the token request returns a non-success status.
            ApplicationError: If the service refuses to issue a token.
        """
        if self.is_expired():
            if self._token is not None:
                logger.debug("token expired after %.0fs, renewing", self._token.age(self._clock()))
            self._acquire()
        assert self._token is not None
        return self._token.value

    def _acquire(self) -> None:
        resp = self._transport.get(self._endpoint, {"get_token": "get_token"})
        raise_for_response(resp)

        value = resp.body.get("token")
        if not isinstance(value, str) or not value:
            raise ApplicationError("token response did not contain a token")

        self._token = Token(value=value, issued_at=self._clock())
        logger.info("acquired torrentapi token %s...", value[:4])
        self._sleep(self._cooldown)
