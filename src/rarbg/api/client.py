"""torrentapi.org client: list and search torrents with managed tokens."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any

from rarbg.api.interfaces import Transport
from rarbg.api.params import DEFAULT_PARAMS, ensure_flat_mapping, merge_params, normalize_imdb_id
from rarbg.api.responses import classify_response
from rarbg.api.token import TokenManager
from rarbg.api.transport import HttpxTransport
from rarbg.config import Settings, get_settings
from rarbg.shared.enums import Mode, TokenState

logger = logging.getLogger(__name__)

# API docs: https://torrentapi.org/apidocs_v2.txt


class RarbgClient:
    """Blocking client for the torrentapi ``pubapi_v2.php`` endpoint.

    Every call makes sure a valid token is held, merges the default,
    caller and mode parameters, and returns the ``torrent_results`` list.

    An instance owns its token and is meant for one thread at a time;
    callers sharing it across threads must serialize access themselves.
    """

    def __init__(
        self,
        default_params: dict[str, Any] | None = None,
        *,
        settings: Settings | None = None,
        transport: Transport | None = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._settings = settings or get_settings()
        self._transport = transport or HttpxTransport(
            timeout=self._settings.timeout,
            user_agent=self._settings.user_agent,
        )
        self._default_params = {
            **DEFAULT_PARAMS,
            **self._settings.default_params,
            **ensure_flat_mapping(default_params, name="default_params"),
        }
        self._tokens = TokenManager(
            self._transport,
            self._settings.api_endpoint,
            clock=clock,
            sleep=sleep,
        )

    @property
    def default_params(self) -> dict[str, Any]:
        return self._default_params

    @default_params.setter
    def default_params(self, params: dict[str, Any]) -> None:
        self._default_params = ensure_flat_mapping(params, name="default_params")

    @property
    def tokens(self) -> TokenManager:
        return self._tokens

    @property
    def token_state(self) -> TokenState:
        return self._tokens.state

    def list(self, overrides: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        """List the latest torrents."""
        return self._call({"mode": Mode.LIST.value}, overrides)

    def search_string(self, text: str, overrides: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        """Search torrents by literal name.

        Raises:
            ApplicationError: If nothing matches ("No results found").
        """
        return self._call({"mode": Mode.SEARCH.value, "search_string": text}, overrides)

    def search_imdb(self, imdb_id: str | int, overrides: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        """Search by IMDb ID; ``123456`` and ``tt123456`` are equivalent."""
        return self._call({"mode": Mode.SEARCH.value, "search_imdb": normalize_imdb_id(imdb_id)}, overrides)

    def search_tvdb(self, tvdb_id: str | int, overrides: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        """Search by TheTVDB ID."""
        return self._call({"mode": Mode.SEARCH.value, "search_tvdb": tvdb_id}, overrides)

    def search_themoviedb(self, tmdb_id: str | int, overrides: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        """Search by The Movie Database ID."""
        return self._call({"mode": Mode.SEARCH.value, "search_themoviedb": tmdb_id}, overrides)

    def _call(self, mode_params: dict[str, Any], overrides: dict[str, Any] | None) -> list[dict[str, Any]]:
        """Run one authenticated request.

        Raises:
            UsageError: If ``overrides`` is not a flat mapping.
            TransportError: On a non-success HTTP status.
            ApplicationError: If the service reports an error.
        """
        overrides = ensure_flat_mapping(overrides, name="overrides")
        token = self._tokens.ensure_valid_token()

        params = merge_params(
            self._default_params,
            overrides,
            mode_params,
            app_id=self._settings.app_id,
            token=token,
        )
        resp = self._transport.get(self._settings.api_endpoint, params)
        results = classify_response(resp)

        logger.info("torrentapi %s returned %d results", mode_params["mode"], len(results))
        return results
