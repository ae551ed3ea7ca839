"""Domain enumerations used across all modules."""

from __future__ import annotations

from enum import Enum, unique


@unique
class Mode(str, Enum):
    """Request modes understood by ``pubapi_v2.php``."""

    LIST = "list"
    SEARCH = "search"


@unique
class TokenState(str, Enum):
    """Lifecycle states of the authorization token held by a client."""

    NO_TOKEN = "no_token"
    VALID = "valid"
    EXPIRED = "expired"


@unique
class SortOrder(str, Enum):
    """Values accepted by the ``sort`` parameter."""

    LAST = "last"
    SEEDERS = "seeders"
    LEECHERS = "leechers"


@unique
class ResultFormat(str, Enum):
    """Values accepted by the ``format`` parameter."""

    JSON = "json"
    JSON_EXTENDED = "json_extended"
