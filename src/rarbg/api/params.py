"""Layered query-parameter merging for torrentapi calls."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from rarbg.shared.exceptions import UsageError

DEFAULT_PARAMS: dict[str, Any] = {
    "limit": 25,
    "sort": "last",
    "format": "json_extended",
}

_IMDB_ID_RE = re.compile(r"tt\d+")
_SCALARS = (str, int, float, bool)


def ensure_flat_mapping(params: Any, *, name: str = "params") -> dict[str, Any]:
    """Validate ``params`` as a flat key/value mapping and return a copy.

    ``None`` is treated as an empty mapping. Values may be scalars or lists
    of scalars; nested mappings are rejected.

    Raises:
        UsageError: If ``params`` is not a flat mapping.
    """
    if params is None:
        return {}
    if not isinstance(params, Mapping):
        raise UsageError(f"{name} must be a mapping, got {type(params).__name__}")

    flat: dict[str, Any] = {}
    for key, value in params.items():
        if not isinstance(key, str):
            raise UsageError(f"{name} keys must be strings, got {key!r}")
        if isinstance(value, (list, tuple)):
            if not all(isinstance(v, _SCALARS) for v in value):
                raise UsageError(f"{name}[{key!r}] must be a list of scalars")
        elif not isinstance(value, _SCALARS):
            raise UsageError(f"{name}[{key!r}] must be a scalar or list, got {type(value).__name__}")
        flat[key] = value
    return flat


def merge_params(
    defaults: Mapping[str, Any],
    overrides: Any,
    mode_params: Mapping[str, Any],
    *,
    app_id: str,
    token: str,
) -> dict[str, Any]:
    """Combine the three parameter layers into one outgoing set.

    Precedence, lowest first: defaults, overrides, mode parameters. The
    ``app_id`` and ``token`` keys are always set last so callers can't
    replace them.

    Raises:
        UsageError: If ``overrides`` is not a flat mapping.
    """
    merged = dict(defaults)
    merged.update(ensure_flat_mapping(overrides, name="overrides"))
    merged.update(mode_params)
    merged["app_id"] = app_id
    merged["token"] = token
    return merged


def normalize_imdb_id(imdb_id: str | int) -> str:
    """Return ``imdb_id`` in ``tt<digits>`` form."""
    value = str(imdb_id)
    if _IMDB_ID_RE.fullmatch(value):
        return value
    return f"tt{value}"
