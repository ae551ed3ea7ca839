"""Classification of torrentapi responses into results or errors."""

from __future__ import annotations

from typing import Any

from rarbg.shared.exceptions import ApplicationError, TransportError
from rarbg.shared.models import TransportResponse


def raise_for_response(resp: TransportResponse) -> None:
    """Raise if ``resp`` signals a transport or application failure.

    Raises:
        TransportError: On a non-success HTTP status.
        ApplicationError: If the body carries a non-empty ``error`` field.
    """
    if not resp.is_success:
        raise TransportError(resp.reason_phrase or f"HTTP {resp.status_code}", resp.status_code)

    error = resp.body.get("error")
    if error:
        code = resp.body.get("error_code")
        raise ApplicationError(str(error), code if isinstance(code, int) else None)


def classify_response(resp: TransportResponse) -> list[dict[str, Any]]:
    """Return the result records of a list/search response.

    An empty list is a valid outcome and is distinct from the service's
    "No results found" error, which surfaces as ``ApplicationError``.
    """
    raise_for_response(resp)
    results = resp.body.get("torrent_results")
    if results is None:
        return []
    return list(results)
