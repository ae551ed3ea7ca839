"""Shared pytest fixtures for the rarbg test suite."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from rarbg.api.client import RarbgClient
from rarbg.config import Settings
from rarbg.shared.models import TransportResponse

ENDPOINT = "https://torrentapi.test/pubapi_v2.php"


class FakeTransport:
    """Replays queued responses and records every request."""

    def __init__(self) -> None:
        self.responses: list[TransportResponse] = []
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def queue(self, status_code: int = 200, body: dict[str, Any] | None = None, reason: str = "OK") -> None:
        self.responses.append(TransportResponse(status_code=status_code, reason_phrase=reason, body=body or {}))

    def queue_token(self, value: str = "tok-1") -> None:
        self.queue(body={"token": value})

    def get(self, url: str, params: Mapping[str, Any]) -> TransportResponse:
        self.calls.append((url, dict(params)))
        if not self.responses:
            raise AssertionError(f"unexpected request to {url} with {dict(params)}")
        return self.responses.pop(0)

    @property
    def token_calls(self) -> list[dict[str, Any]]:
        return [params for _, params in self.calls if "get_token" in params]

    @property
    def api_calls(self) -> list[dict[str, Any]]:
        return [params for _, params in self.calls if "get_token" not in params]


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def settings() -> Settings:
    """Return a Settings instance with test defaults."""
    return Settings(api_endpoint=ENDPOINT, app_id="test-app", timeout=5)


@pytest.fixture()
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def sleeps() -> list[float]:
    return []


@pytest.fixture()
def client(settings: Settings, transport: FakeTransport, clock: FakeClock, sleeps: list[float]) -> RarbgClient:
    return RarbgClient(settings=settings, transport=transport, clock=clock, sleep=sleeps.append)
