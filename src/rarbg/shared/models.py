"""Frozen Pydantic models shared by the client modules."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class Token(BaseModel):
    """An issued authorization token and the clock reading at issue time."""

    model_config = {"frozen": True}

    value: str = Field(min_length=1)
    issued_at: float

    def age(self, now: float) -> float:
        return now - self.issued_at


class TransportResponse(BaseModel):
    """What a transport hands back for a single GET request."""

    model_config = {"frozen": True}

    status_code: int
    reason_phrase: str = ""
    body: dict[str, Any] = Field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300
