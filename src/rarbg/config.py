"""Centralised configuration via Pydantic Settings."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings

from rarbg.shared.enums import ResultFormat, SortOrder

API_ENDPOINT = "https://torrentapi.org/pubapi_v2.php"
APP_ID = "rarbg-python"


class Settings(BaseSettings):
    """Client configuration loaded from environment variables."""

    model_config = {"env_prefix": "RARBG_", "frozen": True}

    # Remote service
    api_endpoint: str = API_ENDPOINT
    app_id: str = APP_ID

    # Transport
    timeout: float = 30.0
    # torrentapi rejects requests without a browser-like or named agent
    user_agent: str = "rarbg-python/0.1.0"

    # Defaults sent with every list/search call unless overridden
    default_limit: int = Field(default=25, ge=1, le=100)
    default_sort: SortOrder = SortOrder.LAST
    default_format: ResultFormat = ResultFormat.JSON_EXTENDED

    @property
    def default_params(self) -> dict[str, int | str]:
        return {
            "limit": self.default_limit,
            "sort": self.default_sort.value,
            "format": self.default_format.value,
        }


def get_settings() -> Settings:
    """Build settings from the environment; tests pass their own instead."""
    return Settings()
