"""Widget pipeline configuration."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum

DEFAULT_BASE_URL = "https://bgethdashboardbackend-production.up.railway.app/api"


class ApiClientType(Enum):
    """Supported price/gas API client backends."""

    HTTP = "http"
    MOCK = "mock"


@dataclass
class WidgetConfig:
    """Configuration for RefreshPipeline.

    Attributes:
        client: API client backend.
        base_url: Root URL of the price/gas API (no trailing slash needed).
        refresh_interval_minutes: Hint for the host's next invocation.
        request_timeout_seconds: Per-request transport timeout.
        refresh_timeout_seconds: Deadline for a whole refresh cycle.
        price_decimals: Fractional digits of the price text, 0 or 2.
        include_unit_suffix: Append " gwei" to the gas text.
    """

    client: ApiClientType = ApiClientType.HTTP
    base_url: str = DEFAULT_BASE_URL
    refresh_interval_minutes: int = 5
    request_timeout_seconds: float = 10.0
    refresh_timeout_seconds: float = 15.0
    price_decimals: int = 2
    include_unit_suffix: bool = False

    @property
    def refresh_interval(self) -> timedelta:
        return timedelta(minutes=self.refresh_interval_minutes)

    def validate(self) -> None:
        """Raise ValueError on settings the pipeline cannot honor."""
        if self.refresh_interval_minutes <= 0:
            raise ValueError(
                f"refresh_interval_minutes must be positive, got {self.refresh_interval_minutes}"
            )
        if self.request_timeout_seconds <= 0:
            raise ValueError(
                f"request_timeout_seconds must be positive, got {self.request_timeout_seconds}"
            )
        if self.refresh_timeout_seconds <= 0:
            raise ValueError(
                f"refresh_timeout_seconds must be positive, got {self.refresh_timeout_seconds}"
            )
        if self.price_decimals not in (0, 2):
            raise ValueError(f"price_decimals must be 0 or 2, got {self.price_decimals}")
        if not self.base_url:
            raise ValueError("base_url must not be empty")
