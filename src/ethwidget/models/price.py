"""ETH price sample data model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PriceSample:
    """ETH/USD price as reported by the price endpoint.

    Attributes:
        price_usd: Price of one ETH in US dollars.
        observed_at: Timestamp reported by the API.
    """

    price_usd: float
    observed_at: datetime
