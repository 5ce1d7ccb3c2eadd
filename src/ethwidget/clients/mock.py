"""Mock client for testing and offline hosts — no network access."""

from __future__ import annotations

import time
from datetime import datetime, timezone

from ethwidget.clients.base import BasePriceGasClient
from ethwidget.models.gas import GasSample
from ethwidget.models.price import PriceSample


class MockClient(BasePriceGasClient):
    """In-memory client that returns configurable static data.

    Use ``set_price``, ``set_gas``, ``fail_price``/``fail_gas`` and
    ``set_delay`` to shape responses, or leave defaults for the sample
    values shown in widget previews.
    """

    def __init__(self, price_usd: float = 3128.66, base_fee_gwei: float = 0.024) -> None:
        self._price_usd = price_usd
        self._base_fee_gwei = base_fee_gwei
        self._price_error: Exception | None = None
        self._gas_error: Exception | None = None
        self._price_delay = 0.0
        self._gas_delay = 0.0
        self.price_calls = 0
        self.gas_calls = 0

    # --- Pre-load helpers ---

    def set_price(self, price_usd: float) -> None:
        self._price_usd = price_usd
        self._price_error = None

    def set_gas(self, base_fee_gwei: float) -> None:
        self._base_fee_gwei = base_fee_gwei
        self._gas_error = None

    def fail_price(self, error: Exception) -> None:
        self._price_error = error

    def fail_gas(self, error: Exception) -> None:
        self._gas_error = error

    def set_delay(self, price: float = 0.0, gas: float = 0.0) -> None:
        """Sleep this many seconds before answering each fetch."""
        self._price_delay = price
        self._gas_delay = gas

    # --- Client implementation ---

    def fetch_price(self) -> PriceSample:
        self.price_calls += 1
        if self._price_delay:
            time.sleep(self._price_delay)
        if self._price_error is not None:
            raise self._price_error
        return PriceSample(price_usd=self._price_usd, observed_at=datetime.now(timezone.utc))

    def fetch_gas(self) -> GasSample:
        self.gas_calls += 1
        if self._gas_delay:
            time.sleep(self._gas_delay)
        if self._gas_error is not None:
            raise self._gas_error
        return GasSample(base_fee_gwei=self._base_fee_gwei, observed_at=datetime.now(timezone.utc))
