"""Abstract base class for price/gas API clients."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ethwidget.models.gas import GasSample
from ethwidget.models.price import PriceSample


class BasePriceGasClient(ABC):
    """Abstract base for all price/gas API clients.

    Both fetches are called from worker threads, concurrently with each
    other. Implementations may share a transport whose requests are
    independent, such as one ``requests.Session`` issuing plain GETs
    through its pooled connections, but must not keep per-request state
    on ``self`` between ``fetch_price`` and ``fetch_gas``.

    Failures are raised as ``WidgetDataError`` subclasses.
    """

    @abstractmethod
    def fetch_price(self) -> PriceSample:
        """Fetch the current ETH/USD price."""
        ...

    @abstractmethod
    def fetch_gas(self) -> GasSample:
        """Fetch the current network base fee in gwei."""
        ...

    def close(self) -> None:
        """Release transport resources (default: nothing to release)."""
