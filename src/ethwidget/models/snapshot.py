"""Display snapshot data model, the unit handed to the display surface."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from ethwidget.formatting import NO_DATA, format_gas, format_price
from ethwidget.formatting import gas_level as level_for_gwei
from ethwidget.models.gas import GasSample
from ethwidget.models.price import PriceSample


@dataclass(frozen=True)
class DisplaySnapshot:
    """Presentation-ready values of one refresh cycle.

    Attributes:
        captured_at: When the cycle ran.
        price_text: Formatted ETH price, or the no-data sentinel.
        gas_text: Formatted base fee, or the no-data sentinel.
        gas_gwei: Base fee the gas text was formatted from (0 when degraded).
        gas_level: Intensity bucket 1..5, always derived from ``gas_gwei``.
    """

    captured_at: datetime
    price_text: str
    gas_text: str
    gas_gwei: float
    gas_level: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "gas_level", level_for_gwei(self.gas_gwei))

    @property
    def has_data(self) -> bool:
        return self.price_text != NO_DATA

    @classmethod
    def from_samples(
        cls,
        price: PriceSample,
        gas: GasSample,
        captured_at: datetime,
        price_decimals: int = 2,
        include_unit_suffix: bool = False,
    ) -> DisplaySnapshot:
        return cls(
            captured_at=captured_at,
            price_text=format_price(price.price_usd, price_decimals),
            gas_text=format_gas(gas.base_fee_gwei, include_unit_suffix),
            gas_gwei=gas.base_fee_gwei,
        )

    @classmethod
    def no_data(cls, captured_at: datetime) -> DisplaySnapshot:
        """Sentinel snapshot rendered when a cycle fails."""
        return cls(
            captured_at=captured_at,
            price_text=NO_DATA,
            gas_text=NO_DATA,
            gas_gwei=0.0,
        )
