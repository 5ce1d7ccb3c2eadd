"""Gas fee sample data model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class GasSample:
    """Network base fee as reported by the gas endpoint.

    Attributes:
        base_fee_gwei: Base fee per gas in gwei.
        observed_at: Timestamp reported by the API.
    """

    base_fee_gwei: float
    observed_at: datetime
