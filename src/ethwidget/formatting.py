"""Display formatting for price and gas values.

All helpers are pure and locale independent: the same float always yields
the same string.
"""

from __future__ import annotations

import math

NO_DATA = "—"

# Upper bounds (exclusive) of gas levels 1..4; anything above is level 5.
GAS_LEVEL_THRESHOLDS: tuple[float, ...] = (1.0, 10.0, 30.0, 100.0)

PRICE_DECIMAL_CHOICES = (0, 2)


def format_price(price_usd: float, decimals: int = 2) -> str:
    """Currency-style USD text, e.g. ``3128.66 -> "$3,128.66"``.

    Non-finite prices render as the no-data sentinel.

    Args:
        price_usd: Price in US dollars.
        decimals: Fractional digits, 0 or 2.
    """
    if decimals not in PRICE_DECIMAL_CHOICES:
        raise ValueError(f"decimals must be one of {PRICE_DECIMAL_CHOICES}, got {decimals}")
    if not math.isfinite(price_usd):
        return NO_DATA
    digits = f"{abs(price_usd):,.{decimals}f}"
    if price_usd < 0 and any(ch not in "0,." for ch in digits):
        return f"-${digits}"
    return f"${digits}"


def gas_precision(gwei: float) -> int:
    """Fractional digits for a gas value: 3 below 1, 2 below 10, else 0."""
    if gwei < 1:
        return 3
    if gwei < 10:
        return 2
    return 0


def format_gas(gwei: float, include_unit: bool = False) -> str:
    """Gas text with magnitude-dependent precision.

    ``0.024 -> "0.024"``, ``5.0 -> "5.00"``, ``45.2 -> "45"``. Non-finite
    values render as the no-data sentinel; negative zero renders unsigned.
    """
    if not math.isfinite(gwei):
        return NO_DATA
    text = f"{gwei:.{gas_precision(gwei)}f}"
    if text.startswith("-") and not any(ch in "123456789" for ch in text):
        text = text[1:]
    if include_unit:
        return f"{text} gwei"
    return text


def gas_level(gwei: float) -> int:
    """Map a base fee in gwei to an intensity bucket 1..5 (NaN is level 1)."""
    if math.isnan(gwei):
        return 1
    for level, upper in enumerate(GAS_LEVEL_THRESHOLDS, start=1):
        if gwei < upper:
            return level
    return len(GAS_LEVEL_THRESHOLDS) + 1
