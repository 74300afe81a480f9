"""Numeric helpers shared by the market model and the strategies."""

from __future__ import annotations

import math

TRADING_DAYS_PER_YEAR = 252


def round_to_decimals(value: float, decimals: int) -> float:
    """Round ``value`` to ``decimals`` places, halves going away from zero."""
    factor = 10.0**decimals
    scaled = value * factor
    rounded = math.copysign(math.floor(abs(scaled) + 0.5), scaled)
    return rounded / factor