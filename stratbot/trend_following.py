"""Strategies that follow a crossing of short and long moving averages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .strategy import Action, Strategy

if TYPE_CHECKING:
    from .market import Market

WEIGHT_GROWTH_FACTOR = 1.1


def _inclusive_range(start: int, stop: int, step: int) -> range:
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    return range(start, stop + 1, step)


@dataclass
class TrendFollowingStrategy(Strategy):
    """Hold while the short moving average is above the long one."""

    short_window: int = 0
    long_window: int = 0

    def decide_action(self, market: Market, index: int, current_holding: float) -> Action:
        """Buy on an uptrend when flat, sell when the uptrend ends while holding."""
        short_average = self.moving_average(market, index, self.short_window)
        long_average = self.moving_average(market, index, self.long_window)
        uptrend = short_average > long_average

        if uptrend and current_holding == 0.0:
            return Action.BUY
        if not uptrend and current_holding == 1.0:
            return Action.SELL
        return Action.HOLD

    @classmethod
    def generate_strategy_set(
        cls,
        base_name: str,
        min_short_window: int,
        max_short_window: int,
        step_short_window: int,
        min_long_window: int,
        max_long_window: int,
        step_long_window: int,
    ) -> list[TrendFollowingStrategy]:
        """One strategy for every short/long window pair, named ``base_short_long``."""
        return [
            cls(f"{base_name}_{short}_{long}", short, long)
            for short in _inclusive_range(min_short_window, max_short_window, step_short_window)
            for long in _inclusive_range(min_long_window, max_long_window, step_long_window)
        ]


@dataclass
class WeightedTrendFollowingStrategy(TrendFollowingStrategy):
    """Trend following on moving averages that weigh recent days more heavily.

    The n-th day of the window (counting from its oldest day) has weight 1.1**n.
    """

    def moving_average(self, market: Market, index: int, window: int) -> float:
        """Exponentially weighted mean over the ``window`` days ending at ``index``."""
        if index < 0 or window <= 0:
            return market.get_price(max(0, index))

        start = max(index - window + 1, 0)
        weight = 1.0
        weighted_sum = 0.0
        total_weight = 0.0
        for day in range(start, index + 1):
            weighted_sum += market.get_price(day) * weight
            total_weight += weight
            weight *= WEIGHT_GROWTH_FACTOR

        if total_weight <= 0.0:
            return market.get_price(index)
        return weighted_sum / total_weight