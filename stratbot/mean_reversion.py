"""Strategy that bets on prices returning to their recent average."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .strategy import Action, Strategy

if TYPE_CHECKING:
    from .market import Market


def _inclusive_range(start: int, stop: int, step: int) -> range:
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    return range(start, stop + 1, step)


@dataclass
class MeanReversionStrategy(Strategy):
    """Buy when the price falls well below its moving average, sell when well above.

    ``threshold`` is a whole percentage of the moving average.
    """

    window: int = 0
    threshold: int = 0

    def decide_action(self, market: Market, index: int, current_holding: float) -> Action:
        """Choose an action for day ``index`` given the current position."""
        average = self.moving_average(market, index, self.window)
        price = market.get_price(index)
        fraction = self.threshold / 100.0

        if current_holding == 0.0:
            if price < average * (1.0 - fraction):
                return Action.BUY
        elif current_holding == 1.0:
            if price > average * (1.0 + fraction):
                return Action.SELL
        return Action.HOLD

    @classmethod
    def generate_strategy_set(
        cls,
        base_name: str,
        min_window: int,
        max_window: int,
        window_step: int,
        min_threshold: int,
        max_threshold: int,
        threshold_step: int,
    ) -> list[MeanReversionStrategy]:
        """One strategy for every window/threshold pair, named ``base_window_threshold``."""
        return [
            cls(f"{base_name}_{window}_{threshold}", window, threshold)
            for window in _inclusive_range(min_window, max_window, window_step)
            for threshold in _inclusive_range(min_threshold, max_threshold, threshold_step)
        ]