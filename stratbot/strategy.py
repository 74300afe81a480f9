"""Base class and shared vocabulary for trading strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .market import Market

EVALUATION_WINDOW = 100


class Action(IntEnum):
    """What a strategy wants to do on a given day."""

    BUY = 0
    SELL = 1
    HOLD = 2


@dataclass
class Strategy(ABC):
    """A named rule that turns a price history into trading actions."""

    name: str = ""

    def moving_average(self, market: Market | None, index: int, window: int) -> float:
        """Mean price over the ``window`` days ending at ``index``.

        The window is clipped at the start of the series. A negative index or
        a non-positive window yields the price at ``max(0, index)``.
        """
        if market is None:
            return 0.0
        if index < 0 or window <= 0:
            return market.get_price(max(0, index))
        start = max(index - window + 1, 0)
        prices = [market.get_price(day) for day in range(start, index + 1)]
        return sum(prices) / len(prices)

    @abstractmethod
    def decide_action(self, market: Market, index: int, current_holding: float) -> Action:
        """Choose an action for day ``index`` given the current position."""