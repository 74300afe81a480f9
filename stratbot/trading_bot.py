"""Back-testing of several strategies against one market."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .strategy import EVALUATION_WINDOW, Action, Strategy

if TYPE_CHECKING:
    from .market import Market


@dataclass
class SimulationResult:
    """The most profitable strategy and its profit.

    With no strategy evaluated, ``best_strategy`` is None and ``total_return``
    is the most negative finite float.
    """

    best_strategy: Strategy | None = None
    total_return: float = -sys.float_info.max


@dataclass
class TradingBot:
    """Runs every registered strategy over the last days of a market."""

    market: Market | None
    strategies: list[Strategy] = field(default_factory=list)

    def add_strategy(self, strategy: Strategy | None) -> None:
        """Register a strategy; None is ignored."""
        if strategy is not None:
            self.strategies.append(strategy)

    def _profit(self, strategy: Strategy) -> float:
        market = self.market
        days = market.num_trading_days
        profit = 0.0
        holding = 0.0
        buy_price = 0.0

        for day in range(max(days - EVALUATION_WINDOW - 1, 0), days):
            action = strategy.decide_action(market, day, holding)
            if action is Action.BUY and holding == 0.0:
                buy_price = market.get_price(day)
                holding = 1.0
            elif action is Action.SELL and holding == 1.0:
                profit += market.get_price(day) - buy_price
                holding = 0.0

        if holding == 1.0:
            profit += market.get_price(days - 1) - buy_price
        return profit

    def run_simulation(self) -> SimulationResult:
        """Trade each strategy one unit at a time and return the most profitable.

        Positions still open at the end are valued at the last price. On a tie
        the strategy added first wins.
        """
        result = SimulationResult()
        if self.market is None or not self.strategies or self.market.num_trading_days <= 1:
            return result

        for strategy in self.strategies:
            profit = self._profit(strategy)
            if profit > result.total_return:
                result = SimulationResult(strategy, profit)
        return result