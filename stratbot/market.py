"""A simulated price series driven by geometric Brownian motion."""

from __future__ import annotations

import math
import random
import sys
from pathlib import Path

from .utils import TRADING_DAYS_PER_YEAR, round_to_decimals

DEFAULT_DATA_DIR = "data"
PRICE_DECIMALS = 3


def _read_market_file(path: Path) -> tuple[float, float, float, int, int, list[float]]:
    """Parse a market file: five header values followed by prices."""
    tokens = path.read_text().split()
    if len(tokens) < 5:
        raise ValueError(f"{path}: incomplete market header")
    initial_price = float(tokens[0])
    volatility = float(tokens[1])
    expected_yearly_return = float(tokens[2])
    num_trading_days = int(tokens[3])
    seed = int(tokens[4])
    prices = [float(token) for token in tokens[5:]]
    return initial_price, volatility, expected_yearly_return, num_trading_days, seed, prices


class Market:
    """Daily prices of one asset over a number of trading days.

    A seed of -1 means the random source is seeded from the system.
    """

    def __init__(
        self,
        initial_price: float,
        volatility: float,
        expected_yearly_return: float,
        num_trading_days: int,
        seed: int = -1,
    ) -> None:
        self.initial_price = float(initial_price)
        self.volatility = float(volatility)
        self.expected_yearly_return = float(expected_yearly_return)
        self.num_trading_days = int(num_trading_days)
        self.seed = int(seed)
        self.prices: list[float] = [0.0] * max(self.num_trading_days, 0)
        self._rng: random.Random | None = None

    def __repr__(self) -> str:
        return (
            f"Market(initial_price={self.initial_price!r}, volatility={self.volatility!r}, "
            f"expected_yearly_return={self.expected_yearly_return!r}, "
            f"num_trading_days={self.num_trading_days!r}, seed={self.seed!r})"
        )

    @classmethod
    def from_file(cls, filename: str, data_dir: str | Path = DEFAULT_DATA_DIR) -> Market:
        """Build a market from a file written by :meth:`write_to_file`.

        Only the first ``num_trading_days`` prices of the file are kept.
        """
        path = Path(data_dir) / filename
        initial, vol, ret, days, seed, prices = _read_market_file(path)
        market = cls(initial, vol, ret, days, seed)
        for day, price in zip(range(len(market.prices)), prices):
            market.prices[day] = price
        return market

    def _draw_standard_normal(self) -> float:
        if self._rng is None:
            self._rng = random.Random(None if self.seed == -1 else self.seed)
        return self._rng.gauss(0.0, 1.0)

    def simulate(self) -> None:
        """Fill the price series with a geometric Brownian motion path."""
        if not self.prices:
            return
        delta_t = 1.0 / TRADING_DAYS_PER_YEAR
        drift = (self.expected_yearly_return - 0.5 * self.volatility**2) * delta_t
        diffusion = self.volatility * math.sqrt(delta_t)
        self.prices[0] = round_to_decimals(self.initial_price, PRICE_DECIMALS)
        for day in range(1, len(self.prices)):
            z = self._draw_standard_normal()
            step = math.exp(drift + diffusion * z)
            self.prices[day] = round_to_decimals(self.prices[day - 1] * step, PRICE_DECIMALS)

    def get_price(self, index: int) -> float:
        """Price on day ``index``, or 0.0 when there is no such day."""
        if 0 <= index < min(self.num_trading_days, len(self.prices)):
            return self.prices[index]
        return 0.0

    def last_price(self) -> float:
        """Price on the final trading day, or 0.0 for an empty market."""
        if self.num_trading_days <= 0 or not self.prices:
            print("Warning: Attempted to access last price of empty market", file=sys.stderr)
            return 0.0
        return self.get_price(self.num_trading_days - 1)

    def write_to_file(self, filename: str, data_dir: str | Path = DEFAULT_DATA_DIR) -> Path:
        """Write parameters and prices to ``data_dir/filename`` and return the path."""
        directory = Path(data_dir)
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / filename
        lines = [
            f"{self.initial_price:g} {self.volatility:g} "
            f"{self.expected_yearly_return:g} {self.num_trading_days} {self.seed}"
        ]
        lines.extend(f"{self.get_price(day):g}" for day in range(self.num_trading_days))
        path.write_text("\n".join(lines) + "\n")
        print(f"Market parameters and prices written to file: {path}")
        return path

    def load_from_file(self, filename: str, data_dir: str | Path = DEFAULT_DATA_DIR) -> None:
        """Replace parameters and every price with the contents of a market file."""
        path = Path(data_dir) / filename
        initial, vol, ret, days, seed, prices = _read_market_file(path)
        self.initial_price = initial
        self.volatility = vol
        self.expected_yearly_return = ret
        self.num_trading_days = days
        self.seed = seed
        self.prices = prices
        print(f"Loaded parameters from file: {path}")
        print(
            f"Initial Price: {initial:g}, Volatility: {vol:g}, "
            f"Expected Yearly Return: {ret:g}, Num of Trading Days: {days}, Seed: {seed}"
        )
        print(f"Loaded {len(prices)} price entries.")