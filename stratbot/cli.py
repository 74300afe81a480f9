"""Command line entry point that runs the numbered demonstration scenarios."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable
from pathlib import Path

from .market import DEFAULT_DATA_DIR, Market
from .mean_reversion import MeanReversionStrategy
from .strategy import Strategy
from .trading_bot import SimulationResult, TradingBot
from .trend_following import TrendFollowingStrategy, WeightedTrendFollowingStrategy
from .utils import TRADING_DAYS_PER_YEAR

SEED = 999
BULLISH_LOW_VOL = "bullish_low_vol.txt"
BEARISH_LOW_VOL = "bearish_low_vol.txt"

# (file name, volatility, expected yearly return) for the generated markets.
GENERATED_MARKETS = (
    (BULLISH_LOW_VOL, 0.15, 1.0),
    ("bullish_high_vol.txt", 0.40, 1.0),
    (BEARISH_LOW_VOL, 0.15, -0.8),
    ("bearish_high_vol.txt", 0.40, -0.8),
)


def _load_market(filename: str, data_dir: Path) -> Market:
    market = Market(0, 0, 0, TRADING_DAYS_PER_YEAR, SEED)
    market.load_from_file(filename, data_dir)
    return market


def _report(result: SimulationResult) -> None:
    name = result.best_strategy.name if result.best_strategy is not None else "none"
    print(f"Best strategy: {name}")
    print(f"Best return: {result.total_return:g}")


def _run_bot(market: Market, strategies: Iterable[Strategy]) -> None:
    bot = TradingBot(market)
    for strategy in strategies:
        bot.add_strategy(strategy)
    _report(bot.run_simulation())


def _generate_markets(data_dir: Path) -> None:
    for filename, volatility, expected_return in GENERATED_MARKETS:
        market = Market(100.0, volatility, expected_return, TRADING_DAYS_PER_YEAR, SEED)
        market.simulate()
        market.write_to_file(filename, data_dir)


def _print_simulated_prices(data_dir: Path) -> None:
    market = Market(100.0, 0.2, 1, TRADING_DAYS_PER_YEAR, SEED)
    market.simulate()
    for day, price in enumerate(market.prices[:TRADING_DAYS_PER_YEAR]):
        print(f"Day {day}: {price:g}")
    print("Test case 1 done")


def _compare_simulated_and_loaded(data_dir: Path) -> None:
    simulated = Market(100.0, 0.15, 1.0, TRADING_DAYS_PER_YEAR, SEED)
    simulated.simulate()
    loaded = _load_market(BULLISH_LOW_VOL, data_dir)

    print(f"Simulated market last price: {simulated.last_price():g}")
    print(f"Loaded market last price: {loaded.last_price():g}")
    print(f"Simulated market volatility: {simulated.volatility:g}")
    print(f"Loaded market volatility: {loaded.volatility:g}")
    print(f"Simulated market expected yearly return: {simulated.expected_yearly_return:g}")
    print(f"Loaded market expected yearly return: {loaded.expected_yearly_return:g}")
    print("Test case 2 done")


def _fixed_strategies(data_dir: Path) -> None:
    market = _load_market(BULLISH_LOW_VOL, data_dir)
    strategies = [
        MeanReversionStrategy("Mean Reversion 1", 10, 5),
        MeanReversionStrategy("Mean Reversion 2", 15, 10),
        MeanReversionStrategy("Mean Reversion 3", 5, 50),
        TrendFollowingStrategy("Trend Following 1", 10, 15),
        TrendFollowingStrategy("Trend Following 2", 20, 25),
        TrendFollowingStrategy("Trend Following 3", 15, 25),
        WeightedTrendFollowingStrategy("Weighted Trend Following 1", 10, 15),
        WeightedTrendFollowingStrategy("Weighted Trend Following 2", 20, 25),
        WeightedTrendFollowingStrategy("Weighted Trend Following 3", 15, 25),
    ]
    _run_bot(market, strategies)
    print("Test case 3 done")


def _parameter_sweep(filename: str, case: int, data_dir: Path) -> None:
    market = _load_market(filename, data_dir)
    strategies: list[Strategy] = []
    strategies += WeightedTrendFollowingStrategy.generate_strategy_set(
        "WeightedTrend", 5, 15, 5, 20, 50, 10
    )
    strategies += TrendFollowingStrategy.generate_strategy_set("Trend", 5, 15, 5, 20, 100, 10)
    strategies += MeanReversionStrategy.generate_strategy_set("MeanReversion", 5, 15, 5, 1, 5, 1)
    _run_bot(market, strategies)
    print(f"Test case {case} done")


SCENARIOS: dict[int, Callable[[Path], None]] = {
    0: _generate_markets,
    1: _print_simulated_prices,
    2: _compare_simulated_and_loaded,
    3: _fixed_strategies,
    4: lambda data_dir: _parameter_sweep(BULLISH_LOW_VOL, 4, data_dir),
    5: lambda data_dir: _parameter_sweep(BEARISH_LOW_VOL, 5, data_dir),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stratbot",
        description="Simulate markets and back-test trading strategies.",
    )
    parser.add_argument(
        "case",
        nargs="?",
        help="scenario number (0 generates the market files); prompted for when omitted",
    )
    parser.add_argument(
        "--data-dir",
        default=DEFAULT_DATA_DIR,
        help="directory holding the market files (default: %(default)s)",
    )
    return parser


def _ask_case() -> str:
    print("Please input test case number: ", end="", flush=True)
    try:
        answer = input()
    except EOFError:
        answer = ""
    print()
    return answer


def main(argv: list[str] | None = None) -> int:
    """Run one numbered scenario and return the exit status."""
    args = _build_parser().parse_args(argv)
    raw_case = args.case if args.case is not None else _ask_case()

    try:
        scenario = SCENARIOS[int(raw_case.strip())]
    except (ValueError, KeyError):
        print("Invalid test number!")
        return 0

    try:
        scenario(Path(args.data_dir))
    except (OSError, ValueError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())