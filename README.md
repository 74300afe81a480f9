# stratbot

A small backtesting toolkit. It simulates a stock price path with geometric
Brownian motion, saves and loads price series as plain text files, and runs a
set of trading strategies over the last part of a series to find the one with
the highest profit.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
stratbot [CASE] [--data-dir DIR]
```

`CASE` is a scenario number. When it is left out, the command asks for it.
Market files are read from and written to `DIR`, which defaults to `data`.

- `0` simulates four reference markets (bullish/bearish, low/high volatility,
  starting price 100, 252 days, seed 999) and writes them as
  `bullish_low_vol.txt`, `bullish_high_vol.txt`, `bearish_low_vol.txt` and
  `bearish_high_vol.txt`.
- `1` simulates a market and prints every daily price.
- `2` compares a freshly simulated market with the one loaded from
  `bullish_low_vol.txt`.
- `3` runs a fixed set of mean-reversion, trend-following and weighted
  trend-following strategies on `bullish_low_vol.txt` and prints the best
  strategy and its return.
- `4` and `5` sweep the parameters of every strategy family over
  `bullish_low_vol.txt` and `bearish_low_vol.txt` respectively.

Run case `0` first so the data files exist:

```
stratbot 0
stratbot 4
```

Any other number prints `Invalid test number!`. A missing or malformed market
file makes the command print an error and exit with status 1.

## Library use

```python
from stratbot.market import Market
from stratbot.mean_reversion import MeanReversionStrategy
from stratbot.trend_following import TrendFollowingStrategy, WeightedTrendFollowingStrategy
from stratbot.trading_bot import TradingBot

market = Market(100.0, 0.15, 1.0, 252, seed=999)
market.simulate()

bot = TradingBot(market)
bot.add_strategy(MeanReversionStrategy("Mean Reversion", 10, 5))
bot.add_strategy(TrendFollowingStrategy("Trend Following", 10, 15))
bot.add_strategy(WeightedTrendFollowingStrategy("Weighted Trend Following", 10, 15))

result = bot.run_simulation()
print(result.best_strategy.name, result.total_return)
```

A seed of `-1` (the default) seeds the random source from the system. Prices
are rounded to three decimals. `Market.get_price` returns `0.0` for a day
outside the series, and `Market.last_price` returns the final day's price.

Whole grids of strategies come from the `generate_strategy_set` class methods
of `MeanReversionStrategy`, `TrendFollowingStrategy` and
`WeightedTrendFollowingStrategy`:

```python
strategies = TrendFollowingStrategy.generate_strategy_set("Trend", 5, 15, 5, 20, 100, 10)
```

Both ranges include their upper bound, and the names have the form
`Trend_5_20`. A step that is not positive raises `ValueError`.

Markets can be saved and read back. `Market.write_to_file`,
`Market.load_from_file` and `Market.from_file` all take a file name and a
data directory. A market file holds the initial price, volatility, expected
yearly return, number of trading days and seed on its first line, followed by
one price per line.

`TradingBot.run_simulation` returns a `SimulationResult`. If the bot has no
market, no strategies, or a market of one day or fewer, `best_strategy` is
`None` and `total_return` is the most negative finite float.

## How the strategies decide

Every strategy derives from `stratbot.strategy.Strategy` and returns an
`Action` (`BUY`, `SELL` or `HOLD`) from `decide_action`.

- **Mean reversion** buys when the price is more than `threshold` percent below
  its moving average and sells when it is more than `threshold` percent above it.
- **Trend following** buys when the short moving average is above the long one
  and sells when it is not.
- **Weighted trend following** works the same way but uses a moving average
  whose weights grow by a factor of 1.1 per day towards the most recent price.

Each strategy trades one unit at a time over the last 101 trading days. A
position still open at the end is valued at the last price. On equal profits
the strategy added first wins.

## What it does not do

The package works only on simulated or saved price series. It does not fetch
market data, place orders, account for fees or position sizes, or report
anything beyond the single most profitable strategy and its profit.