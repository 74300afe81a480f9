"""Market simulation and moving-average trading strategy backtesting."""

__version__ = "0.1.0"

__all__ = ["cli", "market", "mean_reversion", "strategy", "trading_bot", "trend_following", "utils"]