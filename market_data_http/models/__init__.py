"""Domain models for market data endpoints."""

from .market_data import Bar, Bars, Quote, Quotes, Trade, Trades
from .shared import Adjustment, Feed, MarketPrefix, TimeFrame

__all__ = [
    "Adjustment",
    "Feed",
    "MarketPrefix",
    "TimeFrame",
    "Bar",
    "Bars",
    "Quote",
    "Quotes",
    "Trade",
    "Trades",
]
