"""Market data records and the pages list endpoints return."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class Trade:
    """A single trade print."""

    timestamp: datetime
    price: Decimal
    size: Decimal


@dataclass(frozen=True, slots=True)
class Quote:
    """Top-of-book quote."""

    timestamp: datetime
    ask_price: Decimal
    ask_size: Decimal
    bid_price: Decimal
    bid_size: Decimal


@dataclass(frozen=True, slots=True)
class Bar:
    """OHLCV aggregate for one time frame."""

    timestamp: datetime
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal
    volume: Decimal
    trade_count: int | None = None
    vwap: Decimal | None = None


# Pages ----------------------------------------------------------------
# ``next_page_token`` is opaque: it is forwarded verbatim and never inspected.


@dataclass(frozen=True, slots=True)
class Trades:
    """One page of trades."""

    trades: tuple[Trade, ...]
    symbol: str
    next_page_token: str | None = None

    @property
    def items(self) -> tuple[Trade, ...]:
        return self.trades


@dataclass(frozen=True, slots=True)
class Quotes:
    """One page of quotes."""

    quotes: tuple[Quote, ...]
    symbol: str
    next_page_token: str | None = None

    @property
    def items(self) -> tuple[Quote, ...]:
        return self.quotes


@dataclass(frozen=True, slots=True)
class Bars:
    """One page of bars."""

    bars: tuple[Bar, ...]
    symbol: str
    next_page_token: str | None = None

    @property
    def items(self) -> tuple[Bar, ...]:
        return self.bars
