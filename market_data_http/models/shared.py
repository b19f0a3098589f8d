"""Shared domain models used across multiple market segments."""

from __future__ import annotations

from enum import StrEnum
from urllib.parse import quote


class MarketPrefix(StrEnum):
    """Asset class selector resolving to the versioned URL path prefix.

    The values are the literal path segments; new asset classes can be
    appended without breaking callers because every member maps to a string.
    """

    STOCKS = "/v2/stocks/"
    CRYPTO = "/v1beta3/crypto/us/"

    def path_for(self, symbol: str, operation: str) -> str:
        """Return the request path, e.g. ``/v2/stocks/SPY/quotes``.

        The symbol is percent-encoded as a single path segment.
        """

        return f"{self.value}{quote(symbol, safe='')}/{operation.strip('/')}"


DEFAULT_PREFIX = MarketPrefix.STOCKS


class Feed(StrEnum):
    """Data-source tier forwarded as the ``feed`` query parameter."""

    IEX = "iex"
    SIP = "sip"
    OTC = "otc"
    DELAYED_SIP = "delayed_sip"


class TimeFrame(StrEnum):
    """Aggregation windows accepted by the bars endpoint."""

    MINUTE_1 = "1Min"
    MINUTE_5 = "5Min"
    MINUTE_15 = "15Min"
    HOUR_1 = "1Hour"
    DAY_1 = "1Day"


class Adjustment(StrEnum):
    """Corporate action adjustment applied to bars."""

    RAW = "raw"
    SPLIT = "split"
    DIVIDEND = "dividend"
    ALL = "all"
