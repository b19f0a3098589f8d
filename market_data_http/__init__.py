"""Typed bindings for a brokerage market data REST API.

This module exposes the endpoint contract, the error taxonomy, the pagination
helpers and the concrete list endpoints.
"""

from .core.client import MarketDataClient
from .core.config import ApiInfo, ApiSettings
from .core.endpoint import Endpoint
from .core.errors import (
    ApiError,
    AuthenticationFailed,
    ConfigurationError,
    DecodeFailure,
    EndpointError,
    MarketDataError,
    RateLimitExceeded,
    TransportError,
    TransportFailure,
    UnexpectedStatus,
    error_family,
)
from .core.pagination import paginate
from .core.queries import ListBarsRequest, ListRequest
from .core.status import StatusTable
from .core.transport import RequestsTransport, Transport
from .endpoints.bars import ListBars, ListBarsError
from .endpoints.quotes import ListQuotes, ListQuotesError
from .endpoints.trades import ListTrades, ListTradesError
from .models.market_data import Bar, Bars, Quote, Quotes, Trade, Trades
from .models.shared import Adjustment, Feed, MarketPrefix, TimeFrame

__all__ = [
    "MarketDataClient",
    "ApiInfo",
    "ApiSettings",
    "Endpoint",
    "StatusTable",
    "error_family",
    "paginate",
    "Transport",
    "RequestsTransport",
    "ListRequest",
    "ListBarsRequest",
    "ListTrades",
    "ListTradesError",
    "ListQuotes",
    "ListQuotesError",
    "ListBars",
    "ListBarsError",
    "Trade",
    "Trades",
    "Quote",
    "Quotes",
    "Bar",
    "Bars",
    "MarketPrefix",
    "Feed",
    "TimeFrame",
    "Adjustment",
    "ApiError",
    "MarketDataError",
    "ConfigurationError",
    "TransportError",
    "EndpointError",
    "AuthenticationFailed",
    "RateLimitExceeded",
    "UnexpectedStatus",
    "TransportFailure",
    "DecodeFailure",
]
