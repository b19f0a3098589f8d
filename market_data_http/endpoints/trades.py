"""Historical trades: GET {prefix}{symbol}/trades."""

from __future__ import annotations

from typing import Any

from ..core.errors import error_family
from ..core.queries import ListRequest, parse_timestamp
from ..models.market_data import Trade, Trades
from .common import LIST_STATUSES, ListEndpoint, page_items, page_symbol, page_token, require_object, to_decimal

ListTradesError = error_family("ListTradesError", LIST_STATUSES.variants(), module=__name__)


class ListTrades(ListEndpoint[ListRequest, Trades]):
    """One page of trades for a symbol.

    ``InvalidInput`` (400) covers unknown symbols, malformed page tokens and
    out-of-range limits; ``NotPermitted`` (403) is reported when the
    subscription does not include the requested feed.
    """

    operation = "trades"
    statuses = LIST_STATUSES
    Error = ListTradesError

    @classmethod
    def from_payload(cls, payload: Any) -> Trades:
        payload = require_object(payload)
        return Trades(
            trades=page_items(payload, "trades", _parse_trade),
            symbol=page_symbol(payload, "trades"),
            next_page_token=page_token(payload),
        )


def _parse_trade(raw: dict[str, Any]) -> Trade:
    return Trade(
        timestamp=parse_timestamp(raw["t"]),
        price=to_decimal(raw["p"]),
        size=to_decimal(raw["s"]),
    )
