"""Historical quotes: GET {prefix}{symbol}/quotes."""

from __future__ import annotations

from typing import Any

from ..core.errors import error_family
from ..core.queries import ListRequest, parse_timestamp
from ..models.market_data import Quote, Quotes
from .common import LIST_STATUSES, ListEndpoint, page_items, page_symbol, page_token, require_object, to_decimal

ListQuotesError = error_family("ListQuotesError", LIST_STATUSES.variants(), module=__name__)


class ListQuotes(ListEndpoint[ListRequest, Quotes]):
    """One page of quotes for a symbol."""

    operation = "quotes"
    statuses = LIST_STATUSES
    Error = ListQuotesError

    @classmethod
    def from_payload(cls, payload: Any) -> Quotes:
        payload = require_object(payload)
        return Quotes(
            quotes=page_items(payload, "quotes", _parse_quote),
            symbol=page_symbol(payload, "quotes"),
            next_page_token=page_token(payload),
        )


def _parse_quote(raw: dict[str, Any]) -> Quote:
    return Quote(
        timestamp=parse_timestamp(raw["t"]),
        ask_price=to_decimal(raw["ap"]),
        ask_size=to_decimal(raw["as"]),
        bid_price=to_decimal(raw["bp"]),
        bid_size=to_decimal(raw["bs"]),
    )
