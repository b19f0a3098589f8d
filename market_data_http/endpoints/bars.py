"""Historical bars: GET {prefix}{symbol}/bars."""

from __future__ import annotations

from typing import Any

from ..core.errors import error_family
from ..core.queries import ListBarsRequest, parse_timestamp
from ..models.market_data import Bar, Bars
from .common import LIST_STATUSES, ListEndpoint, page_items, page_symbol, page_token, require_object, to_decimal, to_int

ListBarsError = error_family("ListBarsError", LIST_STATUSES.variants(), module=__name__)


class ListBars(ListEndpoint[ListBarsRequest, Bars]):
    """One page of aggregate bars for a symbol and time frame."""

    operation = "bars"
    statuses = LIST_STATUSES
    Error = ListBarsError

    @classmethod
    def from_payload(cls, payload: Any) -> Bars:
        payload = require_object(payload)
        return Bars(
            bars=page_items(payload, "bars", _parse_bar),
            symbol=page_symbol(payload, "bars"),
            next_page_token=page_token(payload),
        )


def _parse_bar(raw: dict[str, Any]) -> Bar:
    trade_count = raw.get("n")
    vwap = raw.get("vw")
    return Bar(
        timestamp=parse_timestamp(raw["t"]),
        open=to_decimal(raw["o"]),
        high=to_decimal(raw["h"]),
        low=to_decimal(raw["l"]),
        close=to_decimal(raw["c"]),
        volume=to_decimal(raw["v"]),
        trade_count=None if trade_count is None else to_int(trade_count),
        vwap=None if vwap is None else to_decimal(vwap),
    )
