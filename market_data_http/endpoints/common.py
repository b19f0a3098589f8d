"""Shared plumbing for the paged market data list endpoints."""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
from typing import Any, ClassVar, TypeVar

from ..core.endpoint import Endpoint, InputT, OutputT
from ..core.queries import ListRequest
from ..core.status import StatusTable

T = TypeVar("T")

LIST_STATUSES = StatusTable(
    {
        400: "InvalidInput",
        403: "NotPermitted",
    }
)


class ListEndpoint(Endpoint[InputT, OutputT]):
    """GET ``{prefix}{symbol}/{operation}`` with the request encoded as query."""

    operation: ClassVar[str]

    @classmethod
    def path(cls, input: ListRequest) -> str:
        return input.prefix.path_for(input.symbol, cls.operation)

    @classmethod
    def query(cls, input: ListRequest) -> str | None:
        return input.to_query()


def page_items(payload: dict[str, Any], key: str, parse: Callable[[dict[str, Any]], T]) -> tuple[T, ...]:
    """Parse the items array under ``key``; missing or ``null`` means empty.

    Multi-symbol responses nest the array under the symbol, in which case the
    arrays are concatenated in the order received.
    """

    raw = payload.get(key)
    if raw is None:
        return ()
    if isinstance(raw, dict):
        raw = [entry for entries in raw.values() for entry in (entries or ())]
    if not isinstance(raw, list):
        raise TypeError(f"expected a list under {key!r}, got {type(raw).__name__}")
    return tuple(parse(entry) for entry in raw)


def page_token(payload: dict[str, Any]) -> str | None:
    token = payload.get("next_page_token")
    if token is not None and not isinstance(token, str):
        raise TypeError("next_page_token must be a string or null")
    return token


def page_symbol(payload: dict[str, Any], key: str) -> str:
    symbol = payload.get("symbol")
    if isinstance(symbol, str):
        return symbol
    nested = payload.get(key)
    if isinstance(nested, dict) and len(nested) == 1:
        return next(iter(nested))
    return ""


def require_object(payload: Any) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise TypeError(f"expected a JSON object, got {type(payload).__name__}")
    return payload


def to_decimal(value: Any) -> Decimal:
    # JSON floats are already parsed as Decimal; ints and strings are exact.
    if isinstance(value, bool) or value is None:
        raise TypeError(f"expected a number, got {value!r}")
    return value if isinstance(value, Decimal) else Decimal(str(value))


def to_int(value: Any) -> int:
    if isinstance(value, bool) or value is None:
        raise TypeError(f"expected an integer, got {value!r}")
    return int(value)
