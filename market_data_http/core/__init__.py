"""Core utilities for typed endpoint requests."""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "MarketDataClient",
    "Endpoint",
    "StatusTable",
    "classify",
    "error_family",
    "paginate",
    "ListRequest",
    "ListBarsRequest",
    "ApiInfo",
    "MarketDataError",
    "EndpointError",
]

_lazy_targets = {
    "MarketDataClient": ("client", "MarketDataClient"),
    "Endpoint": ("endpoint", "Endpoint"),
    "StatusTable": ("status", "StatusTable"),
    "classify": ("status", "classify"),
    "error_family": ("errors", "error_family"),
    "paginate": ("pagination", "paginate"),
    "ListRequest": ("queries", "ListRequest"),
    "ListBarsRequest": ("queries", "ListBarsRequest"),
    "ApiInfo": ("config", "ApiInfo"),
    "MarketDataError": ("errors", "MarketDataError"),
    "EndpointError": ("errors", "EndpointError"),
}


def __getattr__(name: str) -> Any:
    try:
        module_name, attr_name = _lazy_targets[name]
    except KeyError as exc:
        raise AttributeError(f"module 'market_data_http.core' has no attribute {name!r}") from exc
    module = import_module(f"{__name__}.{module_name}")
    value = getattr(module, attr_name)
    globals()[name] = value
    return value
