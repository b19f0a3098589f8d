from __future__ import annotations

import pytest

from market_data_http.models.shared import DEFAULT_PREFIX, MarketPrefix


@pytest.mark.parametrize(
    ("prefix", "symbol", "operation", "expected"),
    [
        (MarketPrefix.STOCKS, "SPY", "quotes", "/v2/stocks/SPY/quotes"),
        (MarketPrefix.STOCKS, "AAPL", "trades", "/v2/stocks/AAPL/trades"),
        (MarketPrefix.CRYPTO, "BTCUSD", "trades", "/v1beta3/crypto/us/BTCUSD/trades"),
        (MarketPrefix.CRYPTO, "BTCUSD", "/bars", "/v1beta3/crypto/us/BTCUSD/bars"),
    ],
)
def test_path_for(prefix, symbol, operation, expected):
    assert prefix.path_for(symbol, operation) == expected


def test_prefix_values_are_literal_segments():
    assert str(MarketPrefix.STOCKS) == "/v2/stocks/"
    assert str(MarketPrefix.CRYPTO) == "/v1beta3/crypto/us/"
    assert DEFAULT_PREFIX is MarketPrefix.STOCKS


def test_every_prefix_resolves():
    for prefix in MarketPrefix:
        path = prefix.path_for("X", "quotes")
        assert path.startswith("/")
        assert path.endswith("/X/quotes")


@pytest.mark.parametrize(
    ("symbol", "segment"),
    [("BTC?x=1#", "BTC%3Fx%3D1%23"), ("BTC/USD", "BTC%2FUSD"), ("BRK B", "BRK%20B")],
)
def test_symbol_stays_a_single_path_segment(symbol, segment):
    assert MarketPrefix.CRYPTO.path_for(symbol, "trades") == f"/v1beta3/crypto/us/{segment}/trades"
