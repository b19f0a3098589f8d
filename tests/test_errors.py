from __future__ import annotations

import pytest

from market_data_http.core import errors
from market_data_http.core.errors import (
    ApiError,
    DecodeFailure,
    EndpointError,
    MarketDataError,
    TransportFailure,
    error_family,
)


def test_family_exposes_declared_and_universal_variants():
    family = error_family("WidgetError", ["InvalidInput", "NotPermitted", "AuthenticationFailed"])

    assert family.variants == (
        "InvalidInput",
        "NotPermitted",
        "AuthenticationFailed",
        "RateLimitExceeded",
        "UnexpectedStatus",
        "TransportFailure",
        "DecodeFailure",
    )
    for name in family.variants:
        variant = getattr(family, name)
        assert issubclass(variant, family)
        assert issubclass(variant, MarketDataError)
        assert variant.variant == name
    assert family.__module__ == errors.__name__
    assert family.InvalidInput.__qualname__ == "WidgetError.InvalidInput"


def test_family_module_can_be_set_by_the_declaring_module():
    family = error_family("WidgetError", ["InvalidInput"], module=__name__)

    assert family.__module__ == __name__
    assert family.InvalidInput.__module__ == __name__
    assert family.RateLimitExceeded.__module__ == __name__


def test_families_are_isolated_from_each_other():
    first = error_family("FirstError", ["InvalidInput"])
    second = error_family("SecondError", ["InvalidInput"])

    assert not issubclass(first.InvalidInput, second)
    assert issubclass(first.TransportFailure, errors.TransportFailure)
    assert issubclass(second.TransportFailure, errors.TransportFailure)

    with pytest.raises(errors.TransportFailure):
        raise first.TransportFailure("down")


def test_api_error_from_body():
    assert ApiError.from_body(b'{"code": 42210000, "message": "invalid symbol"}') == ApiError(
        code=42210000, message="invalid symbol"
    )
    assert ApiError.from_body(b'{"message": "bad"}') == ApiError(code=None, message="bad")
    assert ApiError.from_body(b"not json") is None
    assert ApiError.from_body(b"[1, 2]") is None
    assert ApiError.from_body(b'{"code": 1}') is None


def test_rejection_message_uses_service_error():
    family = error_family("WidgetError", ["InvalidInput"])

    error = family.InvalidInput(status=400, body=b'{"message": "invalid page token"}')

    assert str(error) == "InvalidInput: invalid page token"
    assert error.api_error == ApiError(code=None, message="invalid page token")


def test_rejection_keeps_raw_body_when_unparseable():
    family = error_family("WidgetError", ["InvalidInput"])

    error = family.InvalidInput(status=400, body=b"<html>bad</html>")

    assert error.api_error is None
    assert error.body == b"<html>bad</html>"
    assert str(error) == "InvalidInput (HTTP 400)"


def test_transport_and_decode_failures_carry_context():
    cause = ValueError("boom")
    decode = DecodeFailure("cannot parse", body=b"{", cause=cause)
    transport = TransportFailure("bad url", retriable=False)

    assert decode.cause is cause
    assert decode.body == b"{"
    assert decode.status is None
    assert transport.retriable is False
    assert isinstance(transport, EndpointError)
