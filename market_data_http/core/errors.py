"""Custom exception hierarchy for market data endpoints.

Every endpoint owns a closed error family (see :func:`error_family`). The
cross-cutting variants below are shared bases so that callers can catch, for
example, any authentication failure regardless of the endpoint that raised it.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
import json
from typing import Any


class MarketDataError(RuntimeError):
    """Base class for all domain-specific exceptions."""


class ConfigurationError(MarketDataError):
    """Raised when credentials or settings are missing or malformed."""


class TransportError(MarketDataError):
    """Raised by a transport when the request never produced a response."""


@dataclass(frozen=True, slots=True)
class ApiError:
    """Error object reported by the service in a JSON response body."""

    code: int | None
    message: str

    @classmethod
    def from_body(cls, body: bytes) -> ApiError | None:
        """Parse ``{"code": ..., "message": ...}``; return ``None`` if absent."""

        try:
            payload = json.loads(body)
        except ValueError:
            return None
        if not isinstance(payload, dict):
            return None
        message = payload.get("message")
        if not isinstance(message, str):
            return None
        code = payload.get("code")
        return cls(code=code if isinstance(code, int) else None, message=message)


class EndpointError(MarketDataError):
    """Base class of every per-endpoint error family.

    ``status`` is the HTTP status that triggered the error (``None`` when no
    response was received) and ``body`` the raw response payload.
    """

    variant: str = ""

    def __init__(self, message: str | None = None, *, status: int | None = None, body: bytes = b"") -> None:
        self.status = status
        self.body = body
        super().__init__(message or self._default_message())

    def _default_message(self) -> str:
        if self.status is None:
            return self.variant or type(self).__name__
        return f"{self.variant or type(self).__name__} (HTTP {self.status})"


class AuthenticationFailed(EndpointError):
    """The service rejected the supplied credentials (HTTP 401)."""


class RateLimitExceeded(EndpointError):
    """The account exceeded the service's request budget (HTTP 429)."""


class UnexpectedStatus(EndpointError):
    """An HTTP status not declared for the endpoint was received."""


class TransportFailure(EndpointError):
    """The request could not be built or delivered.

    ``retriable`` is ``False`` for local failures such as a malformed URL and
    ``True`` for network failures reported by the transport.
    """

    def __init__(self, message: str | None = None, *, retriable: bool = True, **kwargs: Any) -> None:
        self.retriable = retriable
        super().__init__(message, **kwargs)


class DecodeFailure(EndpointError):
    """A body could not be serialized or a success payload could not be parsed."""

    def __init__(self, message: str | None = None, *, cause: Exception | None = None, **kwargs: Any) -> None:
        self.cause = cause
        super().__init__(message, **kwargs)


class ServiceRejection(EndpointError):
    """Endpoint-specific variant carrying the service's parsed error, if any."""

    def __init__(self, message: str | None = None, *, body: bytes = b"", **kwargs: Any) -> None:
        self.api_error = ApiError.from_body(body) if body else None
        if message is None and self.api_error is not None:
            message = f"{self.variant}: {self.api_error.message}"
        super().__init__(message, body=body, **kwargs)


UNIVERSAL_VARIANTS: Mapping[str, type[EndpointError]] = {
    "AuthenticationFailed": AuthenticationFailed,
    "RateLimitExceeded": RateLimitExceeded,
    "UnexpectedStatus": UnexpectedStatus,
    "TransportFailure": TransportFailure,
    "DecodeFailure": DecodeFailure,
}


def error_family(name: str, variants: Iterable[str] = (), *, module: str | None = None) -> type[EndpointError]:
    """Build a closed error family for one endpoint.

    The returned base class exposes one nested subclass per variant name in
    ``variants`` plus the universal variants (universal names repeated in
    ``variants`` are ignored). Nested classes derive from both the family base
    and, for universal variants, the package-wide class of the same name.
    ``module`` sets ``__module__`` on the generated classes and defaults to
    this module::

        ListTradesError = error_family("ListTradesError", ["InvalidInput"], module=__name__)
        issubclass(ListTradesError.InvalidInput, ListTradesError)  # True
        issubclass(ListTradesError.AuthenticationFailed, AuthenticationFailed)  # True
    """

    family = type(name, (EndpointError,), {"__module__": module or __name__, "__doc__": f"Closed error family {name}."})
    names: list[str] = []
    for variant in dict.fromkeys(variants):
        if variant in UNIVERSAL_VARIANTS:
            continue
        _attach(family, variant, (family, ServiceRejection))
        names.append(variant)
    for variant, base in UNIVERSAL_VARIANTS.items():
        _attach(family, variant, (family, base))
        names.append(variant)
    family.variants = tuple(names)
    return family


def _attach(family: type[EndpointError], variant: str, bases: tuple[type, ...]) -> None:
    cls = type(
        variant,
        bases,
        {
            "__module__": family.__module__,
            "__qualname__": f"{family.__qualname__}.{variant}",
            "variant": variant,
        },
    )
    setattr(family, variant, cls)
