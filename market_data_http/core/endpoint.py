"""Declarative description of a single HTTP endpoint."""

from __future__ import annotations

from decimal import Decimal
import json
from typing import Any, ClassVar, Generic, TypeVar
from urllib.parse import quote, urlsplit, urlunsplit

import requests

from .errors import EndpointError, error_family
from .status import StatusTable, classify

HDR_KEY_ID = "APCA-API-KEY-ID"
HDR_SECRET = "APCA-API-SECRET-KEY"

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class Endpoint(Generic[InputT, OutputT]):
    """An HTTP operation: a path plus a request method and a status table.

    Subclasses are used as classes, never instantiated. They declare
    ``statuses`` and ``Error`` and override :meth:`path` and
    :meth:`from_payload`; everything else has a usable default. The path is
    combined with an authority (scheme, host, and port) into the final URL.
    """

    statuses: ClassVar[StatusTable] = StatusTable()
    Error: ClassVar[type[EndpointError]] = error_family("DefaultEndpointError")

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        missing = [name for name in cls.statuses.variants() if not hasattr(cls.Error, name)]
        if missing:
            raise TypeError(f"{cls.__name__}.Error lacks variants {missing} declared in its status table")

    # Request shape -----------------------------------------------------
    @classmethod
    def method(cls) -> str:
        return "GET"

    @classmethod
    def base_url(cls) -> str | None:
        """Authority this endpoint is served from; ``None`` means the client default."""

        return None

    @classmethod
    def path(cls, input: InputT) -> str:
        raise NotImplementedError

    @classmethod
    def query(cls, input: InputT) -> str | None:
        return None

    @classmethod
    def body(cls, input: InputT) -> bytes:
        return b""

    @classmethod
    def request(cls, base_url: str, key_id: str | bytes, secret: str | bytes, input: InputT) -> requests.PreparedRequest:
        """Create a request to the endpoint.

        The path and query of ``base_url`` are replaced by those of the
        endpoint; characters that would end the path, such as ``?`` and ``#``, are
        percent-encoded. Credentials are sent verbatim in the authentication
        headers.
        """

        scheme, netloc, *_ = urlsplit(base_url)
        if not scheme or not netloc:
            raise cls.Error.TransportFailure(f"Invalid base URL {base_url!r}", retriable=False)
        path = quote(cls.path(input), safe="/%:@!$&'()*+,;=")
        url = urlunsplit((scheme, netloc, path, cls.query(input) or "", ""))
        body = cls.body(input)
        try:
            return requests.Request(
                cls.method(),
                url,
                headers={HDR_KEY_ID: key_id, HDR_SECRET: secret},
                data=body or None,
            ).prepare()
        except (requests.RequestException, ValueError) as exc:
            raise cls.Error.TransportFailure(f"Cannot build request for {url}: {exc}", retriable=False) from exc

    # Response handling -------------------------------------------------
    @classmethod
    def convert(cls, status: int, body: bytes) -> OutputT:
        """Return the parsed output or raise the matching ``cls.Error`` variant."""

        return classify(cls.statuses, cls.Error, status, body, cls.parse)

    @classmethod
    def parse(cls, body: bytes) -> OutputT:
        """Parse a success body as JSON and build the output from it."""

        try:
            payload = json.loads(body, parse_float=Decimal)
        except ValueError as exc:
            raise cls.Error.DecodeFailure(f"{cls.__name__} returned a non-JSON payload", body=body, cause=exc) from exc
        try:
            return cls.from_payload(payload)
        except (KeyError, TypeError, ValueError, ArithmeticError) as exc:
            raise cls.Error.DecodeFailure(
                f"Unexpected {cls.__name__} payload structure: {exc!r}", body=body, cause=exc
            ) from exc

    @classmethod
    def from_payload(cls, payload: Any) -> OutputT:
        return payload

    @classmethod
    def encode_json(cls, value: Any) -> bytes:
        """Serialize a request body; failures are reported as ``DecodeFailure``."""

        try:
            return json.dumps(value, default=_json_default, separators=(",", ":")).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise cls.Error.DecodeFailure(f"Cannot serialize {cls.__name__} body: {exc}", cause=exc) from exc


def _json_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
