from __future__ import annotations

from datetime import datetime, timezone
import json
from urllib.parse import parse_qsl, urlsplit

import pytest

from market_data_http.core.client import MarketDataClient
from market_data_http.core.config import ApiInfo
from market_data_http.core.errors import TransportError

BASE_URL = "https://data.example.test"
KEY_ID = "PKTEST"
SECRET = "s3cr3t"


class StubTransport:
    """Records prepared requests and replays queued ``(status, body)`` pairs."""

    def __init__(self) -> None:
        self.requests: list = []
        self._responses: list = []
        self.closed = False

    def queue(self, payload, status: int = 200) -> None:
        if isinstance(payload, (bytes, str)):
            body = payload.encode() if isinstance(payload, str) else payload
        else:
            body = json.dumps(payload).encode()
        self._responses.append((status, body))

    def fail(self, message: str) -> None:
        self._responses.append(TransportError(message))

    def send(self, request):
        self.requests.append(request)
        if not self._responses:
            raise AssertionError("No queued response left for stub transport")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self) -> None:
        self.closed = True

    # Inspection helpers -------------------------------------------------
    def path(self, index: int = -1) -> str:
        return urlsplit(self.requests[index].url).path

    def params(self, index: int = -1) -> dict[str, str]:
        return dict(parse_qsl(urlsplit(self.requests[index].url).query, keep_blank_values=True))


@pytest.fixture()
def transport() -> StubTransport:
    return StubTransport()


@pytest.fixture()
def client(transport: StubTransport) -> MarketDataClient:
    return MarketDataClient(ApiInfo(base_url=BASE_URL, key_id=KEY_ID, secret=SECRET), transport=transport)


def utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)
