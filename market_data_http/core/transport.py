"""Transport collaborators that deliver prepared requests."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import requests

from .errors import TransportError

DEFAULT_TIMEOUT = 10.0


@runtime_checkable
class Transport(Protocol):
    """Sends a fully formed request and returns ``(status, body)``.

    Implementations raise :class:`TransportError` when no response was
    received. Timeouts and cancellation are the transport's concern.
    """

    def send(self, request: requests.PreparedRequest) -> tuple[int, bytes]:
        """Deliver ``request``."""

    def close(self) -> None:
        """Release any pooled connections."""


class RequestsTransport:
    """Requests-backed implementation of :class:`Transport`."""

    def __init__(self, *, session: requests.Session | None = None, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._session = session or requests.Session()
        self._owns_session = session is None
        self._timeout = timeout

    def send(self, request: requests.PreparedRequest) -> tuple[int, bytes]:
        try:
            response = self._session.send(request, timeout=self._timeout)
        except requests.RequestException as exc:
            raise TransportError(f"Failed to call {request.method} {request.path_url}: {exc}") from exc
        return response.status_code, response.content

    def close(self) -> None:
        if self._owns_session:
            self._session.close()
