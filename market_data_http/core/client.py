"""High-level client that issues endpoint requests over a transport."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, TypeVar

from ..logging import get_logger
from .config import ApiInfo
from .endpoint import Endpoint
from .errors import EndpointError, TransportError
from .pagination import paginate
from .transport import DEFAULT_TIMEOUT, RequestsTransport, Transport

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")

logger = get_logger(__name__)


class MarketDataClient:
    """Entry point consumed by SDK callers.

    The client holds no per-call state; concurrent calls only share the
    transport.
    """

    def __init__(
        self,
        api_info: ApiInfo,
        *,
        transport: Transport | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._api_info = api_info
        self._transport = transport or RequestsTransport(timeout=timeout)

    @classmethod
    def from_env(cls, **kwargs: Any) -> MarketDataClient:
        return cls(ApiInfo.from_env(), **kwargs)

    def __enter__(self) -> MarketDataClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._transport.close()

    # Issuing -----------------------------------------------------------
    def issue(self, endpoint: type[Endpoint[InputT, OutputT]], input: InputT) -> OutputT:
        """Send one request and return the typed output.

        Failures are raised as variants of ``endpoint.Error``; nothing is
        retried.
        """

        base_url = endpoint.base_url() or self._api_info.base_url
        request = endpoint.request(base_url, self._api_info.key_id, self._api_info.secret, input)
        try:
            status, body = self._transport.send(request)
        except TransportError as exc:
            logger.info("request_failed", endpoint=endpoint.__name__, path=request.path_url, error=str(exc))
            raise endpoint.Error.TransportFailure(str(exc), retriable=True) from exc

        logger.debug("request_completed", endpoint=endpoint.__name__, method=request.method, path=request.path_url, status=status)
        try:
            return endpoint.convert(status, body)
        except EndpointError as exc:
            logger.info("request_rejected", endpoint=endpoint.__name__, variant=exc.variant, status=exc.status)
            raise

    # Pagination --------------------------------------------------------
    def pages(self, endpoint: type[Endpoint[InputT, OutputT]], input: InputT) -> Iterator[OutputT]:
        """Yield every page of a list endpoint, following continuation tokens."""

        return paginate(lambda request: self.issue(endpoint, request), input)

    def collect(self, endpoint: type[Endpoint[InputT, Any]], input: InputT) -> list[Any]:
        """Return the items of every page concatenated in server order."""

        items: list[Any] = []
        for page in self.pages(endpoint, input):
            items.extend(page.items)
        return items
