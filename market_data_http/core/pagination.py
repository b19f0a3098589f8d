"""Cursor-based pagination over list endpoints.

A list request carries an optional ``page_token`` and each page an optional
``next_page_token``. The token is copied verbatim from one page into the next
request until the service stops returning one.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
import dataclasses
from typing import Any, Protocol, TypeVar


class Page(Protocol):
    """Structural type shared by every list endpoint output."""

    @property
    def items(self) -> Sequence[Any]: ...

    @property
    def next_page_token(self) -> str | None: ...


PageT = TypeVar("PageT", bound=Page)
RequestT = TypeVar("RequestT")


def next_request(request: RequestT, page: Page) -> RequestT | None:
    """Return the request for the page after ``page`` or ``None`` if it was the last."""

    token = page.next_page_token
    if token is None:
        return None
    return dataclasses.replace(request, page_token=token)


def paginate(fetch: Callable[[RequestT], PageT], request: RequestT) -> Iterator[PageT]:
    """Yield pages until the service stops returning a continuation token.

    Pages are passed through untouched: no reordering, deduplication or
    progress check is applied, and errors raised by ``fetch`` propagate. Cap
    the number of pages with :func:`itertools.islice` if needed.
    """

    current: RequestT | None = request
    while current is not None:
        page = fetch(current)
        yield page
        current = next_request(current, page)
