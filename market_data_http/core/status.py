"""Status tables mapping HTTP responses onto an endpoint's error family."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from http import HTTPStatus
from typing import Any, TypeVar

from .errors import EndpointError

T = TypeVar("T")

# Every request can fail authentication or hit the rate limit, so these two
# entries are merged into every table.
UNIVERSAL_STATUSES: Mapping[int, str] = {
    HTTPStatus.UNAUTHORIZED: "AuthenticationFailed",
    HTTPStatus.TOO_MANY_REQUESTS: "RateLimitExceeded",
}


class StatusTable:
    """Ordered, disjoint mapping from HTTP status codes to variant names."""

    __slots__ = ("success", "_entries")

    def __init__(self, errors: Mapping[int, str] | None = None, *, success: Iterable[int] = (HTTPStatus.OK,)) -> None:
        self.success = frozenset(int(status) for status in success)
        entries: dict[int, str] = {int(status): variant for status, variant in UNIVERSAL_STATUSES.items()}
        for status, variant in (errors or {}).items():
            status = int(status)
            if status in self.success:
                raise ValueError(f"HTTP {status} cannot be both a success and an error status")
            fixed = UNIVERSAL_STATUSES.get(status)
            if fixed is not None and fixed != variant:
                raise ValueError(f"HTTP {status} always maps to {fixed}, not {variant}")
            entries[status] = variant
        universal_clash = self.success.intersection(UNIVERSAL_STATUSES)
        if universal_clash:
            raise ValueError(f"HTTP {sorted(universal_clash)} cannot be declared as success")
        self._entries = entries

    def __contains__(self, status: object) -> bool:
        return status in self._entries

    def __iter__(self):
        return iter(self._entries.items())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"StatusTable(success={sorted(self.success)}, errors={self._entries!r})"

    def variant_for(self, status: int) -> str | None:
        """Return the variant declared for ``status`` or ``None``."""

        return self._entries.get(status)

    def variants(self) -> tuple[str, ...]:
        """Return the distinct variant names in declaration order."""

        return tuple(dict.fromkeys(self._entries.values()))


def classify(
    table: StatusTable,
    family: type[EndpointError],
    status: int,
    body: bytes,
    parse: Callable[[bytes], T],
) -> T:
    """Convert a ``(status, body)`` pair into the parsed output.

    Failures are raised as the matching variant of ``family``. The conversion
    is total: statuses absent from ``table`` raise ``family.UnexpectedStatus``.
    """

    if status in table.success:
        return parse(body)
    variant = table.variant_for(status)
    if variant is None:
        raise family.UnexpectedStatus(status=status, body=body)
    error_cls: Any = getattr(family, variant)
    raise error_cls(status=status, body=body)
