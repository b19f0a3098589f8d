"""Query helper objects shared across list endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
import re
from urllib.parse import urlencode

from ..models.shared import DEFAULT_PREFIX, Adjustment, Feed, MarketPrefix, TimeFrame

# The service accepts 1..MAX_LIMIT; out-of-range values are reported by the
# service as invalid input rather than checked here.
MAX_LIMIT = 10_000

_FRACTION = re.compile(r"\.(\d+)")


@dataclass(frozen=True, slots=True)
class ListRequest:
    """Represents a paged market data query for a single symbol."""

    symbol: str
    start: datetime
    end: datetime
    prefix: MarketPrefix = DEFAULT_PREFIX
    limit: int | None = None
    feed: Feed | None = None
    page_token: str | None = None

    def query_params(self) -> list[tuple[str, str]]:
        """Return the query parameters, omitting absent optional fields."""

        params = [("start", format_timestamp(self.start)), ("end", format_timestamp(self.end))]
        if self.limit is not None:
            params.append(("limit", str(self.limit)))
        if self.feed is not None:
            params.append(("feed", Feed(self.feed).value))
        if self.page_token is not None:
            params.append(("page_token", self.page_token))
        return params

    def to_query(self) -> str:
        return urlencode(self.query_params())


@dataclass(frozen=True, slots=True)
class ListBarsRequest(ListRequest):
    """Represents a paged bars query; adds the aggregation window."""

    timeframe: TimeFrame = TimeFrame.DAY_1
    adjustment: Adjustment | None = None

    def query_params(self) -> list[tuple[str, str]]:
        params = ListRequest.query_params(self)
        params.insert(0, ("timeframe", TimeFrame(self.timeframe).value))
        if self.adjustment is not None:
            params.append(("adjustment", Adjustment(self.adjustment).value))
        return params


def format_timestamp(value: datetime) -> str:
    """Render ``value`` as RFC-3339 in UTC with a ``Z`` suffix.

    Naive datetimes are treated as UTC. Microseconds are kept when present.
    """

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime:
    """Parse an RFC-3339 timestamp.

    The service reports nanosecond precision; digits past microseconds are
    dropped since :class:`datetime` cannot hold them.
    """

    if not isinstance(value, str):
        raise TypeError(f"expected an RFC-3339 string, got {value!r}")
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    text = _FRACTION.sub(lambda match: "." + match.group(1)[:6].ljust(6, "0"), text, count=1)
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
