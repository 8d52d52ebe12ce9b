import re
from datetime import date, datetime, time
from functools import lru_cache
from typing import TypeVar

from plan_ws.models.request import PlaceRef, RouteRef

T = TypeVar("T")

# "lat,lon" in signed decimal degrees, e.g. "40.714476,-74.005966"
COORDINATE_PATTERN = re.compile(
    r"^\s*([+-]?\d+(?:\.\d+)?)\s*,\s*([+-]?\d+(?:\.\d+)?)\s*$"
)

ROUTE_LIST_SEPARATOR = ","


def with_default(value: T | None, default: T) -> T:
    """Substitute the default for a value that was not provided."""
    return default if value is None else value


def clamp(value: int, low: int, high: int) -> int:
    """Clamp value into [low, high].

    Example: clamp(10, 1, 3) -> 3
    """
    return max(low, min(high, value))


def bounded_count(value: int | None, default: int, low: int, high: int) -> int:
    """Clamp a provided count into [low, high]; a missing count takes the default as-is."""
    if value is None:
        return default
    return clamp(value, low, high)


def split_route_list(raw: str | None) -> tuple[RouteRef, ...] | None:
    """Split a comma-separated route list.

    Segments are neither trimmed nor deduplicated. Trailing empty segments
    are dropped, so an input with no route in it yields None.

    Examples:
        "A,B,C" -> ("A", "B", "C")
        "A,,B," -> ("A", "", "B")
        "" -> None
        ",," -> None
    """
    if not raw:
        return None
    parts = raw.split(ROUTE_LIST_SEPARATOR)
    while parts and parts[-1] == "":
        parts.pop()
    return tuple(parts) or None


def intermediate_list(raw: list[str] | None) -> list[str] | None:
    """Treat a missing list, an empty list, or one whose first entry is blank as absent.

    Some clients send a single empty value instead of omitting the
    parameter; only the first entry is inspected.
    """
    if not raw or raw[0] == "":
        return None
    return raw


@lru_cache(maxsize=1024)
def parse_place(raw: str) -> PlaceRef:
    """Parse a place reference.

    Examples:
        "40.714476,-74.005966" -> PlaceRef(lat=40.714476, lon=-74.005966)
        "mtanyctsubway_A27_S" -> PlaceRef(label="mtanyctsubway_A27_S")
    """
    match = COORDINATE_PATTERN.match(raw)
    if match:
        return PlaceRef(lat=float(match.group(1)), lon=float(match.group(2)))
    return PlaceRef(label=raw)


def combine_date_time(day: date | None, at: time | None, now: datetime) -> datetime:
    """Combine an optional date and time, each defaulting to the current one."""
    return datetime.combine(
        with_default(day, now.date()),
        with_default(at, now.time().replace(microsecond=0)),
    )
