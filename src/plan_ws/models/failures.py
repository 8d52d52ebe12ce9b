"""Failure outcomes reported by the path-search engine."""

from dataclasses import dataclass, field
from enum import Enum


class FailureKind(str, Enum):
    """Closed set of ways a trip search can fail."""

    UNRESOLVABLE = "unresolvable"  # a location could not be placed on the graph
    NO_PATH = "no_path"  # endpoints resolved but not connected
    INACCESSIBLE = "inaccessible"  # a resolved location cannot be reached
    NO_SERVICE_WINDOW = "no_service_window"  # no transit service at the requested time
    UNKNOWN = "unknown"


class MissingLocation(str, Enum):
    """Which endpoint of the request could not be resolved."""

    FROM = "from"
    TO = "to"
    INTERMEDIATE = "intermediate"


@dataclass(frozen=True)
class SearchFailure:
    """A failed trip search.

    ``missing`` is only meaningful for UNRESOLVABLE; ``cause`` is only kept
    for UNKNOWN so it can be logged.
    """

    kind: FailureKind
    missing: tuple[MissingLocation, ...] = field(default=())
    cause: BaseException | str | None = None

    @classmethod
    def unresolvable(cls, *missing: MissingLocation) -> "SearchFailure":
        return cls(FailureKind.UNRESOLVABLE, missing=tuple(missing))

    @classmethod
    def no_path(cls) -> "SearchFailure":
        return cls(FailureKind.NO_PATH)

    @classmethod
    def inaccessible(cls) -> "SearchFailure":
        return cls(FailureKind.INACCESSIBLE)

    @classmethod
    def no_service_window(cls) -> "SearchFailure":
        return cls(FailureKind.NO_SERVICE_WINDOW)

    @classmethod
    def unknown(cls, cause: BaseException | str | None = None) -> "SearchFailure":
        return cls(FailureKind.UNKNOWN, cause=cause)
