"""Per-field normalization of raw planning parameters."""

from plan_ws.normalization.fields import (
    bounded_count,
    clamp,
    combine_date_time,
    intermediate_list,
    parse_place,
    split_route_list,
    with_default,
)

__all__ = [
    "bounded_count",
    "clamp",
    "combine_date_time",
    "intermediate_list",
    "parse_place",
    "split_route_list",
    "with_default",
]
