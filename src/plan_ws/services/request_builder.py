"""Builds normalized planning requests from decoded parameters."""

from datetime import datetime

from plan_ws.models.request import (
    DepartureOrArrival,
    OptimizeType,
    PlanParams,
    PlanRequest,
    TravelMode,
)
from plan_ws.normalization.fields import (
    bounded_count,
    combine_date_time,
    intermediate_list,
    parse_place,
    split_route_list,
    with_default,
)

DEFAULT_ROUTER_ID = ""
DEFAULT_MAX_WALK_DISTANCE_METERS = 800.0  # about half a mile
DEFAULT_WALK_SPEED_MPS = 1.33  # about 3 mph
DEFAULT_OPTIMIZE = OptimizeType.QUICK
DEFAULT_MODES = frozenset({TravelMode.TRANSIT, TravelMode.WALK})
DEFAULT_MIN_TRANSFER_TIME_SECONDS = 240

# Itinerary count limits
DEFAULT_NUM_ITINERARIES = 3
MIN_ITINERARIES = 1
MAX_ITINERARIES = 3


def build_request(params: PlanParams, now: datetime | None = None) -> PlanRequest:
    """Build an immutable PlanRequest from decoded parameters.

    Missing values take their defaults, the itinerary count is clamped to
    1-3, and empty route or waypoint lists are left out of the request.

    Args:
        params: Decoded planning parameters
        now: Reference time for a missing date or time (default: now)

    Returns:
        PlanRequest ready to hand to the path-search engine
    """
    if now is None:
        now = datetime.now()

    intermediates = intermediate_list(params.intermediate_places)

    return PlanRequest(
        router_id=with_default(params.router_id, DEFAULT_ROUTER_ID),
        from_place=parse_place(params.from_place),
        to_place=parse_place(params.to_place),
        intermediate_places=(
            tuple(parse_place(place) for place in intermediates) if intermediates else None
        ),
        departure_or_arrival=DepartureOrArrival(
            date_time=combine_date_time(params.trip_date, params.trip_time, now),
            is_arrival=params.arrive_by is True,
        ),
        wheelchair_accessible=with_default(params.wheelchair, False),
        max_walk_distance_meters=with_default(
            params.max_walk_distance, DEFAULT_MAX_WALK_DISTANCE_METERS
        ),
        walk_speed_mps=with_default(params.walk_speed, DEFAULT_WALK_SPEED_MPS),
        optimize_for=with_default(params.optimize, DEFAULT_OPTIMIZE),
        allowed_modes=with_default(params.modes, DEFAULT_MODES),
        min_transfer_time_seconds=with_default(
            params.min_transfer_time, DEFAULT_MIN_TRANSFER_TIME_SECONDS
        ),
        num_itineraries=bounded_count(
            params.num_itineraries, DEFAULT_NUM_ITINERARIES, MIN_ITINERARIES, MAX_ITINERARIES
        ),
        show_intermediate_stops=params.show_intermediate_stops is True,
        preferred_routes=split_route_list(params.preferred_routes),
        unpreferred_routes=split_route_list(params.unpreferred_routes),
        banned_routes=split_route_list(params.banned_routes),
    )
