"""Shared fixtures for planner tests."""

from datetime import datetime

import pytest

from plan_ws.models.plan import Itinerary, Leg, Place, TripPlan
from plan_ws.models.request import TravelMode


def create_trip_plan() -> TripPlan:
    """Create a one-itinerary plan: walk, subway, walk."""
    origin = Place(name="Origin", lat=40.7, lon=-74.0)
    station_a = Place(name="Canal St", stop_id="A27", lat=40.72, lon=-74.0)
    station_b = Place(name="59 St", stop_id="A24", lat=40.77, lon=-73.98)
    destination = Place(name="Destination", lat=40.8, lon=-73.9)

    legs = [
        Leg(
            mode=TravelMode.WALK,
            from_place=origin,
            to_place=station_a,
            start_time=datetime(2024, 3, 15, 8, 30),
            end_time=datetime(2024, 3, 15, 8, 38),
            distance_meters=600.0,
        ),
        Leg(
            mode=TravelMode.SUBWAY,
            route_id="A",
            route_short_name="A",
            trip_headsign="Inwood - 207 St",
            from_place=station_a,
            to_place=station_b,
            start_time=datetime(2024, 3, 15, 8, 41),
            end_time=datetime(2024, 3, 15, 8, 55),
            distance_meters=6200.0,
        ),
        Leg(
            mode=TravelMode.WALK,
            from_place=station_b,
            to_place=destination,
            start_time=datetime(2024, 3, 15, 8, 55),
            end_time=datetime(2024, 3, 15, 9, 5),
            distance_meters=750.0,
        ),
    ]
    itinerary = Itinerary(
        legs=legs,
        start_time=datetime(2024, 3, 15, 8, 30),
        end_time=datetime(2024, 3, 15, 9, 5),
        duration_seconds=2100,
        walk_time_seconds=1080,
        transit_time_seconds=840,
        waiting_time_seconds=180,
        walk_distance_meters=1350.0,
        transfers=0,
    )
    return TripPlan(
        date=datetime(2024, 3, 15, 8, 30),
        from_place=origin,
        to_place=destination,
        itineraries=[itinerary],
    )


@pytest.fixture
def trip_plan() -> TripPlan:
    """A sample trip plan."""
    return create_trip_plan()
