"""Trip plans as produced by the path-search engine.

The planning endpoint passes these through unchanged; only their shape is
described here so they can be validated off the wire and rendered as JSON.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from plan_ws.models.request import TravelMode


class Place(BaseModel):
    name: str | None = None
    stop_id: str | None = None
    stop_code: str | None = None
    lat: float | None = None
    lon: float | None = None


class Leg(BaseModel):
    """One leg of an itinerary, travelled with a single mode."""

    mode: TravelMode
    route_id: str | None = None
    route_short_name: str | None = Field(default=None, description="Bus number or line name")
    trip_headsign: str | None = Field(default=None, description="Destination displayed on vehicle")
    from_place: Place
    to_place: Place
    start_time: datetime
    end_time: datetime
    distance_meters: float | None = None
    intermediate_stops: list[Place] | None = Field(
        default=None, description="Stops passed on this leg (only when requested)"
    )


class Itinerary(BaseModel):
    legs: list[Leg]
    start_time: datetime
    end_time: datetime
    duration_seconds: int
    walk_time_seconds: int = 0
    transit_time_seconds: int = 0
    waiting_time_seconds: int = 0
    walk_distance_meters: float = 0.0
    transfers: int = Field(default=0, description="Number of vehicle changes")


class TripPlan(BaseModel):
    date: datetime = Field(description="Requested departure or arrival time")
    from_place: Place
    to_place: Place
    itineraries: list[Itinerary]
