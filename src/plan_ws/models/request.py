from datetime import date, datetime, time
from enum import Enum

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

# Identifier of a single transit route (e.g. "24" or "MTA_A")
RouteRef = str

DATE_FORMATS = ("%Y-%m-%d", "%m/%d/%Y", "%m-%d-%Y")
TIME_FORMATS = ("%H:%M:%S", "%H:%M", "%I:%M %p", "%I:%M%p", "%I:%M:%S %p")


class TravelMode(str, Enum):
    """A mode of travel usable during a trip."""

    WALK = "WALK"
    BICYCLE = "BICYCLE"
    CAR = "CAR"
    TRAM = "TRAM"
    SUBWAY = "SUBWAY"
    RAIL = "RAIL"
    BUS = "BUS"
    FERRY = "FERRY"
    CABLE_CAR = "CABLE_CAR"
    GONDOLA = "GONDOLA"
    FUNICULAR = "FUNICULAR"
    TRANSIT = "TRANSIT"  # any public transit mode


class OptimizeType(str, Enum):
    """What the rider wants the planner to optimize for."""

    QUICK = "QUICK"
    SAFE = "SAFE"
    FLAT = "FLAT"
    GREENWAYS = "GREENWAYS"
    TRANSFERS = "TRANSFERS"


class PlaceRef(BaseModel):
    """A location: either a coordinate pair or an opaque stop/vertex label."""

    model_config = ConfigDict(frozen=True)

    label: str | None = Field(default=None, description="Stop ID or vertex label")
    lat: float | None = Field(default=None, description="Latitude in decimal degrees")
    lon: float | None = Field(default=None, description="Longitude in decimal degrees")

    @model_validator(mode="after")
    def _check_form(self) -> "PlaceRef":
        has_coords = self.lat is not None and self.lon is not None
        if (self.lat is None) != (self.lon is None):
            raise ValueError("lat and lon must be given together")
        if has_coords == (self.label is not None):
            raise ValueError("PlaceRef needs either a label or a lat/lon pair")
        return self

    @property
    def is_coordinate(self) -> bool:
        return self.label is None

    def __str__(self) -> str:
        if self.label is not None:
            return self.label
        return f"{self.lat},{self.lon}"


class DepartureOrArrival(BaseModel):
    """When the trip should depart, or arrive when is_arrival is set."""

    model_config = ConfigDict(frozen=True)

    date_time: datetime
    is_arrival: bool = False


class PlanRequest(BaseModel):
    """A fully normalized trip planning request.

    Built once per call by the request builder and never mutated afterwards.
    Optional collections are either None or non-empty.
    """

    model_config = ConfigDict(frozen=True)

    router_id: str = Field(default="", description="Routing graph to use; empty means default")
    from_place: PlaceRef
    to_place: PlaceRef
    intermediate_places: tuple[PlaceRef, ...] | None = Field(
        default=None, description="Waypoints in visit order"
    )
    departure_or_arrival: DepartureOrArrival
    wheelchair_accessible: bool = False
    max_walk_distance_meters: float = 800.0
    walk_speed_mps: float = 1.33
    optimize_for: OptimizeType = OptimizeType.QUICK
    allowed_modes: frozenset[TravelMode] = frozenset({TravelMode.TRANSIT, TravelMode.WALK})
    min_transfer_time_seconds: int = 240
    num_itineraries: int = Field(default=3, ge=1, le=3)
    show_intermediate_stops: bool = False
    preferred_routes: tuple[RouteRef, ...] | None = None
    unpreferred_routes: tuple[RouteRef, ...] | None = None
    banned_routes: tuple[RouteRef, ...] | None = None

    @model_validator(mode="after")
    def _check_optional_collections(self) -> "PlanRequest":
        for name in (
            "intermediate_places",
            "preferred_routes",
            "unpreferred_routes",
            "banned_routes",
        ):
            value = getattr(self, name)
            if value is not None and len(value) == 0:
                raise ValueError(f"{name} must be omitted rather than empty")
        return self

    @field_serializer("allowed_modes")
    def _serialize_modes(self, modes: frozenset[TravelMode]) -> list[str]:
        return sorted(mode.value for mode in modes)


class PlanParams(BaseModel):
    """Raw planning parameters after basic type decoding.

    Accepts the wire names (``from``, ``maxWalkDistance``, ...) as well as the
    Python field names. Everything except the origin and destination may be
    None, meaning "not provided"; defaults are applied by the request builder.
    Malformed values (non-numeric numbers, unknown modes, unparseable dates)
    raise ValidationError here, before any request is built.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    from_place: str = Field(alias="from", min_length=1)
    to_place: str = Field(alias="to", min_length=1)
    intermediate_places: list[str] | None = None
    trip_date: date | None = Field(default=None, alias="date")
    trip_time: time | None = Field(default=None, alias="time")
    router_id: str | None = None
    arrive_by: bool | None = None
    wheelchair: bool | None = None
    max_walk_distance: float | None = None
    walk_speed: float | None = None
    optimize: OptimizeType | None = None
    modes: frozenset[TravelMode] | None = None
    min_transfer_time: int | None = None
    num_itineraries: int | None = None
    show_intermediate_stops: bool | None = None
    preferred_routes: str | None = None
    unpreferred_routes: str | None = None
    banned_routes: str | None = None

    @field_validator("trip_date", mode="before")
    @classmethod
    def _parse_date(cls, value):
        if not isinstance(value, str):
            return value
        value = value.strip()
        if not value:
            return None
        for fmt in DATE_FORMATS:
            try:
                return datetime.strptime(value, fmt).date()
            except ValueError:
                continue
        raise ValueError(f"Invalid date: {value}")

    @field_validator("trip_time", mode="before")
    @classmethod
    def _parse_time(cls, value):
        if not isinstance(value, str):
            return value
        value = value.strip()
        if not value:
            return None
        for fmt in TIME_FORMATS:
            try:
                return datetime.strptime(value.upper(), fmt).time()
            except ValueError:
                continue
        raise ValueError(f"Invalid time: {value}")

    @field_validator("optimize", mode="before")
    @classmethod
    def _parse_optimize(cls, value):
        if isinstance(value, str):
            return value.strip().upper() or None
        return value

    @field_validator("modes", mode="before")
    @classmethod
    def _parse_modes(cls, value):
        """Accept "TRANSIT,WALK" as well as a list of mode names."""
        if isinstance(value, str):
            value = value.split(",")
        if isinstance(value, (list, tuple, set, frozenset)):
            names = [v.strip().upper() if isinstance(v, str) else v for v in value]
            names = [n for n in names if n != ""]
            return names or None
        return value
