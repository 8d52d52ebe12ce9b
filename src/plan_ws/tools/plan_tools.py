"""MCP tool for planning trips."""

from plan_ws.app import mcp
from plan_ws.data.config import PlannerConfig, get_planner_config
from plan_ws.data.engine_client import RemotePathService
from plan_ws.models.request import PlanParams
from plan_ws.models.responses import PlanningResponse
from plan_ws.services.planning_endpoint import plan_trip as _plan_trip

_config: PlannerConfig | None = None


def _get_config() -> PlannerConfig:
    """Get or create the config singleton."""
    global _config
    if _config is None:
        _config = get_planner_config()
    return _config


def reset_service() -> None:
    """Forget the cached config (used by tests)."""
    global _config
    _config = None


@mcp.tool()
async def plan_trip(
    from_place: str,
    to_place: str,
    intermediate_places: list[str] | None = None,
    date: str | None = None,
    time: str | None = None,
    router_id: str | None = None,
    arrive_by: bool | None = None,
    wheelchair: bool | None = None,
    max_walk_distance: float | None = None,
    walk_speed: float | None = None,
    optimize: str | None = None,
    modes: str | None = None,
    min_transfer_time: int | None = None,
    num_itineraries: int | None = None,
    show_intermediate_stops: bool | None = None,
    preferred_routes: str | None = None,
    unpreferred_routes: str | None = None,
    banned_routes: str | None = None,
) -> PlanningResponse:
    """Plan a trip between two places.

    Places are either "lat,lon" in decimal degrees (e.g., "40.714476,-74.005966")
    or a stop/vertex label (e.g., "mtanyctsubway_A27_S").

    Args:
        from_place: Start location
        to_place: End location
        intermediate_places: Places to visit on the way, in order
        date: Travel date (YYYY-MM-DD or MM/DD/YYYY, default: today)
        time: Travel time (HH:MM, HH:MM:SS or h:mm am/pm, default: now)
        router_id: Routing graph to use (default graph if omitted)
        arrive_by: If True, date/time is the arrival time (default: False)
        wheelchair: Require wheelchair accessible trips (default: False)
        max_walk_distance: Maximum walking distance in meters (default: 800)
        walk_speed: Walking speed in meters/second (default: 1.33)
        optimize: QUICK, SAFE, FLAT, GREENWAYS or TRANSFERS (default: QUICK)
        modes: Comma-separated travel modes (default: "TRANSIT,WALK")
        min_transfer_time: Minimum transfer time in seconds (default: 240)
        num_itineraries: Itineraries to return (1-3, default: 3)
        show_intermediate_stops: Include stops passed on each leg (default: False)
        preferred_routes: Comma-separated routes to favour
        unpreferred_routes: Comma-separated routes to avoid when possible
        banned_routes: Comma-separated routes never to use

    Returns:
        PlanningResponse echoing the normalized request, with either a plan or
        an error (OUTSIDE_BOUNDS, PATH_NOT_FOUND, LOCATION_NOT_ACCESSIBLE,
        NO_TRANSIT_TIMES or SYSTEM_ERROR).
    """
    params = PlanParams(
        from_place=from_place,
        to_place=to_place,
        intermediate_places=intermediate_places,
        trip_date=date,
        trip_time=time,
        router_id=router_id,
        arrive_by=arrive_by,
        wheelchair=wheelchair,
        max_walk_distance=max_walk_distance,
        walk_speed=walk_speed,
        optimize=optimize,
        modes=modes,
        min_transfer_time=min_transfer_time,
        num_itineraries=num_itineraries,
        show_intermediate_stops=show_intermediate_stops,
        preferred_routes=preferred_routes,
        unpreferred_routes=unpreferred_routes,
        banned_routes=banned_routes,
    )

    async with RemotePathService(_get_config()) as engine:
        return await _plan_trip(params, engine)
