import argparse
import asyncio
import logging
from datetime import UTC, datetime

from pydantic import BaseModel

from plan_ws.app import mcp
from plan_ws.tools import plan_tools


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str


@mcp.tool()
def health() -> HealthResponse:
    """Check if the trip planner server is running and healthy.

    Returns the server status, version, and current timestamp.
    """
    from plan_ws import __version__

    return HealthResponse(
        status="ok",
        version=__version__,
        timestamp=datetime.now(UTC).isoformat(),
    )


async def run_plan(args: argparse.Namespace) -> None:
    """Run a single planning call and print the response as JSON."""
    response = await plan_tools.plan_trip(
        from_place=args.from_place,
        to_place=args.to_place,
        intermediate_places=args.via,
        date=args.date,
        time=args.time,
        router_id=args.router,
        arrive_by=args.arrive_by or None,
        wheelchair=args.wheelchair or None,
        max_walk_distance=args.max_walk_distance,
        walk_speed=args.walk_speed,
        optimize=args.optimize,
        modes=args.modes,
        num_itineraries=args.num_itineraries,
        show_intermediate_stops=args.show_intermediate_stops or None,
        min_transfer_time=args.min_transfer_time,
        preferred_routes=args.preferred_routes,
        unpreferred_routes=args.unpreferred_routes,
        banned_routes=args.banned_routes,
    )
    print(response.model_dump_json(indent=2, exclude_none=True))


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="plan-ws",
        description="Trip Planner MCP Server",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    subparsers = parser.add_subparsers(dest="command")

    # plan command
    plan_parser = subparsers.add_parser(
        "plan",
        help="Plan one trip against the configured routing engine and print JSON",
    )
    plan_parser.add_argument("from_place", help='Start: "lat,lon" or a stop/vertex label')
    plan_parser.add_argument("to_place", help="End (same format as start)")
    plan_parser.add_argument("--via", action="append", help="Intermediate place (repeatable)")
    plan_parser.add_argument("--date", help="Travel date (default: today)")
    plan_parser.add_argument("--time", help="Travel time (default: now)")
    plan_parser.add_argument("--router", help="Routing graph ID (default graph if omitted)")
    plan_parser.add_argument(
        "--arrive-by", action="store_true", help="Treat date/time as the arrival time"
    )
    plan_parser.add_argument(
        "--wheelchair", action="store_true", help="Require wheelchair accessible trips"
    )
    plan_parser.add_argument("--max-walk-distance", type=float, help="Meters (default: 800)")
    plan_parser.add_argument("--walk-speed", type=float, help="Meters/second (default: 1.33)")
    plan_parser.add_argument("--optimize", help="QUICK, SAFE, FLAT, GREENWAYS or TRANSFERS")
    plan_parser.add_argument("--modes", help='Comma-separated modes (default: "TRANSIT,WALK")')
    plan_parser.add_argument("-n", "--num-itineraries", type=int, help="1-3 (default: 3)")
    plan_parser.add_argument(
        "--show-intermediate-stops", action="store_true", help="Include stops passed on each leg"
    )
    plan_parser.add_argument(
        "--min-transfer-time", type=int, help="Seconds between vehicles (default: 240)"
    )
    plan_parser.add_argument("--preferred-routes", help="Comma-separated routes to favour")
    plan_parser.add_argument(
        "--unpreferred-routes", help="Comma-separated routes to avoid when possible"
    )
    plan_parser.add_argument("--banned-routes", help="Comma-separated routes never to use")

    args = parser.parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command == "plan":
        asyncio.run(run_plan(args))
    else:
        # Default: run MCP server
        mcp.run()


if __name__ == "__main__":
    main()
