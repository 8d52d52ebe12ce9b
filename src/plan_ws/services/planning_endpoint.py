"""Planning endpoint: build the request, run the search, shape the response.

Domain failures never escape: every call returns a PlanningResponse, either
with a plan or with a PlannerError. Only EngineUnavailableError, raised when
the engine itself cannot be reached, propagates to the caller.
"""

import logging
from datetime import datetime
from typing import Protocol

from plan_ws.models.failures import SearchFailure
from plan_ws.models.plan import TripPlan
from plan_ws.models.request import PlanParams, PlanRequest
from plan_ws.models.responses import PlanningResponse
from plan_ws.services.error_classifier import classify_failure
from plan_ws.services.request_builder import build_request

logger = logging.getLogger(__name__)


class EngineUnavailableError(Exception):
    """The path-search engine could not be reached or crashed."""


class PathService(Protocol):
    """A path-search engine.

    Implementations report domain failures by returning a SearchFailure and
    raise EngineUnavailableError for infrastructure faults.
    """

    async def plan(self, request: PlanRequest) -> TripPlan | SearchFailure: ...


async def _search(engine: PathService, request: PlanRequest) -> TripPlan | SearchFailure:
    """Run the search, folding unexpected exceptions into an UNKNOWN failure."""
    try:
        outcome = await engine.plan(request)
    except EngineUnavailableError:
        raise
    except Exception as e:
        return SearchFailure.unknown(e)

    if isinstance(outcome, (TripPlan, SearchFailure)):
        return outcome
    return SearchFailure.unknown(f"Unexpected engine result: {type(outcome).__name__}")


async def plan_trip(
    params: PlanParams,
    engine: PathService,
    now: datetime | None = None,
) -> PlanningResponse:
    """Plan a trip.

    Args:
        params: Decoded planning parameters
        engine: Path-search engine to run the request against
        now: Reference time for a missing date or time (default: now)

    Returns:
        PlanningResponse echoing the request, with either a plan or an error

    Raises:
        EngineUnavailableError: If the engine cannot be reached.
    """
    request = build_request(params, now=now)
    logger.debug(
        f"Planning trip {request.from_place} -> {request.to_place} "
        f"(router={request.router_id or 'default'})"
    )

    outcome = await _search(engine, request)

    if isinstance(outcome, SearchFailure):
        return PlanningResponse(request=request, error=classify_failure(outcome))

    return PlanningResponse(request=request, plan=outcome)
