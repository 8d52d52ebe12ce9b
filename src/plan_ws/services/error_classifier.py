"""Maps trip search failures onto the caller-facing error codes.

The mapping is total: any failure kind without an entry becomes
SYSTEM_ERROR. The underlying cause of an unexpected failure is logged and
never copied into the response.
"""

import logging

from plan_ws.models.failures import FailureKind, SearchFailure
from plan_ws.models.responses import ErrorCode, PlannerError

logger = logging.getLogger(__name__)

ERROR_CODES: dict[FailureKind, ErrorCode] = {
    FailureKind.UNRESOLVABLE: ErrorCode.OUTSIDE_BOUNDS,
    FailureKind.NO_PATH: ErrorCode.PATH_NOT_FOUND,
    FailureKind.INACCESSIBLE: ErrorCode.LOCATION_NOT_ACCESSIBLE,
    FailureKind.NO_SERVICE_WINDOW: ErrorCode.NO_TRANSIT_TIMES,
}

ERROR_IDS: dict[ErrorCode, int] = {
    ErrorCode.SYSTEM_ERROR: 500,
    ErrorCode.OUTSIDE_BOUNDS: 400,
    ErrorCode.PATH_NOT_FOUND: 404,
    ErrorCode.NO_TRANSIT_TIMES: 406,
    ErrorCode.LOCATION_NOT_ACCESSIBLE: 470,
}

ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.SYSTEM_ERROR: (
        "We're sorry. The trip planner is temporarily unavailable. Please try again later."
    ),
    ErrorCode.OUTSIDE_BOUNDS: (
        "Trip is not possible. You might be trying to plan a trip outside the map data boundary."
    ),
    ErrorCode.PATH_NOT_FOUND: (
        "Trip is not possible. Your start or end point might not be safely accessible."
    ),
    ErrorCode.NO_TRANSIT_TIMES: (
        "No transit times available. The date may be past or too far in the future, "
        "or there may not be transit service for your trip at the time you chose."
    ),
    ErrorCode.LOCATION_NOT_ACCESSIBLE: (
        "The location was found, but it cannot be reached from the transit network."
    ),
}


def make_error(code: ErrorCode, missing: list | None = None) -> PlannerError:
    """Create a PlannerError with the stable id and message for a code."""
    return PlannerError(
        code=code,
        id=ERROR_IDS[code],
        msg=ERROR_MESSAGES[code],
        missing=missing,
    )


def classify_failure(failure: SearchFailure) -> PlannerError:
    """Convert a search failure into a PlannerError.

    Args:
        failure: Failure reported by (or on behalf of) the search engine

    Returns:
        PlannerError; only OUTSIDE_BOUNDS carries the missing locations
    """
    code = ERROR_CODES.get(failure.kind, ErrorCode.SYSTEM_ERROR)

    if code is ErrorCode.OUTSIDE_BOUNDS:
        return make_error(code, missing=list(failure.missing) or None)

    if code is ErrorCode.SYSTEM_ERROR:
        cause = failure.cause
        if isinstance(cause, BaseException):
            logger.error("Exception planning trip", exc_info=cause)
        else:
            logger.error(f"Trip planning failed ({failure.kind.value}): {cause}")

    return make_error(code)
