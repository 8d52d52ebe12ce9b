from enum import Enum

from pydantic import BaseModel, Field, model_validator

from plan_ws.models.failures import MissingLocation
from plan_ws.models.plan import TripPlan
from plan_ws.models.request import PlanRequest


class ErrorCode(str, Enum):
    """Caller-facing planner error codes."""

    SYSTEM_ERROR = "SYSTEM_ERROR"
    OUTSIDE_BOUNDS = "OUTSIDE_BOUNDS"
    PATH_NOT_FOUND = "PATH_NOT_FOUND"
    NO_TRANSIT_TIMES = "NO_TRANSIT_TIMES"
    LOCATION_NOT_ACCESSIBLE = "LOCATION_NOT_ACCESSIBLE"


class PlannerError(BaseModel):
    """Why no plan could be produced."""

    code: ErrorCode
    id: int = Field(description="Stable numeric identifier of the error code")
    msg: str = Field(description="Human-readable explanation")
    missing: list[MissingLocation] | None = Field(
        default=None,
        description="Locations that could not be resolved (OUTSIDE_BOUNDS only)",
    )


class PlanningResponse(BaseModel):
    """Response for a trip planning call.

    The normalized request is always echoed back; exactly one of plan and
    error is set.
    """

    request: PlanRequest
    plan: TripPlan | None = None
    error: PlannerError | None = None

    @model_validator(mode="after")
    def _check_outcome(self) -> "PlanningResponse":
        if (self.plan is None) == (self.error is None):
            raise ValueError("Exactly one of plan or error must be set")
        return self

    @property
    def success(self) -> bool:
        return self.plan is not None
