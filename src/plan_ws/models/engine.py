import logging

from pydantic import BaseModel, ConfigDict, field_validator

from plan_ws.models.failures import MissingLocation
from plan_ws.models.plan import TripPlan

logger = logging.getLogger(__name__)


class EngineFailure(BaseModel):
    """Failure reported by the remote routing engine.

    ``kind`` is kept as a plain string so that kinds this service does not
    know about still parse and can be reported as unknown failures.
    """

    model_config = ConfigDict(extra="ignore")

    kind: str
    missing: list[MissingLocation] = []
    message: str | None = None

    @field_validator("missing", mode="before")
    @classmethod
    def _parse_missing(cls, value):
        """Match location names case-insensitively and skip unknown ones."""
        if not isinstance(value, list):
            return value
        known = {location.value for location in MissingLocation}
        names = []
        for entry in value:
            name = entry.strip().lower() if isinstance(entry, str) else entry
            if name in known:
                names.append(name)
            else:
                logger.warning(f"Ignoring unknown missing location from engine: {entry!r}")
        return names


class EngineResponse(BaseModel):
    """Top-level response from the engine's plan endpoint."""

    model_config = ConfigDict(extra="ignore")

    plan: TripPlan | None = None
    failure: EngineFailure | None = None
