"""Tests for the planning endpoint."""

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from plan_ws.models.failures import MissingLocation, SearchFailure
from plan_ws.models.plan import TripPlan
from plan_ws.models.request import PlanParams
from plan_ws.models.responses import ErrorCode
from plan_ws.services.planning_endpoint import EngineUnavailableError, plan_trip

NOW = datetime(2024, 3, 15, 8, 30)


def _engine(outcome=None, side_effect=None) -> MagicMock:
    """Create a fake path-search engine."""
    engine = MagicMock()
    engine.plan = AsyncMock(return_value=outcome, side_effect=side_effect)
    return engine


def _params(**kwargs) -> PlanParams:
    fields = {"from": "40.7,-74.0", "to": "40.8,-73.9"}
    fields.update(kwargs)
    return PlanParams.model_validate(fields)


class TestSuccess:
    """Tests for successful plans."""

    async def test_plan_wrapped_unchanged(self, trip_plan: TripPlan) -> None:
        """The engine's plan should be returned as-is."""
        response = await plan_trip(_params(), _engine(trip_plan), now=NOW)

        assert response.plan == trip_plan
        assert response.error is None
        assert response.success is True

    async def test_request_echoed(self, trip_plan: TripPlan) -> None:
        """The normalized request should be echoed and passed to the engine."""
        engine = _engine(trip_plan)
        response = await plan_trip(_params(numItineraries=2), engine, now=NOW)

        engine.plan.assert_awaited_once_with(response.request)
        assert response.request.num_itineraries == 2


class TestDomainFailures:
    """Tests for failures reported by the engine."""

    async def test_unresolvable_destination(self) -> None:
        """An unresolvable destination should give OUTSIDE_BOUNDS with detail."""
        engine = _engine(SearchFailure.unresolvable(MissingLocation.TO))
        response = await plan_trip(_params(), engine, now=NOW)

        assert response.plan is None
        assert response.error.code == ErrorCode.OUTSIDE_BOUNDS
        assert response.error.missing == [MissingLocation.TO]

    @pytest.mark.parametrize(
        ("failure", "code"),
        [
            (SearchFailure.no_path(), ErrorCode.PATH_NOT_FOUND),
            (SearchFailure.inaccessible(), ErrorCode.LOCATION_NOT_ACCESSIBLE),
            (SearchFailure.no_service_window(), ErrorCode.NO_TRANSIT_TIMES),
            (SearchFailure.unknown("unexpected"), ErrorCode.SYSTEM_ERROR),
        ],
    )
    async def test_failure_codes(self, failure: SearchFailure, code: ErrorCode) -> None:
        """Each reported failure should map to its error code."""
        response = await plan_trip(_params(), _engine(failure), now=NOW)

        assert response.plan is None
        assert response.error.code == code
        assert response.success is False

    async def test_end_to_end_clamp_and_no_path(self) -> None:
        """Ten itineraries are clamped to three; no path gives PATH_NOT_FOUND."""
        engine = _engine(SearchFailure.no_path())
        response = await plan_trip(_params(numItineraries=10), engine, now=NOW)

        sent = engine.plan.await_args.args[0]
        assert sent.num_itineraries == 3
        assert response.request.num_itineraries == 3
        assert response.plan is None
        assert response.error.code == ErrorCode.PATH_NOT_FOUND
        assert response.error.missing is None


class TestUnexpectedFailures:
    """Tests for engine misbehaviour."""

    async def test_exception_becomes_system_error(self) -> None:
        """An unexpected exception should become SYSTEM_ERROR, not propagate."""
        engine = _engine(side_effect=KeyError("vertex 1234"))
        response = await plan_trip(_params(), engine, now=NOW)

        assert response.plan is None
        assert response.error.code == ErrorCode.SYSTEM_ERROR
        assert "1234" not in response.error.msg

    async def test_unexpected_result_becomes_system_error(self) -> None:
        """An engine result that is neither plan nor failure is SYSTEM_ERROR."""
        response = await plan_trip(_params(), _engine({"itineraries": []}), now=NOW)

        assert response.error.code == ErrorCode.SYSTEM_ERROR

    async def test_engine_unavailable_propagates(self) -> None:
        """Infrastructure faults are not converted into a response."""
        engine = _engine(side_effect=EngineUnavailableError("connection refused"))

        with pytest.raises(EngineUnavailableError):
            await plan_trip(_params(), engine, now=NOW)
