import logging

import httpx

from plan_ws.data.config import PlannerConfig
from plan_ws.models.engine import EngineFailure, EngineResponse
from plan_ws.models.failures import FailureKind, SearchFailure
from plan_ws.models.plan import TripPlan
from plan_ws.models.request import PlanRequest
from plan_ws.services.planning_endpoint import EngineUnavailableError

logger = logging.getLogger(__name__)

DEFAULT_ROUTER = "default"


class RemotePathService:
    """Async HTTP client for a remote path-search engine.

    Usage:
        async with RemotePathService(config) as engine:
            outcome = await engine.plan(request)
    """

    def __init__(self, config: PlannerConfig):
        """Initialize the client.

        Args:
            config: Configuration with engine URL, API key and timeout.
        """
        self._config = config
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "RemotePathService":
        """Enter async context - create HTTP client."""
        headers = {}
        if self._config.engine_api_key:
            headers["apikey"] = self._config.engine_api_key
        self._client = httpx.AsyncClient(
            headers=headers, timeout=self._config.engine_timeout_seconds
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context - close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    def plan_url(self, router_id: str) -> str:
        """URL of the plan endpoint for a routing graph ("" selects the default)."""
        base = self._config.engine_url.rstrip("/")
        return f"{base}/routers/{router_id or DEFAULT_ROUTER}/plan"

    async def plan(self, request: PlanRequest) -> TripPlan | SearchFailure:
        """Run a trip search on the remote engine.

        Returns:
            TripPlan on success, SearchFailure when the engine reports one or
            answers with something unusable.

        Raises:
            RuntimeError: If client not initialized.
            EngineUnavailableError: If the engine is unreachable or answers 5xx.
        """
        if not self._client:
            raise RuntimeError("Client not initialized - use 'async with'")

        url = self.plan_url(request.router_id)
        try:
            response = await self._client.post(url, json=request.model_dump(mode="json"))
        except httpx.TransportError as e:
            raise EngineUnavailableError(f"Routing engine unreachable at {url}: {e}") from e

        if response.status_code >= 500:
            raise EngineUnavailableError(
                f"Routing engine at {url} returned HTTP {response.status_code}"
            )
        if response.status_code >= 400:
            logger.warning(f"Routing engine rejected request with HTTP {response.status_code}")
            return SearchFailure.unknown(f"Engine returned HTTP {response.status_code}")

        try:
            body = EngineResponse.model_validate(response.json())
        except ValueError as e:
            logger.warning(f"Malformed routing engine response: {e}")
            return SearchFailure.unknown(e)

        logger.debug(f"Routing engine answered for router '{request.router_id or DEFAULT_ROUTER}'")
        return _to_outcome(body)


def _to_outcome(body: EngineResponse) -> TripPlan | SearchFailure:
    """Convert a parsed engine response into a plan or a SearchFailure."""
    if body.plan is not None:
        return body.plan
    if body.failure is None:
        return SearchFailure.unknown("Engine response has neither plan nor failure")
    return _to_failure(body.failure)


def _to_failure(failure: EngineFailure) -> SearchFailure:
    try:
        kind = FailureKind(failure.kind.lower())
    except ValueError:
        return SearchFailure.unknown(f"Unrecognized failure kind: {failure.kind}")

    if kind is FailureKind.UNRESOLVABLE:
        return SearchFailure.unresolvable(*failure.missing)
    if kind is FailureKind.UNKNOWN:
        return SearchFailure.unknown(failure.message)
    return SearchFailure(kind)
