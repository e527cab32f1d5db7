"""
ClimateRiskService
==================
Owns the pipeline state the dashboard renders from:

  loading   — a run is in flight
  results   — flood/heat/wildfire levels from the last completed risk call
  insights  — insights from the same run as `results`, or None
  error     — user-facing alert from the last failed run, or None

State only changes through `run_assessment` / `run_prediction`. Readers get
snapshots via `state`, or register a callback with `subscribe` to be told about
every change.

Only one run may be in flight; a second call while `loading` is true is
rejected with PipelineBusyError instead of letting two runs race on `results`.
"""

from typing import Callable

from climateguard.agents.graph import assessment_graph
from climateguard.agents.state.assessment_state import initial_state
from climateguard.exceptions import (
    AssessmentFailedError,
    LocationRequiredError,
    PipelineBusyError,
    TransportError,
)
from climateguard.models.assessment import AssessmentContext, AssessmentMode
from climateguard.models.pipeline import PipelineState
from climateguard.services.model_client import ModelClient

Subscriber = Callable[[PipelineState], None]

FAILURE_ALERTS = {
    AssessmentMode.ASSESS: "AI analysis failed. Please check your AWS credentials.",
    AssessmentMode.PREDICT: "AI prediction failed. Please check your AWS credentials.",
}


class ClimateRiskService:
    def __init__(self, model_client: ModelClient | None = None, graph=None):
        self.model_client = model_client if model_client is not None else ModelClient()
        self._graph = graph if graph is not None else assessment_graph
        self._state = PipelineState()
        self._subscribers: list[Subscriber] = []

    # ── Read side ────────────────────────────────────────────────────────────

    @property
    def state(self) -> PipelineState:
        return self._state.snapshot()

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Call `callback` with a snapshot after every state change. Returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _update(self, **changes) -> None:
        self._state = self._state.evolve(**changes)
        for callback in list(self._subscribers):
            try:
                callback(self._state.snapshot())
            except Exception as e:
                print(f"[ClimateRiskService] Subscriber error: {e}")

    def _publish_results(self, results) -> None:
        # Called by the risk agent as soon as it has results, before insights start.
        # New results replace the previous run's insights in the same step.
        self._update(results=results, insights=None)

    # ── Entry points ─────────────────────────────────────────────────────────

    async def run_assessment(self, context: AssessmentContext) -> PipelineState:
        """Current-conditions risk levels, then insights."""
        return await self._run(AssessmentMode.ASSESS, context)

    async def run_prediction(self, context: AssessmentContext) -> PipelineState:
        """Projected risk levels for the context's timeframe and scenario, then insights."""
        return await self._run(AssessmentMode.PREDICT, context)

    async def _run(self, mode: AssessmentMode, context: AssessmentContext) -> PipelineState:
        if not context.location or not context.location.strip():
            print(f"[ClimateRiskService] {mode.value} rejected — no location given")
            raise LocationRequiredError()

        # No await between the check and the transition, so this is atomic on the loop.
        if self._state.loading:
            print(f"[ClimateRiskService] {mode.value} rejected — a run is already in flight")
            raise PipelineBusyError()

        print(f"\n[ClimateRiskService] Starting {mode.value} run for {context.location!r}")
        self._update(loading=True, error=None)

        try:
            final_state = await self._graph.ainvoke(
                initial_state(mode, context),
                config={
                    "configurable": {
                        "model_client": self.model_client,
                        "publish_results": self._publish_results,
                    }
                },
            )
            if final_state.get("insights") is not None:
                self._update(insights=final_state["insights"])
        except TransportError as e:
            alert = FAILURE_ALERTS[mode]
            print(f"[ClimateRiskService] Error with AI {mode.value}: {e}")
            self._update(error=alert)
            raise AssessmentFailedError(alert) from e
        finally:
            self._update(loading=False)

        print(f"[ClimateRiskService] Done — {mode.value} run for {context.location!r}")
        return self.state


_service: ClimateRiskService | None = None


def get_climate_service() -> ClimateRiskService:
    """FastAPI dependency: the process-wide service (state lives in memory only)."""
    global _service
    if _service is None:
        _service = ClimateRiskService()
    return _service
