from typing import Any, Optional, TypedDict

from climateguard.models.assessment import AssessmentContext, AssessmentMode


class AssessmentState(TypedDict, total=False):
    # Input
    mode: str                                # "assess" | "predict"
    location: str
    property_type: str
    timeframe: int
    scenario: str

    # --- RiskAssessmentAgent / RiskPredictionAgent outputs ---
    risk_results: Any                        # parsed JSON or fallback levels
    risk_used_fallback: bool

    # --- InsightsAgent outputs ---
    insights: Optional[Any]                  # None when the insights call failed
    insights_used_fallback: bool
    insights_error: Optional[str]


def initial_state(mode: AssessmentMode, context: AssessmentContext) -> AssessmentState:
    return {
        "mode": AssessmentMode(mode).value,
        "location": context.location,
        "property_type": context.property_type,
        "timeframe": int(context.timeframe),
        "scenario": context.scenario,
    }


def context_from_state(state: AssessmentState) -> AssessmentContext:
    return AssessmentContext(
        location=state["location"],
        property_type=state["property_type"],
        timeframe=state["timeframe"],
        scenario=state["scenario"],
    )
