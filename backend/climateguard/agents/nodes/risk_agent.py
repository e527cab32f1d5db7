"""
RiskAssessmentAgent / RiskPredictionAgent
=========================================
First call of every run. Builds the assess or predict prompt, calls the model
and parses the reply into flood/heat/wildfire levels.

  assess  — current conditions for the location and property type
  predict — projection over the chosen timeframe under the chosen scenario

An unparseable reply is replaced by the mode's fixed fallback levels.
TransportError is NOT caught here: a failed primary call has to reach the
ClimateRiskService so the user can be told.

If the run config carries a `publish_results` callback it is called with the
results before this node returns, so they are visible before InsightsAgent
starts.
"""

from langchain_core.runnables import RunnableConfig

from climateguard.agents.prompts import build_prompt
from climateguard.agents.response_parser import parse_risk_reply
from climateguard.agents.state.assessment_state import AssessmentState, context_from_state
from climateguard.models.assessment import AssessmentMode


async def _run_risk_call(agent_name: str, mode: AssessmentMode, state: AssessmentState, config: RunnableConfig) -> AssessmentState:
    context = context_from_state(state)
    model_client = config["configurable"]["model_client"]

    print(f"\n{'='*60}")
    print(f"[{agent_name}] Starting")
    print(f"  location      = {context.location!r}")
    print(f"  property_type = {context.property_type!r}")
    if mode is AssessmentMode.PREDICT:
        print(f"  timeframe     = {context.timeframe} years")
        print(f"  scenario      = {context.scenario!r}")
    print(f"{'='*60}")

    payload = build_prompt(mode, context)
    raw = await model_client.invoke(payload)

    results, used_fallback = parse_risk_reply(raw, mode)

    if isinstance(results, dict):
        for hazard, values in results.items():
            level = values.get("level") if isinstance(values, dict) else values
            print(f"[{agent_name}]   {hazard}: {level}")
    print(f"[{agent_name}] Done — fallback={used_fallback}")

    publish = config["configurable"].get("publish_results")
    if publish is not None:
        publish(results)

    return {"risk_results": results, "risk_used_fallback": used_fallback}


async def risk_assessment_agent(state: AssessmentState, config: RunnableConfig) -> AssessmentState:
    """RiskAssessmentAgent: current-conditions hazard levels."""
    return await _run_risk_call("RiskAssessmentAgent", AssessmentMode.ASSESS, state, config)


async def risk_prediction_agent(state: AssessmentState, config: RunnableConfig) -> AssessmentState:
    """RiskPredictionAgent: projected hazard levels for the timeframe and scenario."""
    return await _run_risk_call("RiskPredictionAgent", AssessmentMode.PREDICT, state, config)
