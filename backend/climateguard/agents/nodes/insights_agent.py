"""
InsightsAgent
=============
Second call of a run, only reached once the risk call has produced results.
Asks the model for three adaptation insights covering all four context fields.

Failures here never reach the user. A transport failure (or anything else that
goes wrong) leaves `insights` unset for this run; a reply that is not valid
JSON is replaced by a single templated insight.
"""

from langchain_core.runnables import RunnableConfig

from climateguard.agents.prompts import build_prompt
from climateguard.agents.response_parser import parse_insights_reply
from climateguard.agents.state.assessment_state import AssessmentState, context_from_state
from climateguard.models.assessment import AssessmentMode


async def generate_insights(state: AssessmentState, config: RunnableConfig) -> AssessmentState:
    """InsightsAgent: narrative insights for the assessed location."""
    context = context_from_state(state)
    model_client = config["configurable"]["model_client"]

    print(f"\n{'='*60}")
    print("[InsightsAgent] Starting — generating climate insights")
    print(f"  location      = {context.location!r}")
    print(f"  property_type = {context.property_type!r}")
    print(f"  timeframe     = {context.timeframe} years")
    print(f"  scenario      = {context.scenario!r}")
    print(f"{'='*60}")

    try:
        raw = await model_client.invoke(build_prompt(AssessmentMode.INSIGHTS, context))
        insights, used_fallback = parse_insights_reply(raw, context)
    except Exception as e:
        print(f"[InsightsAgent] Error generating insights: {e} — leaving insights unset")
        return {"insights": None, "insights_used_fallback": False, "insights_error": str(e)}

    count = len(insights) if isinstance(insights, list) else 0
    print(f"[InsightsAgent] Done — {count} insight(s), fallback={used_fallback}")

    return {"insights": insights, "insights_used_fallback": used_fallback, "insights_error": None}
