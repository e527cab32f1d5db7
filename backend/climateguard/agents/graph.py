"""
LangGraph pipeline — ClimateGuard risk assessment
=================================================

Agent execution order:

  START
    │
    ├── mode == "assess" ──► RiskAssessmentAgent ──┐
    │                                              │
    └── mode == "predict" ─► RiskPredictionAgent ──┤
                                                   ▼
                                             InsightsAgent
                                                   │
                                                  END

Exactly one risk agent runs per invocation. InsightsAgent always follows it;
if the risk agent raises (TransportError) the run stops there and the error
propagates to the caller.

Run config (`configurable`):
  model_client     — object with `async invoke(PromptPayload) -> str`
  publish_results  — optional callback, receives risk results as soon as they exist
"""

from langgraph.graph import StateGraph, START, END

from climateguard.agents.state.assessment_state import AssessmentState
from climateguard.agents.nodes.risk_agent import risk_assessment_agent, risk_prediction_agent
from climateguard.agents.nodes.insights_agent import generate_insights

RISK_ASSESSMENT_AGENT = "RiskAssessmentAgent"
RISK_PREDICTION_AGENT = "RiskPredictionAgent"
INSIGHTS_AGENT = "InsightsAgent"


def _route_by_mode(state: AssessmentState) -> str:
    return "predict" if state.get("mode") == "predict" else "assess"


def build_graph():
    graph = StateGraph(AssessmentState)

    graph.add_node(RISK_ASSESSMENT_AGENT, risk_assessment_agent)
    graph.add_node(RISK_PREDICTION_AGENT, risk_prediction_agent)
    graph.add_node(INSIGHTS_AGENT, generate_insights)

    graph.add_conditional_edges(
        START,
        _route_by_mode,
        {"assess": RISK_ASSESSMENT_AGENT, "predict": RISK_PREDICTION_AGENT},
    )
    graph.add_edge(RISK_ASSESSMENT_AGENT, INSIGHTS_AGENT)
    graph.add_edge(RISK_PREDICTION_AGENT, INSIGHTS_AGENT)
    graph.add_edge(INSIGHTS_AGENT, END)

    return graph.compile()


assessment_graph = build_graph()
