"""
Response parser
===============
Model output is untrusted free text. Both parsers try a strict JSON decode and
hand back the decoded value untouched; anything that does not decode is
replaced by a fixed fallback so the pipeline always has something to show.
Neither function raises.
"""

import json
from typing import Any

from climateguard.models.assessment import AssessmentContext, AssessmentMode

ASSESS_FALLBACK: dict[str, dict] = {
    "flood": {"level": "Medium", "percentage": 45},
    "heat": {"level": "Medium", "percentage": 55},
    "wildfire": {"level": "Low", "percentage": 25},
}

PREDICT_FALLBACK: dict[str, dict] = {
    "flood": {"level": "High", "percentage": 75},
    "heat": {"level": "High", "percentage": 80},
    "wildfire": {"level": "Medium", "percentage": 60},
}

FALLBACK_INSIGHT_TITLE = "AI Climate Analysis"

_MISSING = object()


def _decode(raw_text: Any) -> Any:
    """Strict JSON decode. Returns _MISSING instead of raising."""
    if not isinstance(raw_text, (str, bytes, bytearray)):
        return _MISSING
    try:
        return json.loads(raw_text)
    except ValueError:
        return _MISSING


def _preview(raw_text: Any) -> str:
    text = str(raw_text)
    return f"{text[:200]}{'...' if len(text) > 200 else ''}"


def fallback_risk(mode: AssessmentMode | str) -> dict[str, dict]:
    source = PREDICT_FALLBACK if AssessmentMode(mode) is AssessmentMode.PREDICT else ASSESS_FALLBACK
    return {hazard: dict(values) for hazard, values in source.items()}


def fallback_insights(context: AssessmentContext) -> list[dict]:
    return [
        {
            "title": FALLBACK_INSIGHT_TITLE,
            "content": (
                f"Climate analysis for {context.location} shows varying risk levels. "
                f"The AI assessment indicates the need for comprehensive climate adaptation "
                f"planning for {context.property_type} properties."
            ),
        }
    ]


def parse_risk_reply(raw_text: Any, mode: AssessmentMode | str = AssessmentMode.ASSESS) -> tuple[Any, bool]:
    """Decode a risk/prediction response. Returns (results, used_fallback)."""
    decoded = _decode(raw_text)
    if decoded is _MISSING:
        print(f"[ResponseParser] Risk response is not valid JSON — using {AssessmentMode(mode).value} fallback")
        print(f"[ResponseParser]   raw: {_preview(raw_text)}")
        return fallback_risk(mode), True
    return decoded, False


def parse_insights_reply(raw_text: Any, context: AssessmentContext) -> tuple[Any, bool]:
    """Decode an insights response. Returns (insights, used_fallback)."""
    decoded = _decode(raw_text)
    if decoded is _MISSING:
        print("[ResponseParser] Insights response is not valid JSON — using templated insight")
        print(f"[ResponseParser]   raw: {_preview(raw_text)}")
        return fallback_insights(context), True
    return decoded, False


def parse_risk(raw_text: Any, mode: AssessmentMode | str = AssessmentMode.ASSESS) -> Any:
    """Decode a risk/prediction response, or return the mode's fallback levels."""
    return parse_risk_reply(raw_text, mode)[0]


def parse_insights(raw_text: Any, context: AssessmentContext) -> Any:
    """Decode an insights response, or return a single templated insight."""
    return parse_insights_reply(raw_text, context)[0]
