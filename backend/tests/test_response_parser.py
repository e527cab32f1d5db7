import json

import pytest

from climateguard.agents.response_parser import (
    ASSESS_FALLBACK,
    PREDICT_FALLBACK,
    parse_insights,
    parse_insights_reply,
    parse_risk,
    parse_risk_reply,
)
from climateguard.models.assessment import AssessmentContext


@pytest.fixture
def context():
    return AssessmentContext(location="Denver, CO", property_type="agricultural")


def test_parse_risk_returns_decoded_json_unchanged():
    payload = {
        "flood": {"level": "High", "percentage": 90},
        "heat": {"level": "Medium", "percentage": 50},
        "wildfire": {"level": "Low", "percentage": 10},
    }
    assert parse_risk(json.dumps(payload), "assess") == payload


def test_parse_risk_passes_unexpected_shapes_through():
    assert parse_risk('{"flood": "High"}', "assess") == {"flood": "High"}
    assert parse_risk("[1, 2, 3]", "predict") == [1, 2, 3]


@pytest.mark.parametrize("raw", ["I cannot comply.", "", "{flood: High}", '```json\n{"flood": {}}\n```', None, 42])
def test_parse_risk_assess_fallback(raw):
    assert parse_risk(raw, "assess") == {
        "flood": {"level": "Medium", "percentage": 45},
        "heat": {"level": "Medium", "percentage": 55},
        "wildfire": {"level": "Low", "percentage": 25},
    }


def test_parse_risk_predict_fallback():
    assert parse_risk("I cannot comply.", "predict") == {
        "flood": {"level": "High", "percentage": 75},
        "heat": {"level": "High", "percentage": 80},
        "wildfire": {"level": "Medium", "percentage": 60},
    }


def test_fallback_is_a_fresh_copy():
    first = parse_risk("nope", "assess")
    first["flood"]["level"] = "High"
    assert parse_risk("nope", "assess")["flood"]["level"] == "Medium"
    assert ASSESS_FALLBACK["flood"]["level"] == "Medium"
    assert PREDICT_FALLBACK["flood"]["level"] == "High"


def test_parse_insights_returns_decoded_list(context):
    raw = '[{"title": "Drought", "content": "Plan irrigation."}]'
    assert parse_insights(raw, context) == [{"title": "Drought", "content": "Plan irrigation."}]


def test_parse_insights_fallback(context):
    insights = parse_insights("Here are three insights: ...", context)
    assert insights == [
        {
            "title": "AI Climate Analysis",
            "content": (
                "Climate analysis for Denver, CO shows varying risk levels. The AI assessment "
                "indicates the need for comprehensive climate adaptation planning for "
                "agricultural properties."
            ),
        }
    ]


def test_fallback_insight_uses_default_property_type():
    insights = parse_insights("not json", AssessmentContext(location="Boise, ID"))
    assert insights[0]["content"].endswith("planning for residential properties.")


def test_reply_parsers_report_fallback_use(context):
    assert parse_risk_reply('{"flood": {"level": "Low"}}', "assess") == ({"flood": {"level": "Low"}}, False)
    results, used_fallback = parse_risk_reply("I cannot comply.", "predict")
    assert used_fallback is True
    assert results["heat"] == {"level": "High", "percentage": 80}

    assert parse_insights_reply("[]", context) == ([], False)
    insights, used_fallback = parse_insights_reply("nope", context)
    assert used_fallback is True
    assert insights[0]["title"] == "AI Climate Analysis"
