"""
Dashboard helpers. Read-only views over a PipelineState snapshot; nothing in
here feeds back into the pipeline.
"""

from typing import Any

RISK_CLASSES: dict[str, str] = {
    "Low": "risk-low",
    "Medium": "risk-medium",
    "High": "risk-high",
}

HAZARD_CARDS: list[tuple[str, str, str]] = [
    ("flood", "Flood Risk", "Probability of significant flooding in the next decade"),
    ("heat", "Heat Risk", "Extreme temperature events and heat waves"),
    ("wildfire", "Wildfire Risk", "Likelihood of wildfire impact in your area"),
]

# Display-only event-count series shown beside the results.
CLIMATE_REFERENCE_DATA: dict[str, dict[str, list[int]]] = {
    "flood": {
        "historical": [2, 3, 4, 5, 6, 8, 10],
        "projected": [12, 15, 18, 22, 28, 35, 42],
    },
    "heat": {
        "historical": [5, 6, 8, 10, 12, 15, 18],
        "projected": [22, 28, 35, 42, 50, 58, 65],
    },
    "wildfire": {
        "historical": [1, 2, 2, 3, 4, 5, 6],
        "projected": [7, 9, 11, 14, 18, 23, 29],
    },
}


def classify(level: Any) -> str:
    """Map a risk level to its CSS class. Anything unrecognised renders as medium."""
    if isinstance(level, str):
        return RISK_CLASSES.get(level, "risk-medium")
    return "risk-medium"


def _hazard_level(results: Any, hazard: str) -> Any:
    if not isinstance(results, dict):
        return None
    entry = results.get(hazard)
    if isinstance(entry, dict):
        return entry.get("level")
    return None


def _hazard_percentage(results: Any, hazard: str) -> Any:
    if isinstance(results, dict) and isinstance(results.get(hazard), dict):
        return results[hazard].get("percentage")
    return None


def hazard_cards(results: Any) -> list[dict]:
    if results is None:
        return []
    cards = []
    for hazard, title, description in HAZARD_CARDS:
        level = _hazard_level(results, hazard)
        cards.append({
            "hazard": hazard,
            "title": title,
            "description": description,
            "level": level if isinstance(level, str) else None,
            "percentage": _hazard_percentage(results, hazard),
            "css_class": classify(level),
        })
    return cards


def insight_items(insights: Any) -> list[dict]:
    if not isinstance(insights, list):
        return []
    items = []
    for insight in insights:
        if isinstance(insight, dict):
            items.append({
                "title": str(insight.get("title", "")),
                "content": str(insight.get("content", "")),
            })
    return items
