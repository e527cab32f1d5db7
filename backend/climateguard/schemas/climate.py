from pydantic import BaseModel
from typing import List, Any, Optional

from climateguard.models.assessment import PropertyType, Scenario, Timeframe


class AssessmentRequest(BaseModel):
    location: str
    property_type: PropertyType = PropertyType.RESIDENTIAL

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"location": "San Francisco, CA", "property_type": "residential"},
                {"location": "Miami, FL", "property_type": "commercial"},
            ]
        }
    }


class PredictionRequest(BaseModel):
    location: str
    property_type: PropertyType = PropertyType.RESIDENTIAL
    timeframe: Timeframe = Timeframe.TEN_YEARS
    scenario: Scenario = Scenario.MODERATE

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "location": "Denver, CO",
                    "property_type": "agricultural",
                    "timeframe": 25,
                    "scenario": "severe",
                }
            ]
        }
    }


class PipelineSnapshot(BaseModel):
    loading: bool = False
    # Model output passes through as decoded, so no shape is enforced here.
    results: Optional[Any] = None
    insights: Optional[Any] = None
    error: Optional[str] = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "loading": False,
                    "results": {
                        "flood": {"level": "High", "percentage": 90},
                        "heat": {"level": "Medium", "percentage": 50},
                        "wildfire": {"level": "Low", "percentage": 10},
                    },
                    "insights": [
                        {
                            "title": "Storm Surge Exposure",
                            "content": "Low-lying coastal parcels face rising surge heights; "
                                       "elevate mechanical systems and review flood insurance limits.",
                        }
                    ],
                    "error": None,
                }
            ]
        }
    }


class HazardCard(BaseModel):
    hazard: str
    title: str
    description: str
    level: Optional[str] = None
    percentage: Optional[Any] = None
    css_class: str


class InsightItem(BaseModel):
    title: str
    content: str


class DashboardResponse(BaseModel):
    loading: bool
    error: Optional[str] = None
    hazards: List[HazardCard] = []
    insights: List[InsightItem] = []
