from enum import Enum, IntEnum
from pydantic import BaseModel, ConfigDict


class AssessmentMode(str, Enum):
    ASSESS = "assess"
    PREDICT = "predict"
    INSIGHTS = "insights"


class PropertyType(str, Enum):
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    INDUSTRIAL = "industrial"
    AGRICULTURAL = "agricultural"


class Timeframe(IntEnum):
    FIVE_YEARS = 5
    TEN_YEARS = 10
    TWENTY_FIVE_YEARS = 25
    FIFTY_YEARS = 50


class Scenario(str, Enum):
    OPTIMISTIC = "optimistic"   # 1.5°C
    MODERATE = "moderate"       # 2.0°C
    SEVERE = "severe"           # 3.0°C+


class AssessmentContext(BaseModel):
    """User parameters for one pipeline run.

    Enum fields, defaults included, are stored as their plain values so they
    drop straight into prompt text. Timeframe and scenario only shape
    projection-mode prompts and the insights prompt; assess-mode runs carry
    the form defaults.
    """

    location: str
    property_type: PropertyType = PropertyType.RESIDENTIAL
    timeframe: Timeframe = Timeframe.TEN_YEARS
    scenario: Scenario = Scenario.MODERATE

    model_config = ConfigDict(frozen=True, use_enum_values=True, validate_default=True)
