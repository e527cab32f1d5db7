"""
Prompt builder
==============
Turns an AssessmentContext into the persona/task pair sent to the model, with
the sampling settings each call uses:

  assess    — current-conditions risk levels     (temperature 0.7, 300 tokens)
  predict   — projected risk levels for horizon  (temperature 0.7, 400 tokens)
  insights  — three adaptation insights          (temperature 0.8, 800 tokens)
"""

from dataclasses import dataclass

from climateguard.models.assessment import AssessmentContext, AssessmentMode


@dataclass(frozen=True)
class PromptPayload:
    persona: str
    task: str
    temperature: float
    max_tokens: int


ASSESS_PERSONA = (
    "You are a climate risk assessment expert. Analyze the given location and provide "
    "risk levels (Low/Medium/High) for flood, heat, and wildfire risks. Respond with only "
    "a JSON object containing 'flood', 'heat', and 'wildfire' keys, each with 'level' and "
    "'percentage' properties."
)

PREDICT_PERSONA = (
    "You are a climate scientist specializing in future climate projections. Provide "
    "detailed risk assessments considering time-dependent climate change impacts. Respond "
    "with JSON containing 'flood', 'heat', and 'wildfire' risks with 'level' and "
    "'percentage' properties."
)

INSIGHTS_PERSONA = (
    "You are a climate adaptation expert. Generate exactly 3 detailed climate insights for "
    "the given location and property type. Format as a JSON array of objects containing "
    "'title' and 'content' fields."
)


def build_prompt(mode: AssessmentMode | str, context: AssessmentContext) -> PromptPayload:
    mode = AssessmentMode(mode)

    if mode is AssessmentMode.ASSESS:
        return PromptPayload(
            persona=ASSESS_PERSONA,
            task=(
                f"Assess climate risks for {context.location}. "
                f"Consider the property type: {context.property_type}. "
                f"Provide risk analysis in JSON format."
            ),
            temperature=0.7,
            max_tokens=300,
        )

    if mode is AssessmentMode.PREDICT:
        return PromptPayload(
            persona=PREDICT_PERSONA,
            task=(
                f"Predict climate risks for {context.location} over the next {context.timeframe} "
                f"years under {context.scenario} climate scenario for {context.property_type} "
                f"property. Consider accelerating climate change impacts."
            ),
            temperature=0.7,
            max_tokens=400,
        )

    return PromptPayload(
        persona=INSIGHTS_PERSONA,
        task=(
            f"Generate climate insights for {context.location}, {context.property_type} property, "
            f"{context.timeframe}-year timeframe, {context.scenario} climate scenario. "
            f"Include specific recommendations and local climate data."
        ),
        temperature=0.8,
        max_tokens=800,
    )
