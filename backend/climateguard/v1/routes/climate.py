import asyncio
import json
from typing import AsyncIterator

from fastapi import APIRouter, Body, Depends
from fastapi.responses import StreamingResponse

from climateguard.models.assessment import AssessmentContext
from climateguard.models.pipeline import PipelineState
from climateguard.schemas.climate import (
    AssessmentRequest,
    DashboardResponse,
    PipelineSnapshot,
    PredictionRequest,
)
from climateguard.services.climate_risk_service import ClimateRiskService, get_climate_service
from climateguard.utils.risk_display import CLIMATE_REFERENCE_DATA, hazard_cards, insight_items

router = APIRouter(prefix="/climate", tags=["climate"])


def _snapshot(state: PipelineState) -> PipelineSnapshot:
    return PipelineSnapshot(**state.to_dict())


@router.post("/assess", response_model=PipelineSnapshot)
async def assess(
    req: AssessmentRequest = Body(
        openapi_examples={
            "coastal": {
                "summary": "Coastal city, residential",
                "value": {"location": "Miami, FL", "property_type": "residential"},
            },
            "mountain": {
                "summary": "Mountain region, commercial",
                "value": {"location": "Denver, CO", "property_type": "commercial"},
            },
        }
    ),
    service: ClimateRiskService = Depends(get_climate_service),
):
    context = AssessmentContext(location=req.location, property_type=req.property_type)
    return _snapshot(await service.run_assessment(context))


@router.post("/predict", response_model=PipelineSnapshot)
async def predict(
    req: PredictionRequest = Body(
        openapi_examples={
            "severe_50": {
                "summary": "50-year horizon, severe scenario",
                "value": {
                    "location": "Phoenix, AZ",
                    "property_type": "residential",
                    "timeframe": 50,
                    "scenario": "severe",
                },
            },
            "optimistic_5": {
                "summary": "5-year horizon, optimistic scenario",
                "value": {
                    "location": "Seattle, WA",
                    "property_type": "industrial",
                    "timeframe": 5,
                    "scenario": "optimistic",
                },
            },
        }
    ),
    service: ClimateRiskService = Depends(get_climate_service),
):
    context = AssessmentContext(
        location=req.location,
        property_type=req.property_type,
        timeframe=req.timeframe,
        scenario=req.scenario,
    )
    return _snapshot(await service.run_prediction(context))


@router.get("/state", response_model=PipelineSnapshot)
async def state(service: ClimateRiskService = Depends(get_climate_service)):
    return _snapshot(service.state)


async def state_events(service: ClimateRiskService) -> AsyncIterator[str]:
    """
    Server-Sent Events, one per state change:
      {"type": "state", "data": {...PipelineSnapshot...}}
    The first event is the current state.
    """
    queue: asyncio.Queue[PipelineState] = asyncio.Queue()
    unsubscribe = service.subscribe(queue.put_nowait)
    try:
        current = service.state
        while True:
            payload = {"type": "state", "data": _snapshot(current).model_dump()}
            yield f"data: {json.dumps(payload)}\n\n"
            current = await queue.get()
    finally:
        unsubscribe()


@router.get("/stream")
async def stream(service: ClimateRiskService = Depends(get_climate_service)):
    return StreamingResponse(state_events(service), media_type="text/event-stream")


@router.get("/dashboard", response_model=DashboardResponse)
async def dashboard(service: ClimateRiskService = Depends(get_climate_service)):
    current = service.state
    return DashboardResponse(
        loading=current.loading,
        error=current.error,
        hazards=hazard_cards(current.results),
        insights=insight_items(current.insights),
    )


@router.get("/reference")
async def reference():
    return CLIMATE_REFERENCE_DATA
