import traceback
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from climateguard.config.settings import settings
from climateguard.exceptions import AssessmentFailedError, LocationRequiredError, PipelineBusyError
from climateguard.v1.routes.climate import router as climate_router


app = FastAPI(
    title="ClimateGuard AI",
    version="1.0.0",
    description="AI-powered climate risk assessment for flood, heat and wildfire hazards",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["*"],
)


@app.exception_handler(LocationRequiredError)
async def location_required_handler(request: Request, exc: LocationRequiredError):
    return JSONResponse(status_code=400, content={"detail": exc.message})


@app.exception_handler(PipelineBusyError)
async def pipeline_busy_handler(request: Request, exc: PipelineBusyError):
    return JSONResponse(status_code=409, content={"detail": exc.message})


@app.exception_handler(AssessmentFailedError)
async def assessment_failed_handler(request: Request, exc: AssessmentFailedError):
    return JSONResponse(status_code=502, content={"detail": exc.alert})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    traceback.print_exc()
    return JSONResponse(
        status_code=500,
        content={"detail": str(exc) or "Internal server error"},
        headers={"Access-Control-Allow-Origin": "*"},
    )


app.include_router(climate_router, prefix="/api/v1")


@app.get("/health", tags=["health"])
async def health():
    return {"status": "ok", "service": "climateguard"}
