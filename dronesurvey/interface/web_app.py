"""Mini README: FastAPI surface for Dronesurvey flight plan generation.

Structure:
    * PatternGenerationRequest - validated JSON body for pattern generation.
    * create_application - application factory wiring the planning routes.

The service mirrors the mission planner's ``generate-pattern`` call without
mission persistence: callers post a survey boundary with flight parameters
and receive the ordered waypoints plus distance and duration estimates.
Boundary and planning problems are reported as HTTP 400.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..configuration import PlannerSettings, get_settings
from ..logging_utils import get_logger
from ..missions import FlightPlanService
from ..route_planning import PatternType

LOGGER = get_logger(__name__)


class PatternGenerationRequest(BaseModel):
    """Flight parameters for a single coverage pattern."""

    boundary: Union[str, Dict[str, Any]] = Field(
        ..., description="GeoJSON Polygon (object or encoded text) describing the survey area."
    )
    pattern_type: PatternType
    altitude: int = Field(..., ge=10, le=500, description="Flight altitude in metres.")
    overlap_percentage: int = Field(
        ..., ge=0, le=100, description="Overlap between adjacent passes."
    )


def create_application(settings: Optional[PlannerSettings] = None) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    app = FastAPI(title="Dronesurvey Planner", version="0.3.0")
    service = FlightPlanService(settings or get_settings())

    @app.get("/health")
    async def health() -> Dict[str, str]:
        return {"status": "ok"}

    @app.post("/missions/generate-pattern")
    def generate_pattern(request: PatternGenerationRequest) -> JSONResponse:
        """Return a generated coverage path for the provided boundary."""

        try:
            plan = service.generate_pattern(
                request.boundary,
                request.pattern_type,
                request.altitude,
                request.overlap_percentage,
            )
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        LOGGER.info(
            "Generated %s route with %s waypoints",
            request.pattern_type.value,
            len(plan.path),
        )
        return JSONResponse(plan.as_dict())

    return app
