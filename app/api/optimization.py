"""
Optimization endpoints.

These endpoints run the section engine on a caller-supplied snapshot.
No database persistence - computation only.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Query
from pydantic import BaseModel, ConfigDict, Field

from app.api.errors import ERROR_RESPONSES, raise_http_error
from app.config import settings
from src.section_engine import (
    CongestionPrediction,
    ScheduleEntry,
    Section,
    SystemMetrics,
    Train,
    __engine_version__,
    apply_schedule,
    build_schedule,
    compute_metrics,
    predict_congestion,
)

logger = logging.getLogger(__name__)

router = APIRouter()


# --- Request/Response Models ---

class SnapshotRequest(BaseModel):
    """Trains and sections making up one consistent snapshot."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "trains": [
                    {
                        "id": "T-12951",
                        "name": "Mumbai Rajdhani",
                        "current_section": "SEC-01",
                        "max_speed": 130,
                        "delay": 240,
                        "priority": 5
                    }
                ],
                "sections": [
                    {
                        "id": "SEC-01",
                        "name": "Kalyan - Karjat",
                        "max_capacity": 3,
                        "speed_limit": 110,
                        "length": 42000,
                        "current_trains": ["T-12951"]
                    }
                ]
            }
        }
    )

    trains: list[Train] = Field(default_factory=list)
    sections: list[Section] = Field(default_factory=list)


class SectionsRequest(BaseModel):
    """Sections to forecast."""

    sections: list[Section] = Field(default_factory=list)


class ApplyRequest(BaseModel):
    """Recommendations to apply to a train snapshot."""

    trains: list[Train] = Field(default_factory=list)
    recommendations: list[ScheduleEntry] = Field(default_factory=list)


class ScheduleResponse(BaseModel):
    """Adjusted schedule for a snapshot."""

    schedule: list[ScheduleEntry]
    metrics: SystemMetrics
    total_trains: int
    total_sections: int
    timestamp: datetime


class PredictionsResponse(BaseModel):
    """Congestion forecasts for a set of sections."""

    predictions: list[CongestionPrediction]
    time_horizon: float
    timestamp: datetime


class ApplyResponse(BaseModel):
    """Trains updated with recommended speeds."""

    message: str
    updated_trains: int
    updates: list[Train]


class EngineInfoResponse(BaseModel):
    """Response for engine info endpoint."""

    engine_version: str = Field(description="Section engine version")
    description: str = Field(description="Engine description")


def _now() -> datetime:
    return datetime.now(timezone.utc)


# --- Endpoints ---

@router.get("/info", response_model=EngineInfoResponse)
async def get_engine_info() -> EngineInfoResponse:
    """Get section engine information."""
    return EngineInfoResponse(
        engine_version=__engine_version__,
        description="Section capacity scheduling and congestion prediction engine"
    )


@router.post(
    "/schedule",
    response_model=ScheduleResponse,
    responses=ERROR_RESPONSES,
    summary="Build an optimized schedule",
)
async def optimize_schedule(request: SnapshotRequest) -> ScheduleResponse:
    """
    Build the adjusted schedule for a snapshot.

    Trains are allocated to their current sections in priority order
    without exceeding section capacity. Trains that do not fit get no
    entry in this pass.
    """
    logger.info(
        "Building schedule | engine=%s trains=%s sections=%s",
        __engine_version__,
        len(request.trains),
        len(request.sections),
    )

    try:
        config = settings.engine_config()
        metrics = compute_metrics(request.trains, request.sections, config)
        schedule = build_schedule(request.trains, request.sections, config)
    except Exception as e:
        raise_http_error(e, logger)

    logger.info(
        "Schedule complete | entries=%s congestion=%.3f avg_delay=%.1f",
        len(schedule),
        metrics.congestion_level,
        metrics.average_delay,
    )

    return ScheduleResponse(
        schedule=schedule,
        metrics=metrics,
        total_trains=len(request.trains),
        total_sections=len(request.sections),
        timestamp=_now(),
    )


@router.post(
    "/predictions",
    response_model=PredictionsResponse,
    responses=ERROR_RESPONSES,
    summary="Forecast section congestion",
)
async def get_predictions(
    request: SectionsRequest,
    horizon: Optional[float] = Query(
        default=None,
        description="Forecast horizon in minutes (default from settings)"
    ),
) -> PredictionsResponse:
    """Forecast the congestion risk of each section over a short horizon."""
    time_horizon = settings.default_horizon_minutes if horizon is None else horizon
    logger.info(
        "Predicting congestion | sections=%s horizon=%s",
        len(request.sections),
        time_horizon,
    )

    try:
        predictions = predict_congestion(
            request.sections, time_horizon, settings.engine_config()
        )
    except Exception as e:
        raise_http_error(e, logger)

    return PredictionsResponse(
        predictions=predictions,
        time_horizon=time_horizon,
        timestamp=_now(),
    )


@router.post(
    "/metrics",
    response_model=SystemMetrics,
    responses=ERROR_RESPONSES,
    summary="Compute system metrics",
)
async def get_metrics(request: SnapshotRequest) -> SystemMetrics:
    """Average delay, total throughput and congestion level for a snapshot."""
    try:
        return compute_metrics(request.trains, request.sections, settings.engine_config())
    except Exception as e:
        raise_http_error(e, logger)


@router.post(
    "/apply",
    response_model=ApplyResponse,
    responses=ERROR_RESPONSES,
    summary="Apply schedule recommendations",
)
async def apply_optimization(request: ApplyRequest) -> ApplyResponse:
    """
    Return trains updated with their recommended speeds.

    The caller is responsible for persisting the updated trains and
    publishing change notifications.
    """
    try:
        updates = apply_schedule(request.trains, request.recommendations)
    except Exception as e:
        raise_http_error(e, logger)

    logger.info("Applied recommendations | updated=%s", len(updates))

    return ApplyResponse(
        message="Optimization applied successfully",
        updated_trains=len(updates),
        updates=updates,
    )
