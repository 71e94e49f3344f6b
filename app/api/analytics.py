"""Analytics endpoints for monitoring dashboards."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from app.api.errors import ERROR_RESPONSES, raise_http_error
from app.api.optimization import SectionsRequest, SnapshotRequest
from app.config import settings
from src.section_engine import (
    DashboardOverview,
    SectionPerformance,
    dashboard_overview,
    section_performance,
)

logger = logging.getLogger(__name__)

router = APIRouter()


class DashboardResponse(BaseModel):
    """Dashboard overview with timestamp."""

    overview: DashboardOverview
    timestamp: datetime


class PerformanceResponse(BaseModel):
    """Sections ranked by efficiency."""

    performance: list[SectionPerformance]


@router.post("/dashboard", response_model=DashboardResponse, responses=ERROR_RESPONSES)
async def get_dashboard(request: SnapshotRequest) -> DashboardResponse:
    """Overall system analytics for a snapshot."""
    try:
        overview = dashboard_overview(
            request.trains, request.sections, settings.engine_config()
        )
    except Exception as e:
        raise_http_error(e, logger)

    return DashboardResponse(overview=overview, timestamp=datetime.now(timezone.utc))


@router.post(
    "/sections/performance",
    response_model=PerformanceResponse,
    responses=ERROR_RESPONSES,
)
async def get_section_performance(request: SectionsRequest) -> PerformanceResponse:
    """Section performance comparison, most efficient first."""
    try:
        performance = section_performance(request.sections, settings.engine_config())
    except Exception as e:
        raise_http_error(e, logger)

    return PerformanceResponse(performance=performance)
