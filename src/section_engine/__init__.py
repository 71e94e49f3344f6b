"""
Section-Capacity Scheduling and Congestion-Prediction Engine

Deterministic speed recommendations, capacity-limited section allocation
and short-horizon congestion forecasts for rail traffic snapshots.

This engine is advisory only - it never modifies the snapshots it is given.
"""

__version__ = "0.1.0"
__engine_version__ = "SECT-CAP-0.1.0"

from .config import DEFAULT_CONFIG, EngineConfig
from .engine import (
    apply_schedule,
    build_schedule,
    compute_metrics,
    dashboard_overview,
    predict_congestion,
    section_performance,
)
from .errors import InvalidInputError
from .allocation import make_premium_classifier
from .models import (
    AdvisoryAction,
    CongestionPrediction,
    DashboardOverview,
    RiskLevel,
    ScheduleEntry,
    Section,
    SectionPerformance,
    SectionStatus,
    SystemMetrics,
    Train,
    TrainStatus,
)

__all__ = [
    "__version__",
    "__engine_version__",
    "DEFAULT_CONFIG",
    "EngineConfig",
    "InvalidInputError",
    "apply_schedule",
    "build_schedule",
    "compute_metrics",
    "dashboard_overview",
    "predict_congestion",
    "section_performance",
    "make_premium_classifier",
    "AdvisoryAction",
    "CongestionPrediction",
    "DashboardOverview",
    "RiskLevel",
    "ScheduleEntry",
    "Section",
    "SectionPerformance",
    "SectionStatus",
    "SystemMetrics",
    "Train",
    "TrainStatus",
]
