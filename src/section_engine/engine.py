"""
Public entry points of the section-capacity engine.

Each operation validates its snapshot, runs to completion synchronously
and returns fresh result objects. No state is kept between calls.

Scheduling pipeline:
    1. System metrics
    2. Priority ordering and section allocation
    3. Speed, transit time and action per allocated train
    4. Global adjustment pass and confidence scoring
"""

import logging
from typing import Iterable, Optional

from .adjustments import apply_global_adjustments
from .allocation import PremiumClassifier, generate_schedule
from .analytics import rank_section_performance, summarize_dashboard
from .config import DEFAULT_CONFIG, EngineConfig
from .metrics import compute_system_metrics
from .models import (
    CongestionPrediction,
    DashboardOverview,
    ScheduleEntry,
    SectionPerformance,
    SystemMetrics,
    Train,
)
from .prediction import predict_section_congestion
from .recommendations import apply_recommendations
from .snapshot import SectionLike, TrainLike, coerce_sections, coerce_trains

logger = logging.getLogger(__name__)


def compute_metrics(
    trains: Optional[Iterable[TrainLike]],
    sections: Optional[Iterable[SectionLike]],
    config: Optional[EngineConfig] = None
) -> SystemMetrics:
    """
    Compute aggregate indicators for a snapshot.

    Empty inputs yield zeroed metrics.

    Raises:
        InvalidInputError: If a train or section is malformed
    """
    config = config or DEFAULT_CONFIG
    return compute_system_metrics(
        coerce_trains(trains), coerce_sections(sections), config
    )


def build_schedule(
    trains: Optional[Iterable[TrainLike]],
    sections: Optional[Iterable[SectionLike]],
    config: Optional[EngineConfig] = None,
    is_premium: Optional[PremiumClassifier] = None
) -> list[ScheduleEntry]:
    """
    Produce the adjusted schedule for a snapshot.

    This is the main entry point of the engine. Trains are allocated to
    their current sections in priority order without exceeding section
    capacity; each allocated train gets a recommended speed, a transit
    time estimate, an advisory action and a confidence score.

    Args:
        trains: Train snapshot (models or mappings)
        sections: Section snapshot (models or mappings)
        config: Engine configuration (defaults to DEFAULT_CONFIG)
        is_premium: Optional premium classifier overriding the
            configured designations and tiers

    Returns:
        Schedule entries in allocation order

    Raises:
        InvalidInputError: If a train or section is malformed

    Example:
        >>> from src.section_engine import build_schedule
        >>> schedule = build_schedule(
        ...     trains=[{"id": "T1", "name": "Express", "current_section": "A"}],
        ...     sections=[{"id": "A", "name": "Main line", "max_capacity": 2}],
        ... )
        >>> print(schedule[0].action.value, schedule[0].recommended_speed)
    """
    config = config or DEFAULT_CONFIG
    train_list = coerce_trains(trains)
    section_list = coerce_sections(sections)

    logger.debug(
        "Building schedule | trains=%s sections=%s",
        len(train_list),
        len(section_list),
    )

    if not train_list:
        return []

    metrics = compute_system_metrics(train_list, section_list, config)
    schedule = generate_schedule(
        train_list, section_list, metrics, config, is_premium=is_premium
    )
    adjusted = apply_global_adjustments(schedule, metrics, config)

    logger.debug(
        "Schedule built | entries=%s skipped=%s congestion=%.3f",
        len(adjusted),
        len(train_list) - len(adjusted),
        metrics.congestion_level,
    )
    return adjusted


def predict_congestion(
    sections: Optional[Iterable[SectionLike]],
    horizon_minutes: Optional[float] = None,
    config: Optional[EngineConfig] = None
) -> list[CongestionPrediction]:
    """
    Forecast congestion risk per section.

    Args:
        sections: Section snapshot (models or mappings)
        horizon_minutes: Forecast horizon; defaults to the configured
            horizon (15 minutes)
        config: Engine configuration

    Returns:
        One prediction per section, in input order

    Raises:
        InvalidInputError: If a section is malformed or the horizon is
            not positive
    """
    config = config or DEFAULT_CONFIG
    if horizon_minutes is None:
        horizon_minutes = config.default_horizon_minutes
    return predict_section_congestion(coerce_sections(sections), horizon_minutes, config)


def dashboard_overview(
    trains: Optional[Iterable[TrainLike]],
    sections: Optional[Iterable[SectionLike]],
    config: Optional[EngineConfig] = None
) -> DashboardOverview:
    """System overview: train counts, totals and section utilization."""
    config = config or DEFAULT_CONFIG
    return summarize_dashboard(coerce_trains(trains), coerce_sections(sections), config)


def section_performance(
    sections: Optional[Iterable[SectionLike]],
    config: Optional[EngineConfig] = None
) -> list[SectionPerformance]:
    """Per-section performance, most efficient first."""
    config = config or DEFAULT_CONFIG
    return rank_section_performance(coerce_sections(sections), config)


def apply_schedule(
    trains: Optional[Iterable[TrainLike]],
    recommendations: Iterable[ScheduleEntry]
) -> list[Train]:
    """Return train copies updated with the recommended speeds."""
    return apply_recommendations(coerce_trains(trains), list(recommendations))
