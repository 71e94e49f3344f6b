"""
Dashboard summaries derived from a snapshot.
"""

from typing import Sequence

from .config import EngineConfig
from .metrics import compute_system_metrics
from .models import (
    DashboardOverview,
    Section,
    SectionPerformance,
    SectionUtilization,
    Train,
    TrainStatus,
)
from .snapshot import effective_capacity, section_congestion


def _utilization_pct(section: Section, config: EngineConfig) -> float:
    return round(section_congestion(section, config) * 100, 2)


def summarize_dashboard(
    trains: Sequence[Train],
    sections: Sequence[Section],
    config: EngineConfig
) -> DashboardOverview:
    """
    Build the system overview shown on monitoring dashboards.

    Args:
        trains: Validated trains
        sections: Validated sections
        config: Engine configuration

    Returns:
        DashboardOverview with counts, totals and per-section utilization
    """
    metrics = compute_system_metrics(trains, sections, config)

    total_trains = len(trains)
    running = sum(1 for t in trains if t.status == TrainStatus.RUNNING)
    delayed = sum(1 for t in trains if t.status == TrainStatus.DELAYED)
    efficiency = round(running / total_trains * 100, 2) if total_trains else 0.0

    congestion = [
        SectionUtilization(
            section_id=s.id,
            section_name=s.name,
            utilization=_utilization_pct(s, config),
            current_trains=s.occupant_count,
            max_capacity=effective_capacity(s, config),
            status=s.status
        )
        for s in sections
    ]

    return DashboardOverview(
        total_trains=total_trains,
        running_trains=running,
        delayed_trains=delayed,
        average_delay=round(metrics.average_delay),
        total_throughput=metrics.total_throughput,
        total_passengers=sum(t.passengers for t in trains),
        system_efficiency=efficiency,
        congestion=congestion,
        metrics=metrics
    )


def section_efficiency(section: Section) -> float:
    """100 - average_delay / throughput; 0 for sections with no throughput."""
    if section.throughput <= 0:
        return 0.0
    return round(100 - section.average_delay / section.throughput, 2)


def rank_section_performance(
    sections: Sequence[Section],
    config: EngineConfig
) -> list[SectionPerformance]:
    """Section performance figures, most efficient first."""
    performance = [
        SectionPerformance(
            section_id=s.id,
            section_name=s.name,
            throughput=s.throughput,
            average_delay=s.average_delay,
            utilization=_utilization_pct(s, config),
            efficiency=section_efficiency(s),
            status=s.status,
            current_trains=s.occupant_count,
            max_capacity=effective_capacity(s, config)
        )
        for s in sections
    ]
    return sorted(performance, key=lambda p: -p.efficiency)
