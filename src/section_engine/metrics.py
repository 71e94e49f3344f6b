"""
System metrics for a train/section snapshot.
"""

from typing import Sequence

from .config import EngineConfig
from .models import Section, SystemMetrics, Train
from .snapshot import section_congestion


def compute_system_metrics(
    trains: Sequence[Train],
    sections: Sequence[Section],
    config: EngineConfig
) -> SystemMetrics:
    """
    Reduce a snapshot to aggregate indicators.

    average_delay = sum(delay) / n_trains        (0 with no trains)
    total_throughput = sum(section throughput)
    congestion_level = mean(occupants / capacity) (0 with no sections)

    Args:
        trains: Validated trains
        sections: Validated sections
        config: Engine configuration (capacity fallback)

    Returns:
        SystemMetrics for the snapshot
    """
    total_delay = sum(t.delay for t in trains)
    average_delay = total_delay / len(trains) if trains else 0.0

    total_throughput = sum(s.throughput for s in sections)

    if sections:
        congestion_level = sum(
            section_congestion(s, config) for s in sections
        ) / len(sections)
    else:
        congestion_level = 0.0

    return SystemMetrics(
        average_delay=average_delay,
        total_throughput=total_throughput,
        congestion_level=congestion_level,
        total_train_count=len(trains)
    )
