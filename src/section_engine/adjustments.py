"""
Global adjustment pass and confidence scoring.

Applied after schedule generation using system-wide metrics.
Entries are never modified in place or reordered.
"""

from typing import Sequence

from .config import EngineConfig
from .models import ScheduleEntry, SystemMetrics


def score_confidence(
    entry: ScheduleEntry,
    metrics: SystemMetrics,
    config: EngineConfig
) -> float:
    """
    Heuristic confidence for a recommendation.

    0.70 base
        + 0.15 if congestion level < 0.5
        + 0.10 if average delay < 180 s
        + 0.05 if priority >= 4
    capped at 0.95.
    """
    confidence = config.confidence_base
    if metrics.congestion_level < config.confidence_low_congestion_threshold:
        confidence += config.confidence_low_congestion_bonus
    if metrics.average_delay < config.confidence_low_delay_threshold:
        confidence += config.confidence_low_delay_bonus
    if entry.priority >= config.confidence_priority_threshold:
        confidence += config.confidence_priority_bonus
    return round(min(confidence, config.confidence_cap), 4)


def adjust_speed(
    entry: ScheduleEntry,
    metrics: SystemMetrics,
    config: EngineConfig
) -> float:
    """
    Apply the system-wide speed corrections to one entry.

    The two corrections are independent and applied in a fixed order:
        1. average delay > 300 s and priority >= 3 -> * 1.15, capped at 150
        2. congestion level > 0.7                  -> * 0.9

    The result is kept within [min_speed, speed_ceiling].
    """
    speed = entry.recommended_speed

    if (metrics.average_delay > config.global_delay_threshold
            and entry.priority >= config.global_delay_min_priority):
        speed = min(speed * config.global_delay_factor, config.speed_ceiling)

    if metrics.congestion_level > config.global_congestion_threshold:
        speed *= config.global_congestion_factor

    return min(max(speed, config.min_speed), config.speed_ceiling)


def apply_global_adjustments(
    schedule: Sequence[ScheduleEntry],
    metrics: SystemMetrics,
    config: EngineConfig
) -> list[ScheduleEntry]:
    """
    Return a new schedule with adjusted speeds and confidence scores.

    Args:
        schedule: Raw schedule from generate_schedule
        metrics: System metrics for the same snapshot
        config: Engine configuration

    Returns:
        New list of entries in the same order
    """
    return [
        entry.model_copy(update={
            "recommended_speed": adjust_speed(entry, metrics, config),
            "confidence": score_confidence(entry, metrics, config),
        })
        for entry in schedule
    ]
