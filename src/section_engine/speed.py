"""
Speed recommendation and section transit time.

Speeds are km/h, section lengths metres, transit times seconds.
"""

import math
from typing import Optional

from .config import EngineConfig
from .models import Section, Train
from .snapshot import section_congestion


# Converts metres / (km/h) into seconds
TRANSIT_TIME_FACTOR = 3.6


def recommend_speed(
    train: Train,
    section: Optional[Section],
    config: EngineConfig
) -> float:
    """
    Compute a bounded speed recommendation for a train.

    Only one adjustment is applied:
        congestion > 0.7            -> speed * 0.8
        else delay_factor > 0.5     -> speed * 1.1
    where delay_factor = min(delay / 60, 1).

    The result is clamped to the section speed limit and then floored
    at the minimum speed. A train without a section keeps its base speed.

    Args:
        train: Train to advise
        section: The train's resolved current section, if any
        config: Engine configuration

    Returns:
        Recommended speed in km/h
    """
    base_speed = train.max_speed or config.default_max_speed

    if section is None:
        return base_speed

    congestion = section_congestion(section, config)
    delay_factor = min(train.delay / config.delay_saturation_seconds, 1.0)

    speed = base_speed
    if congestion > config.congestion_slowdown_threshold:
        speed *= config.congestion_slowdown_factor
    elif delay_factor > config.delay_recovery_threshold:
        speed *= config.delay_recovery_factor

    speed = min(speed, section.speed_limit or config.default_speed_limit)
    return max(speed, config.min_speed)


def estimate_section_time(
    section: Optional[Section],
    speed: float,
    config: EngineConfig
) -> int:
    """
    Estimate the time to traverse a section at a given speed.

    t = round(length / speed * 3.6), rounding halves up.

    Returns:
        Transit time in seconds, 0 if there is no section or no speed
    """
    if section is None or not speed:
        return 0
    length = section.length or config.default_section_length
    return int(math.floor(length / speed * TRANSIT_TIME_FACTOR + 0.5))
