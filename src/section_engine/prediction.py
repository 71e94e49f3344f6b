"""
Short-horizon congestion prediction.

The forecast uses the current load plus a single bounded trend term
derived from section throughput and average delay. No history is used.
"""

from typing import Sequence

from .config import EngineConfig
from .errors import InvalidInputError
from .models import CongestionPrediction, RiskLevel, Section
from .snapshot import section_congestion


def compute_trend(section: Section, config: EngineConfig) -> float:
    """
    Bounded load trend for a section.

    trend = clamp(throughput / 100 - average_delay / 600, -0.1, 0.1)
    """
    trend = (
        section.throughput / config.trend_throughput_scale
        - section.average_delay / config.trend_delay_scale
    )
    return max(-config.trend_bound, min(config.trend_bound, trend))


def classify_risk(predicted_load: float, config: EngineConfig) -> RiskLevel:
    """
    Classify predicted load.

        load > 0.8  -> high
        load > 0.6  -> medium
        otherwise   -> low
    """
    if predicted_load > config.high_risk_load:
        return RiskLevel.HIGH
    elif predicted_load > config.medium_risk_load:
        return RiskLevel.MEDIUM
    else:
        return RiskLevel.LOW


def predict_section_congestion(
    sections: Sequence[Section],
    horizon_minutes: float,
    config: EngineConfig
) -> list[CongestionPrediction]:
    """
    Forecast the load of each section ``horizon_minutes`` ahead.

    predicted = min(current + trend * horizon / 5, 1), floored at 0

    Args:
        sections: Validated sections
        horizon_minutes: Forecast horizon in minutes (must be positive)
        config: Engine configuration

    Returns:
        One prediction per section, in input order

    Raises:
        InvalidInputError: If the horizon is not a positive finite number
    """
    if (isinstance(horizon_minutes, bool)
            or not isinstance(horizon_minutes, (int, float))
            or not 0 < horizon_minutes < float("inf")):
        raise InvalidInputError(
            f"horizon_minutes must be a positive number, got {horizon_minutes!r}"
        )

    steps = horizon_minutes / config.horizon_step_minutes
    predictions = []

    for section in sections:
        current_load = section_congestion(section, config)
        predicted_load = current_load + compute_trend(section, config) * steps
        predicted_load = max(0.0, min(predicted_load, 1.0))

        predictions.append(CongestionPrediction(
            section_id=section.id,
            section_name=section.name,
            current_load=current_load,
            predicted_load=predicted_load,
            time_horizon=horizon_minutes,
            risk_level=classify_risk(predicted_load, config)
        ))

    return predictions
