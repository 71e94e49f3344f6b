"""
Fixed engine configuration.

All weights, thresholds and fallbacks used by the engine live here so
that a single frozen instance fully determines its behaviour.
"""

from pydantic import BaseModel, ConfigDict, Field


class EngineConfig(BaseModel):
    """Constants for scheduling, adjustment and prediction."""

    model_config = ConfigDict(frozen=True)

    # Fallbacks for missing or zero snapshot values
    default_capacity: int = Field(default=3, gt=0)
    default_max_speed: float = Field(default=120.0, gt=0)
    default_speed_limit: float = Field(default=120.0, gt=0)
    default_section_length: float = Field(default=1000.0, gt=0)

    # Speed bounds
    min_speed: float = Field(default=20.0, gt=0)
    speed_ceiling: float = Field(default=150.0, gt=0)

    # Priority ordering
    premium_boost: int = Field(default=2, ge=0)
    premium_designations: tuple[str, ...] = ("Rajdhani", "Vande Bharat")
    premium_tiers: tuple[str, ...] = ()

    # Speed recommender
    congestion_slowdown_threshold: float = 0.7
    congestion_slowdown_factor: float = 0.8
    delay_saturation_seconds: float = Field(default=60.0, gt=0)
    delay_recovery_threshold: float = 0.5
    delay_recovery_factor: float = 1.1

    # Action classifier
    slow_down_congestion: float = 0.8
    speed_up_delay_seconds: float = 300.0
    speed_up_max_congestion: float = 0.5
    proceed_max_congestion: float = 0.3

    # Global adjustment pass
    global_delay_threshold: float = 300.0
    global_delay_min_priority: int = 3
    global_delay_factor: float = 1.15
    global_congestion_threshold: float = 0.7
    global_congestion_factor: float = 0.9

    # Confidence scoring
    confidence_base: float = 0.70
    confidence_low_congestion_bonus: float = 0.15
    confidence_low_congestion_threshold: float = 0.5
    confidence_low_delay_bonus: float = 0.10
    confidence_low_delay_threshold: float = 180.0
    confidence_priority_bonus: float = 0.05
    confidence_priority_threshold: int = 4
    confidence_cap: float = 0.95

    # Congestion predictor
    default_horizon_minutes: float = Field(default=15.0, gt=0)
    horizon_step_minutes: float = Field(default=5.0, gt=0)
    trend_throughput_scale: float = Field(default=100.0, gt=0)
    trend_delay_scale: float = Field(default=600.0, gt=0)
    trend_bound: float = Field(default=0.1, ge=0)
    high_risk_load: float = 0.8
    medium_risk_load: float = 0.6


DEFAULT_CONFIG = EngineConfig()
