"""
Pydantic models for the section-capacity engine.

Inputs (trains, sections) are read-only snapshots supplied by the caller.
Outputs (metrics, schedule entries, predictions) are built fresh per call.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class TrainStatus(str, Enum):
    """Operational status of a train."""
    RUNNING = "running"
    STOPPED = "stopped"
    DELAYED = "delayed"
    MAINTENANCE = "maintenance"


class SectionStatus(str, Enum):
    """Operational status of a track section."""
    OPERATIONAL = "operational"
    MAINTENANCE = "maintenance"
    CONGESTED = "congested"
    BLOCKED = "blocked"


class AdvisoryAction(str, Enum):
    """Discrete advisory action for a scheduled train."""
    SLOW_DOWN = "slow_down"
    SPEED_UP = "speed_up"
    PROCEED = "proceed"
    MAINTAIN = "maintain"


class RiskLevel(str, Enum):
    """Predicted congestion risk for a section."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# --- Input Models ---

class Train(BaseModel):
    """Snapshot of a single train."""

    model_config = ConfigDict(
        allow_inf_nan=False,
        json_schema_extra={
            "example": {
                "id": "T-12951",
                "name": "Mumbai Rajdhani",
                "current_section": "SEC-01",
                "max_speed": 130,
                "delay": 240,
                "priority": 5,
                "passengers": 1100
            }
        }
    )

    id: str = Field(..., min_length=1, description="Train identifier")
    name: str = Field(default="", description="Display name")
    current_section: Optional[str] = Field(
        default=None,
        description="Identifier of the section the train currently occupies"
    )
    max_speed: Optional[float] = Field(
        default=None,
        strict=True,
        ge=0,
        description="Maximum speed in km/h (fallback 120 when unset)"
    )
    speed: float = Field(default=0, ge=0, strict=True, description="Current speed in km/h")
    delay: float = Field(default=0, ge=0, strict=True, description="Current delay in seconds")
    priority: int = Field(default=1, ge=1, le=5, strict=True, description="Priority (1-5)")
    passengers: int = Field(default=0, ge=0, strict=True, description="Passenger count")
    status: TrainStatus = Field(default=TrainStatus.RUNNING)
    service_tier: Optional[str] = Field(
        default=None,
        description="Service tier used for premium classification"
    )


class Section(BaseModel):
    """Snapshot of a single track section."""

    model_config = ConfigDict(
        allow_inf_nan=False,
        json_schema_extra={
            "example": {
                "id": "SEC-01",
                "name": "Kalyan - Karjat",
                "max_capacity": 3,
                "speed_limit": 110,
                "length": 42000,
                "throughput": 12,
                "average_delay": 180,
                "current_trains": ["T-12951", "T-11007"]
            }
        }
    )

    id: str = Field(..., min_length=1, description="Section identifier")
    name: str = Field(default="", description="Display name")
    max_capacity: Optional[int] = Field(
        default=None,
        strict=True,
        ge=0,
        description="Maximum simultaneous trains (fallback 3 when unset or zero)"
    )
    speed_limit: Optional[float] = Field(
        default=None,
        strict=True,
        ge=0,
        description="Speed limit in km/h (fallback 120 when unset)"
    )
    length: Optional[float] = Field(
        default=None,
        strict=True,
        ge=0,
        description="Section length in metres (fallback 1000 when unset)"
    )
    throughput: float = Field(default=0, ge=0, strict=True, description="Trains per hour")
    average_delay: float = Field(default=0, ge=0, strict=True, description="Average delay (seconds)")
    current_trains: list[str] = Field(
        default_factory=list,
        description="Trains currently recorded in the section (may exceed capacity)"
    )
    status: SectionStatus = Field(default=SectionStatus.OPERATIONAL)

    @property
    def occupant_count(self) -> int:
        """Number of trains recorded in the section."""
        return len(self.current_trains)


# --- Output Models ---

class SystemMetrics(BaseModel):
    """Aggregate indicators for a snapshot."""

    average_delay: float = Field(description="Mean train delay (seconds)")
    total_throughput: float = Field(description="Sum of section throughput (trains/h)")
    congestion_level: float = Field(
        description="Mean occupants / effective capacity over sections"
    )
    total_train_count: int = Field(description="Number of trains in the snapshot")


class ScheduleEntry(BaseModel):
    """Recommendation for one allocated train."""

    train_id: str
    train_name: str
    section_id: str
    recommended_speed: float = Field(description="Recommended speed (km/h)")
    estimated_time: int = Field(description="Estimated section transit time (seconds)")
    priority: int = Field(description="Priority at scheduling time")
    action: AdvisoryAction
    confidence: Optional[float] = Field(
        default=None,
        ge=0,
        le=1,
        description="Heuristic confidence, set by the adjustment pass"
    )


class CongestionPrediction(BaseModel):
    """Short-horizon congestion forecast for a section."""

    section_id: str
    section_name: str
    current_load: float = Field(description="Occupants / effective capacity")
    predicted_load: float = Field(ge=0, le=1, description="Forecast load ratio")
    time_horizon: float = Field(description="Forecast horizon (minutes)")
    risk_level: RiskLevel


class SectionUtilization(BaseModel):
    """Utilization snapshot of a section."""

    section_id: str
    section_name: str
    utilization: float = Field(description="Occupants / effective capacity (percent)")
    current_trains: int
    max_capacity: int = Field(description="Effective capacity")
    status: SectionStatus


class SectionPerformance(BaseModel):
    """Performance figures used to rank sections."""

    section_id: str
    section_name: str
    throughput: float
    average_delay: float
    utilization: float = Field(description="Percent of effective capacity in use")
    efficiency: float = Field(description="100 - average_delay / throughput, 0 if idle")
    status: SectionStatus
    current_trains: int
    max_capacity: int


class DashboardOverview(BaseModel):
    """System-wide overview for monitoring dashboards."""

    total_trains: int
    running_trains: int
    delayed_trains: int
    average_delay: int = Field(description="Mean delay rounded to whole seconds")
    total_throughput: float
    total_passengers: int
    system_efficiency: float = Field(description="Percent of trains running")
    congestion: list[SectionUtilization]
    metrics: SystemMetrics
