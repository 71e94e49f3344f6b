"""
Priority ordering, section occupancy allocation and schedule generation.

Trains are walked once in priority order. Each section accepts at most
its effective capacity of trains per pass; trains that lose the race
get no entry in this pass and are not retried.
"""

import logging
from typing import Callable, Iterable, Optional, Sequence

from .actions import classify_action
from .config import EngineConfig
from .models import ScheduleEntry, Section, SystemMetrics, Train
from .snapshot import effective_capacity, index_sections, resolve_section
from .speed import estimate_section_time, recommend_speed

logger = logging.getLogger(__name__)

PremiumClassifier = Callable[[Train], bool]


def make_premium_classifier(
    designations: Iterable[str] = (),
    tiers: Iterable[str] = ()
) -> PremiumClassifier:
    """
    Build a classifier recognising premium services.

    A train is premium when its service tier is one of ``tiers`` or its
    name contains one of ``designations``.
    """
    designations = tuple(d for d in designations if d)
    tiers = frozenset(tiers)

    def is_premium(train: Train) -> bool:
        if train.service_tier is not None and train.service_tier in tiers:
            return True
        return any(d in train.name for d in designations)

    return is_premium


def priority_score(
    train: Train,
    is_premium: PremiumClassifier,
    config: EngineConfig
) -> int:
    """Base priority plus the premium boost when applicable."""
    boost = config.premium_boost if is_premium(train) else 0
    return train.priority + boost


def order_trains(
    trains: Sequence[Train],
    is_premium: PremiumClassifier,
    config: EngineConfig
) -> list[Train]:
    """
    Sort trains by priority score, then delay, both descending.

    The sort is stable: fully tied trains keep their input order.
    """
    return sorted(
        trains,
        key=lambda t: (-priority_score(t, is_premium, config), -t.delay)
    )


class SectionOccupancy:
    """Per-pass allocation bucket for a single section."""

    def __init__(self, section_id: str, capacity: int):
        self.section_id = section_id
        self.capacity = capacity
        self.train_ids: list[str] = []

    @property
    def is_full(self) -> bool:
        return len(self.train_ids) >= self.capacity

    def assign(self, train_id: str) -> None:
        if self.is_full:
            raise ValueError(f"section {self.section_id} is at capacity")
        self.train_ids.append(train_id)


def generate_schedule(
    trains: Sequence[Train],
    sections: Sequence[Section],
    metrics: SystemMetrics,
    config: EngineConfig,
    is_premium: Optional[PremiumClassifier] = None
) -> list[ScheduleEntry]:
    """
    Allocate trains to their sections and build raw schedule entries.

    Steps:
        1. Order trains by premium-boosted priority, then delay
        2. Create one occupancy bucket per section
        3. Walk the ordered trains once, skipping trains without a
           section and trains whose section is already full
        4. For each allocated train compute speed, transit time, action

    Args:
        trains: Validated trains
        sections: Validated sections
        metrics: System metrics for the same snapshot
        config: Engine configuration
        is_premium: Premium classifier; defaults to the configured
            designations and tiers

    Returns:
        Schedule entries in allocation order (confidence not yet set)
    """
    if not trains:
        return []

    if is_premium is None:
        is_premium = make_premium_classifier(
            config.premium_designations, config.premium_tiers
        )

    sections_by_id = index_sections(sections)
    occupancy = {
        section_id: SectionOccupancy(section_id, effective_capacity(section, config))
        for section_id, section in sections_by_id.items()
    }

    schedule: list[ScheduleEntry] = []

    for train in order_trains(trains, is_premium, config):
        section = resolve_section(train, sections_by_id)
        if section is None:
            logger.debug("Skipping train without section | train=%s", train.id)
            continue

        bucket = occupancy[section.id]
        if bucket.is_full:
            logger.debug(
                "Section at capacity | train=%s section=%s capacity=%s",
                train.id,
                section.id,
                bucket.capacity,
            )
            continue

        speed = recommend_speed(train, section, config)
        schedule.append(ScheduleEntry(
            train_id=train.id,
            train_name=train.name,
            section_id=section.id,
            recommended_speed=speed,
            estimated_time=estimate_section_time(section, speed, config),
            priority=train.priority,
            action=classify_action(train, section, config)
        ))
        bucket.assign(train.id)

    return schedule
