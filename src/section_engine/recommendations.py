"""
Applying schedule recommendations to a train snapshot.

Produces updated copies for the caller to persist; inputs are untouched.
"""

import logging
from typing import Sequence

from .models import ScheduleEntry, Train

logger = logging.getLogger(__name__)


def apply_recommendations(
    trains: Sequence[Train],
    recommendations: Sequence[ScheduleEntry]
) -> list[Train]:
    """
    Set each recommended train's speed to its recommended speed.

    Entries naming an unknown train or carrying a zero speed are skipped.
    When a train appears in several entries the last one wins.

    Args:
        trains: Current train snapshot
        recommendations: Schedule entries to apply

    Returns:
        Updated train copies, in the order their entries were applied
    """
    trains_by_id = {t.id: t for t in trains}
    updated: dict[str, Train] = {}

    for entry in recommendations:
        train = trains_by_id.get(entry.train_id)
        if train is None or not entry.recommended_speed:
            logger.debug("Skipping recommendation | train=%s", entry.train_id)
            continue
        updated.pop(entry.train_id, None)
        updated[entry.train_id] = train.model_copy(
            update={"speed": entry.recommended_speed}
        )

    return list(updated.values())
