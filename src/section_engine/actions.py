"""
Advisory action classification.
"""

from typing import Optional

from .config import EngineConfig
from .models import AdvisoryAction, Section, Train
from .snapshot import section_congestion


def classify_action(
    train: Train,
    section: Optional[Section],
    config: EngineConfig
) -> AdvisoryAction:
    """
    Map a train and its section's congestion to an advisory action.

    Rules (first match wins):
        congestion > 0.8                      -> slow_down
        delay > 300 s and congestion < 0.5    -> speed_up
        congestion < 0.3                      -> proceed
        otherwise                             -> maintain

    A train without a resolvable section is told to maintain.
    """
    if section is None:
        return AdvisoryAction.MAINTAIN

    congestion = section_congestion(section, config)

    if congestion > config.slow_down_congestion:
        return AdvisoryAction.SLOW_DOWN
    elif (train.delay > config.speed_up_delay_seconds
          and congestion < config.speed_up_max_congestion):
        return AdvisoryAction.SPEED_UP
    elif congestion < config.proceed_max_congestion:
        return AdvisoryAction.PROCEED
    else:
        return AdvisoryAction.MAINTAIN
