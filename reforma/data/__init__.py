"""Reference data for the Reforma estimator: seed prices, sample rooms and phases."""

from reforma.data.phases import (
    COMPLETION_BUFFER_DAYS,
    PHASE_DEFINITIONS,
    PHASES_BY_ID,
    PRODUCTIVITY_RATES,
    ScheduleTaskDefinition,
)
from reforma.data.seed import SEED_FIXED_COSTS, SEED_ROOMS, SEED_UNIT_PRICES, new_room

__all__ = [
    "COMPLETION_BUFFER_DAYS",
    "PHASES_BY_ID",
    "PHASE_DEFINITIONS",
    "PRODUCTIVITY_RATES",
    "SEED_FIXED_COSTS",
    "SEED_ROOMS",
    "SEED_UNIT_PRICES",
    "ScheduleTaskDefinition",
    "new_room",
]
