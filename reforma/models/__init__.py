"""Domain models for the Reforma cost and schedule engine."""

from reforma.models.enums import (
    CounterKey,
    DependencyMode,
    DisciplineGroup,
    LevelTag,
    Phase,
    PriceCategory,
    Surface,
    TaskFlag,
)
from reforma.models.estimate import (
    CostSplit,
    CostSummary,
    FixedCostLine,
    QuantityTotals,
    RoomCost,
)
from reforma.models.pricing import FixedCost, UnitPrice
from reforma.models.room import Room, RoomGeometry, RoomTasks
from reforma.models.schedule import (
    PhaseQuantities,
    ScheduleOverride,
    ScheduleOverrides,
    ScheduleResult,
    ScheduleTask,
)

__all__ = [
    "CostSplit",
    "CostSummary",
    "CounterKey",
    "DependencyMode",
    "DisciplineGroup",
    "FixedCost",
    "FixedCostLine",
    "LevelTag",
    "Phase",
    "PhaseQuantities",
    "PriceCategory",
    "QuantityTotals",
    "Room",
    "RoomCost",
    "RoomGeometry",
    "RoomTasks",
    "ScheduleOverride",
    "ScheduleOverrides",
    "ScheduleResult",
    "ScheduleTask",
    "Surface",
    "TaskFlag",
    "UnitPrice",
]
