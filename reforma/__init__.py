"""Reforma renovation cost and schedule engine.

Usage::

    from reforma import create_default_project

    project = create_default_project()
    summary = project.estimate()
    schedule = project.schedule()
"""

from reforma.engine import aggregate_costs, sync_point_quantities, task_cost
from reforma.factory import create_default_project, create_empty_project
from reforma.geometry import derive_geometry
from reforma.models.enums import (
    CounterKey,
    DependencyMode,
    DisciplineGroup,
    LevelTag,
    Phase,
    PriceCategory,
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
    ScheduleResult,
    ScheduleTask,
    dump_overrides,
)
from reforma.project import RenovationProject
from reforma.scheduling import (
    apply_override,
    clear_override,
    extract_phase_quantities,
    resolve_schedule,
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
    "RenovationProject",
    "Room",
    "RoomCost",
    "RoomGeometry",
    "RoomTasks",
    "ScheduleOverride",
    "ScheduleResult",
    "ScheduleTask",
    "TaskFlag",
    "UnitPrice",
    "aggregate_costs",
    "apply_override",
    "clear_override",
    "create_default_project",
    "create_empty_project",
    "derive_geometry",
    "dump_overrides",
    "extract_phase_quantities",
    "resolve_schedule",
    "sync_point_quantities",
    "task_cost",
]
