"""Construction schedule from room work quantities and user overrides.

Two steps:

1. ``extract_phase_quantities`` sums room areas and fixed-cost quantities
   into the nine phase buckets.
2. ``resolve_schedule`` turns those quantities into durations, applies the
   user's overrides and places every active phase on the timeline after
   its dependency.

Resolution is total. Zero quantities drop a phase, dependencies on
inactive phases fall back to the manual start day, and dependency cycles
built from overrides are cut at day 0. Nothing here raises.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from reforma.classification import area_for, phase_rules_for, surface_for
from reforma.data.phases import COMPLETION_BUFFER_DAYS, PHASE_DEFINITIONS
from reforma.exceptions import UnknownPhaseError
from reforma.geometry import derive_geometry
from reforma.models.enums import Phase, TaskFlag
from reforma.models.schedule import (
    PhaseQuantities,
    ScheduleOverride,
    ScheduleResult,
    ScheduleTask,
)

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from reforma.data.phases import ScheduleTaskDefinition
    from reforma.models.pricing import FixedCost
    from reforma.models.room import Room
    from reforma.models.schedule import ScheduleOverrides

logger = logging.getLogger(__name__)

# Which phase bucket each room task feeds. Gypsum and PVC ceilings are
# different tasks but share one ceiling-finish crew.
ROOM_TASK_PHASE_FIELDS: dict[TaskFlag, str] = {
    TaskFlag.DEMO_FLOOR: "demolition_area",
    TaskFlag.DEMO_WALL: "demolition_area",
    TaskFlag.DEMO_CEILING: "demolition_area",
    TaskFlag.REF_FLOOR_SCREED: "masonry_area",
    TaskFlag.REF_WALL_PLASTER: "masonry_area",
    TaskFlag.REF_CEILING_PLASTER: "masonry_area",
    TaskFlag.REF_CEILING_GYPSUM: "ceiling_finish_area",
    TaskFlag.REF_CEILING_PVC: "ceiling_finish_area",
    TaskFlag.REF_FLOOR_CERAMIC: "tiling_area",
    TaskFlag.REF_WALL_CERAMIC: "tiling_area",
    TaskFlag.REF_WALL_PAINT: "painting_area",
    TaskFlag.REF_CEILING_PAINT: "painting_area",
}


def extract_phase_quantities(
    rooms: Sequence[Room],
    fixed_costs: Sequence[FixedCost],
) -> PhaseQuantities:
    """Aggregate the work quantity behind each schedule phase."""
    totals: dict[str, float] = dict.fromkeys(PhaseQuantities.model_fields, 0.0)

    for room in rooms:
        geometry = derive_geometry(room)
        for flag, field in ROOM_TASK_PHASE_FIELDS.items():
            if room.tasks.is_active(flag):
                totals[field] += area_for(geometry, surface_for(flag))

    for fixed_cost in fixed_costs:
        for rule in phase_rules_for(fixed_cost):
            totals[rule.field] += rule.contribution(fixed_cost)

    return PhaseQuantities(**totals)


def auto_duration(quantity: float, rate: float) -> int:
    """Whole days needed for ``quantity`` at ``rate`` units per day.

    The quotient is rounded before ``ceil`` so that float noise
    (``1.1 / 0.1 == 11.000000000000002``) does not add a day.
    """
    if rate <= 0 or quantity <= 0:
        return 0
    return math.ceil(round(quantity / rate, 9))


@dataclass(frozen=True)
class _PhaseNode:
    definition: ScheduleTaskDefinition
    duration: int
    dependency: Phase | None
    manual_start: int
    overridden: bool


def _build_arena(
    quantities: PhaseQuantities,
    overrides: Mapping[Phase, ScheduleOverride],
    definitions: Sequence[ScheduleTaskDefinition],
) -> dict[Phase, _PhaseNode]:
    """Active phases keyed by id, with durations and dependencies decided."""
    arena: dict[Phase, _PhaseNode] = {}
    for definition in definitions:
        override = overrides.get(definition.id)
        quantity = getattr(quantities, definition.quantity_field)
        auto = auto_duration(quantity, definition.rate)

        forced_duration = override.duration if override is not None else None
        if auto <= 0 and forced_duration is None:
            continue

        if override is None:
            arena[definition.id] = _PhaseNode(
                definition=definition,
                duration=max(1, auto),
                dependency=definition.default_dependency,
                manual_start=0,
                overridden=False,
            )
            continue

        arena[definition.id] = _PhaseNode(
            definition=definition,
            duration=forced_duration if forced_duration is not None else max(1, auto),
            dependency=override.resolve_dependency(definition.default_dependency),
            manual_start=override.start_day if override.start_day is not None else 0,
            overridden=not override.is_empty(),
        )
    return arena


def _effective_dependency(arena: dict[Phase, _PhaseNode], node: _PhaseNode) -> Phase | None:
    if node.dependency is None:
        return None
    if node.dependency not in arena:
        logger.debug(
            "Phase %s depends on inactive phase %s; using its manual start",
            node.definition.id, node.dependency,
        )
        return None
    return node.dependency


def _start_day(arena: dict[Phase, _PhaseNode], phase: Phase) -> int:
    """Walk the dependency chain from ``phase`` back to its anchor.

    Each step adds the dependency's duration. The walk ends at a phase with
    no active dependency (its manual start) or, on reaching a phase already
    visited in this walk, treats that phase as starting on day 0.
    """
    visited = {phase}
    offset = 0
    node = arena[phase]
    while True:
        dependency = _effective_dependency(arena, node)
        if dependency is None:
            return offset + node.manual_start

        dependency_node = arena[dependency]
        offset += dependency_node.duration
        if dependency in visited:
            logger.warning(
                "Dependency cycle through %s while placing %s; anchoring it at day 0",
                dependency, phase,
            )
            return offset
        visited.add(dependency)
        node = dependency_node


def resolve_schedule(
    quantities: PhaseQuantities,
    overrides: Mapping[Phase, ScheduleOverride] | None = None,
    definitions: Sequence[ScheduleTaskDefinition] = PHASE_DEFINITIONS,
) -> ScheduleResult:
    """Place every active phase on the timeline.

    Args:
        quantities: Work quantities from ``extract_phase_quantities``.
        overrides: Sparse per-phase user overrides. Keys that are not
            phases are ignored.
        definitions: Phase table; defaults to the nine standard phases.

    Returns:
        Tasks sorted by start day (ties keep phase order) and the total
        project length including the completion buffer, or 0 days when no
        phase is active.
    """
    arena = _build_arena(quantities, overrides or {}, definitions)

    tasks: list[ScheduleTask] = []
    for phase_id, node in arena.items():
        start = _start_day(arena, phase_id)
        tasks.append(ScheduleTask(
            id=phase_id,
            name=node.definition.name,
            duration=node.duration,
            start_day=start,
            end_day=start + node.duration,
            color=node.definition.color,
            dependency=_effective_dependency(arena, node),
            is_overridden=node.overridden,
        ))

    tasks.sort(key=lambda t: t.start_day)

    total_days = 0
    if tasks:
        total_days = max(t.end_day for t in tasks) + COMPLETION_BUFFER_DAYS

    return ScheduleResult(tasks=tasks, total_days=total_days)


# ---------------------------------------------------------------------------
# Override mutation
# ---------------------------------------------------------------------------


def _as_phase(phase_id: Phase | str) -> Phase:
    try:
        return Phase(phase_id)
    except ValueError:
        raise UnknownPhaseError(phase_id) from None


def apply_override(
    overrides: ScheduleOverrides,
    phase_id: Phase | str,
    **fields: Any,
) -> ScheduleOverrides:
    """Return a new override map with ``fields`` merged into one phase.

    Only the keyword arguments actually passed are recorded, so
    ``dependency=None`` stores an explicit "no dependency" while leaving
    ``dependency`` out keeps whatever was there before.

    Raises:
        UnknownPhaseError: If ``phase_id`` is not one of the nine phases.
    """
    phase = _as_phase(phase_id)
    update = ScheduleOverride(**fields)
    current = overrides.get(phase, ScheduleOverride())

    merged = dict(overrides)
    merged[phase] = current.merged(update)
    return merged


def clear_override(
    overrides: ScheduleOverrides,
    phase_id: Phase | str,
    *fields: str,
) -> ScheduleOverrides:
    """Return a new override map without some or all of a phase's fields.

    With no ``fields`` the phase's whole override is dropped. An override
    left with no fields is removed from the map.

    Raises:
        UnknownPhaseError: If ``phase_id`` is not one of the nine phases.
    """
    phase = _as_phase(phase_id)
    cleared = dict(overrides)
    if phase not in cleared:
        return cleared

    if not fields:
        del cleared[phase]
        return cleared

    remaining = cleared[phase].without(*fields)
    if remaining.is_empty():
        del cleared[phase]
    else:
        cleared[phase] = remaining
    return cleared
