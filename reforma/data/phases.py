"""The nine construction phases of a renovation schedule.

Productivity rates are units of quantity per crew-day for a small
residential renovation crew. Infrastructure is counted in jobs (plumbing
rough-in, electrical panel, waterproofing), each taking five days.
"""

from __future__ import annotations

from dataclasses import dataclass

from reforma.models.enums import Phase


@dataclass(frozen=True)
class ScheduleTaskDefinition:
    """Static description of one schedule phase."""

    id: Phase
    name: str
    quantity_field: str
    rate: float
    default_dependency: Phase | None
    color: str


PRODUCTIVITY_RATES: dict[Phase, float] = {
    Phase.DEMOLITION: 20.0,
    Phase.ROOFING: 20.0,
    Phase.INFRASTRUCTURE: 0.2,
    Phase.MASONRY: 15.0,
    Phase.CEILING_FINISH: 20.0,
    Phase.TILING: 10.0,
    Phase.FIXTURE_INSTALL: 2.0,
    Phase.PAINTING: 30.0,
    Phase.ELECTRICAL_FINISH: 15.0,
}

# Days added after the last phase ends
COMPLETION_BUFFER_DAYS = 2

PHASE_DEFINITIONS: list[ScheduleTaskDefinition] = [
    ScheduleTaskDefinition(
        Phase.DEMOLITION, "1. Demolition & Removal",
        "demolition_area", PRODUCTIVITY_RATES[Phase.DEMOLITION],
        None, "bg-red-500",
    ),
    ScheduleTaskDefinition(
        Phase.ROOFING, "2. Roof & Structure",
        "roofing_area", PRODUCTIVITY_RATES[Phase.ROOFING],
        Phase.DEMOLITION, "bg-slate-600",
    ),
    ScheduleTaskDefinition(
        Phase.INFRASTRUCTURE, "3. Infrastructure (Electrical/Plumbing/Waterproofing)",
        "infrastructure_count", PRODUCTIVITY_RATES[Phase.INFRASTRUCTURE],
        Phase.DEMOLITION, "bg-blue-500",
    ),
    ScheduleTaskDefinition(
        Phase.MASONRY, "4. Plaster & Screed",
        "masonry_area", PRODUCTIVITY_RATES[Phase.MASONRY],
        Phase.INFRASTRUCTURE, "bg-orange-500",
    ),
    ScheduleTaskDefinition(
        Phase.CEILING_FINISH, "5. Ceilings (Gypsum/PVC)",
        "ceiling_finish_area", PRODUCTIVITY_RATES[Phase.CEILING_FINISH],
        Phase.MASONRY, "bg-indigo-400",
    ),
    ScheduleTaskDefinition(
        Phase.TILING, "6. Tiling (Floor/Wall)",
        "tiling_area", PRODUCTIVITY_RATES[Phase.TILING],
        Phase.MASONRY, "bg-emerald-500",
    ),
    ScheduleTaskDefinition(
        Phase.FIXTURE_INSTALL, "7. Doors & Windows",
        "fixture_install_count", PRODUCTIVITY_RATES[Phase.FIXTURE_INSTALL],
        Phase.MASONRY, "bg-yellow-600",
    ),
    ScheduleTaskDefinition(
        Phase.PAINTING, "8. General Painting",
        "painting_area", PRODUCTIVITY_RATES[Phase.PAINTING],
        Phase.TILING, "bg-cyan-500",
    ),
    ScheduleTaskDefinition(
        Phase.ELECTRICAL_FINISH, "9. Final Finishes",
        "electrical_finish_count", PRODUCTIVITY_RATES[Phase.ELECTRICAL_FINISH],
        Phase.PAINTING, "bg-purple-500",
    ),
]

PHASES_BY_ID: dict[Phase, ScheduleTaskDefinition] = {d.id: d for d in PHASE_DEFINITIONS}
