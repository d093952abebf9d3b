"""Schedule models: phase quantities, user overrides and resolved tasks.

The override model keeps three dependency states apart:

* field never set        -> inherit the phase's default dependency
* field set to ``None``  -> no dependency, the phase starts on its manual day
* field set to a phase   -> depend on that phase

Pydantic records which fields were explicitly provided in
``model_fields_set``; that set, not the field value, is what tells the
first two states apart. Serialise overrides with ``exclude_unset=True`` to
keep the distinction across a JSON round trip.
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from reforma.models.enums import DependencyMode, Phase


class PhaseQuantities(BaseModel):
    """Aggregate work quantity feeding each schedule phase."""

    demolition_area: float = 0.0
    roofing_area: float = 0.0
    infrastructure_count: float = 0.0
    masonry_area: float = 0.0
    ceiling_finish_area: float = 0.0
    tiling_area: float = 0.0
    painting_area: float = 0.0
    fixture_install_count: float = 0.0
    electrical_finish_count: float = 0.0


class ScheduleOverride(BaseModel):
    """User-authored exception to one phase's computed schedule."""

    model_config = ConfigDict(extra="forbid")

    duration: int | None = Field(default=None, ge=0)
    start_day: int | None = Field(default=None, ge=0)
    dependency: Phase | None = None

    @property
    def dependency_mode(self) -> DependencyMode:
        if "dependency" not in self.model_fields_set:
            return DependencyMode.INHERIT
        if self.dependency is None:
            return DependencyMode.NONE
        return DependencyMode.PHASE

    def resolve_dependency(self, default: Phase | None) -> Phase | None:
        if self.dependency_mode is DependencyMode.INHERIT:
            return default
        return self.dependency

    def merged(self, update: ScheduleOverride) -> ScheduleOverride:
        """Shallow-merge ``update`` over this override.

        Only fields explicitly set on ``update`` replace existing ones.
        """
        data = self.model_dump(exclude_unset=True)
        data.update(update.model_dump(exclude_unset=True))
        return ScheduleOverride(**data)

    def without(self, *fields: str) -> ScheduleOverride:
        data = self.model_dump(exclude_unset=True)
        for name in fields:
            data.pop(name, None)
        return ScheduleOverride(**data)

    def is_empty(self) -> bool:
        return not self.model_fields_set


ScheduleOverrides = dict[Phase, ScheduleOverride]


class ScheduleTask(BaseModel):
    """A resolved, active phase with its computed position on the timeline."""

    id: Phase
    name: str
    duration: int
    start_day: int
    end_day: int
    color: str
    dependency: Phase | None = None
    is_overridden: bool = False


class ScheduleResult(BaseModel):
    """Ordered list of active phases plus the overall project length."""

    tasks: list[ScheduleTask] = Field(default_factory=list)
    total_days: int = 0

    @property
    def working_days(self) -> int:
        """Project length without the completion buffer, never negative."""
        from reforma.data.phases import COMPLETION_BUFFER_DAYS

        return max(0, self.total_days - COMPLETION_BUFFER_DAYS)

    @property
    def weeks(self) -> int:
        """Five-day working weeks, rounded up."""
        return math.ceil(self.working_days / 5)

    def task(self, phase: Phase | str) -> ScheduleTask | None:
        for task in self.tasks:
            if task.id == phase:
                return task
        return None

    def to_gantt_rows(self) -> list[dict[str, Any]]:
        """Rows for a Gantt chart, with offsets as percentages of the project."""
        from reforma.formatting import format_days

        rows: list[dict[str, Any]] = []
        for task in self.tasks:
            if self.total_days > 0:
                offset = task.start_day / self.total_days * 100.0
                width = task.duration / self.total_days * 100.0
            else:
                offset = 0.0
                width = 0.0
            rows.append({
                "id": task.id.value,
                "name": task.name,
                "start_day": task.start_day,
                "end_day": task.end_day,
                "duration": task.duration,
                "duration_formatted": format_days(task.duration),
                "color": task.color,
                "dependency": task.dependency.value if task.dependency else None,
                "offset_percent": offset,
                "width_percent": width,
            })
        return rows


def dump_overrides(overrides: ScheduleOverrides) -> dict[str, dict[str, Any]]:
    """JSON-ready form of an override map that keeps unset fields absent."""
    return {
        phase.value if isinstance(phase, Phase) else str(phase): override.model_dump(
            mode="json", exclude_unset=True,
        )
        for phase, override in overrides.items()
    }
