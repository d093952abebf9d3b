"""Tests for the public API surface of the reforma package.

Verifies that consumers can import everything they need from the top-level
``reforma`` package, use ``create_default_project`` for quick setup, and
round-trip results through JSON serialization.
"""

from __future__ import annotations

import json

import reforma
from reforma import (
    CostSummary,
    DependencyMode,
    Phase,
    PhaseQuantities,
    RenovationProject,
    Room,
    RoomTasks,
    ScheduleOverride,
    ScheduleResult,
    TaskFlag,
    aggregate_costs,
    create_default_project,
    derive_geometry,
    dump_overrides,
    extract_phase_quantities,
    resolve_schedule,
)


class TestImports:
    def test_all_names_resolve(self) -> None:
        for name in reforma.__all__:
            assert hasattr(reforma, name), name

    def test_all_is_sorted(self) -> None:
        assert reforma.__all__ == sorted(reforma.__all__)


class TestQuickStart:
    def test_default_project_round_trip(self) -> None:
        project = create_default_project()
        summary = project.estimate()
        restored = CostSummary.model_validate_json(summary.model_dump_json())
        assert restored == summary

    def test_schedule_round_trip(self) -> None:
        result = create_default_project().schedule()
        restored = ScheduleResult.model_validate(json.loads(result.model_dump_json()))
        assert restored == result

    def test_project_round_trip_keeps_override_modes(self) -> None:
        project = create_default_project()
        project.set_override(Phase.ROOFING, dependency=None)
        project.set_override(Phase.TILING, start_day=4)

        data = json.loads(project.model_dump_json(exclude_unset=True))
        restored = RenovationProject.model_validate(data)

        assert restored.overrides[Phase.ROOFING].dependency_mode is DependencyMode.NONE
        assert restored.overrides[Phase.TILING].dependency_mode is DependencyMode.INHERIT
        assert restored.schedule() == project.schedule()

    def test_functional_pipeline(self) -> None:
        room = Room(
            name="Bathroom", width=2.0, length=1.5, height=2.5,
            tasks=RoomTasks(demo_wall=True, ref_wall_ceramic=True),
        )
        assert derive_geometry(room).wall_area_net == 17.5

        quantities = extract_phase_quantities([room], [])
        assert quantities == PhaseQuantities(demolition_area=17.5, tiling_area=17.5)

        overrides = {Phase.TILING: ScheduleOverride(dependency=Phase.DEMOLITION)}
        result = resolve_schedule(quantities, overrides)
        assert [(t.id, t.start_day) for t in result.tasks] == [
            (Phase.DEMOLITION, 0), (Phase.TILING, 1),
        ]
        assert dump_overrides(overrides) == {"tiling": {"dependency": "demo"}}

        summary = aggregate_costs([room], create_default_project().unit_prices, [])
        assert summary.discipline_breakdown["Tiling"].total == 17.5 * 130.0
        assert TaskFlag.REF_WALL_CERAMIC in room.tasks.active_flags()
