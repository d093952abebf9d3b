"""Room domain models for the Reforma cost and schedule engine."""

from __future__ import annotations

from uuid import uuid4

from pydantic import BaseModel, Field

from reforma.models.enums import LevelTag, TaskFlag

_TASK_KEYS = frozenset(TaskFlag)


def _new_id() -> str:
    return uuid4().hex[:9]


class RoomTasks(BaseModel):
    """Boolean work toggles for a room, one per surface task."""

    demo_floor: bool = False
    demo_wall: bool = False
    demo_ceiling: bool = False

    ref_floor_ceramic: bool = False
    ref_floor_screed: bool = False

    ref_wall_plaster: bool = False
    ref_wall_ceramic: bool = False
    ref_wall_paint: bool = False

    ref_ceiling_gypsum: bool = False
    ref_ceiling_plaster: bool = False
    ref_ceiling_paint: bool = False
    ref_ceiling_pvc: bool = False

    def is_active(self, key: str) -> bool:
        """Return whether the task named ``key`` is switched on.

        Keys that are not task flags (counter keys, typos, task types this
        version does not know) are never active.
        """
        if key not in _TASK_KEYS:
            return False
        return bool(getattr(self, key))

    def active_flags(self) -> list[TaskFlag]:
        return [flag for flag in TaskFlag if getattr(self, flag.value)]


class RoomGeometry(BaseModel):
    """Surface areas derived from a room's raw dimensions."""

    floor_area: float
    perimeter: float
    wall_area_gross: float
    wall_area_net: float
    ceiling_area: float


class Room(BaseModel):
    """A physical space to be renovated.

    Dimensions are in metres and are not validated here: zero or negative
    values simply yield zero or clamped areas downstream.
    """

    id: str = Field(default_factory=_new_id)
    name: str
    level: LevelTag = LevelTag.TERREO
    width: float
    length: float
    height: float
    deduction_area: float = 0.0
    switch_count: int = Field(default=0, ge=0)
    socket_count: int = Field(default=0, ge=0)
    tasks: RoomTasks = Field(default_factory=RoomTasks)

    @property
    def geometry(self) -> RoomGeometry:
        """Derived areas, recomputed on every access."""
        from reforma.geometry import derive_geometry

        return derive_geometry(self)
